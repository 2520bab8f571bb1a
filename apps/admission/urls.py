from django.urls import path
from . import views

app_name = 'admission'

urlpatterns = [
    # Public URLs
    path('', views.AdmissionFormView.as_view(), name='apply'),
    path('submitted/<uuid:pk>/', views.AdmissionSubmittedView.as_view(), name='submitted'),

    # Staff URLs
    path('admin/admissions/', views.AdmissionListView.as_view(), name='staff_list'),
    path('admin/admissions/<uuid:pk>/', views.AdmissionDetailView.as_view(), name='staff_detail'),
]
