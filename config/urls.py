from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('django-admin/', admin.site.urls),
    path('', include('apps.admission.urls', namespace='admission')),
]

from django.conf import settings
from django.conf.urls.static import static

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)


# ============================================
# ERROR HANDLERS
# ============================================

handler404 = 'apps.core.views.custom_page_not_found_view'
handler500 = 'apps.core.views.custom_error_view'
handler403 = 'apps.core.views.custom_permission_denied_view'
handler400 = 'apps.core.views.custom_bad_request_view'
