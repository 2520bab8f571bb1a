from django.contrib import admin
from django.utils.translation import gettext_lazy as _
from .models import AdmissionRecord, Sibling, Vaccination


class ReadOnlyAdminMixin:
    """Submissions are write-once; the admin only browses them"""

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class SiblingInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = Sibling
    fields = ['position', 'name', 'class_grade', 'roll_number', 'branch']
    readonly_fields = fields
    extra = 0


class VaccinationInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = Vaccination
    fields = ['position', 'vaccine_name', 'vaccination_date']
    readonly_fields = fields
    extra = 0


@admin.register(AdmissionRecord)
class AdmissionRecordAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ['student_full_name', 'school_branch', 'standard_applying_for',
                    'father_mobile_number', 'submitted_on']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [SiblingInline, VaccinationInline]

    def submitted_on(self, obj):
        return obj.created_at.strftime('%d/%m/%Y')
    submitted_on.short_description = _("Submitted")
    submitted_on.admin_order_field = 'created_at'
