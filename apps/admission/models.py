from django.core.validators import RegexValidator
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel, UUIDModel
from encrypted_model_fields.fields import EncryptedCharField

from .constants import (
    AdmissionType,
    BloodGroup,
    CasteCategory,
    CURRENT_STANDARD_CHOICES,
    DEFAULT_NATIONALITY,
    FormPurpose,
    Gender,
    Religion,
    SchoolBranch,
    SECTION_CHOICES,
    STANDARD_CHOICES,
)

aadhaar_regex = RegexValidator(
    regex=r'^[0-9]{12}\Z',
    message=_('Aadhaar must be 12 digits'),
)

mobile_regex = RegexValidator(
    regex=r'^[0-9]{10}\Z',
    message=_('Mobile must be 10 digits'),
)


# ==================== ADMISSION RECORD ====================

class AdmissionRecord(BaseModel):
    """
    One submitted admission form.

    Records are write-once: they are created together with their sibling and
    vaccination rows by ``AdmissionService.submit`` and never edited afterwards.
    """

    # Section 1: Basic Information
    school_branch = models.CharField(
        max_length=50,
        choices=SchoolBranch.CHOICES,
        db_index=True,
        verbose_name=_("School Branch")
    )
    purpose_of_form = models.CharField(
        max_length=50,
        choices=FormPurpose.CHOICES,
        verbose_name=_("Purpose of Form")
    )
    academic_year = models.CharField(
        max_length=20,
        verbose_name=_("Academic Year"),
        help_text=_("e.g., 2025-2026")
    )

    # Section 2: Student's Personal Details
    student_full_name = models.CharField(max_length=200, verbose_name=_("Student Full Name"))
    date_of_birth = models.CharField(max_length=20, verbose_name=_("Date of Birth"))
    gender = models.CharField(max_length=10, choices=Gender.CHOICES, verbose_name=_("Gender"))
    nationality = models.CharField(
        max_length=50,
        default=DEFAULT_NATIONALITY,
        verbose_name=_("Nationality")
    )
    religion = models.CharField(
        max_length=50,
        choices=Religion.CHOICES,
        blank=True,
        verbose_name=_("Religion")
    )
    caste_category = models.CharField(
        max_length=20,
        choices=CasteCategory.CHOICES,
        verbose_name=_("Caste Category")
    )
    sub_caste = models.CharField(max_length=100, blank=True, verbose_name=_("Sub-Caste"))
    aadhaar_number = EncryptedCharField(
        max_length=12,
        validators=[aadhaar_regex],
        verbose_name=_("Aadhaar Number")
    )
    blood_group = models.CharField(
        max_length=10,
        choices=BloodGroup.CHOICES,
        blank=True,
        verbose_name=_("Blood Group")
    )
    identification_marks = models.TextField(blank=True, verbose_name=_("Identification Marks"))
    special_needs_or_disabilities = models.TextField(
        blank=True,
        verbose_name=_("Special Needs or Disabilities")
    )
    current_residential_address = models.TextField(verbose_name=_("Current Residential Address"))
    permanent_address = models.TextField(blank=True, verbose_name=_("Permanent Address"))

    # Section 3: Academic Details
    admission_type = models.CharField(
        max_length=30,
        choices=AdmissionType.CHOICES,
        verbose_name=_("Admission Type")
    )
    current_last_standard = models.CharField(
        max_length=20,
        choices=CURRENT_STANDARD_CHOICES,
        blank=True,
        verbose_name=_("Current/Last Standard")
    )
    current_last_section = models.CharField(
        max_length=20,
        choices=SECTION_CHOICES,
        blank=True,
        verbose_name=_("Current/Last Section")
    )
    standard_applying_for = models.CharField(
        max_length=20,
        choices=STANDARD_CHOICES,
        verbose_name=_("Standard Applying For")
    )
    previous_school_name = models.CharField(max_length=200, blank=True, verbose_name=_("Previous School Name"))
    previous_school_address = models.TextField(blank=True, verbose_name=_("Previous School Address"))
    last_class_attended = models.CharField(max_length=50, blank=True, verbose_name=_("Last Class Attended"))
    year_of_passing_last_class = models.CharField(
        max_length=10,
        blank=True,
        verbose_name=_("Year of Passing Last Class")
    )
    marks_percentage_last_exam = models.CharField(
        max_length=20,
        blank=True,
        verbose_name=_("Marks/Percentage in Last Exam")
    )

    # Re-admission
    is_rejoining = models.BooleanField(default=False, verbose_name=_("Is Rejoining"))
    previous_roll_number = models.CharField(max_length=50, blank=True, verbose_name=_("Previous Roll Number"))
    year_standard_when_left = models.CharField(
        max_length=50,
        blank=True,
        verbose_name=_("Year/Standard When Left")
    )
    reason_for_leaving = models.TextField(blank=True, verbose_name=_("Reason for Leaving"))
    reason_for_rejoining = models.TextField(blank=True, verbose_name=_("Reason for Rejoining"))

    extracurricular_interests = models.TextField(blank=True, verbose_name=_("Extracurricular Interests"))

    # Section 4: Sibling Details
    has_siblings_in_school = models.BooleanField(default=False, verbose_name=_("Has Siblings in School"))

    # Section 5: Parent/Guardian Details
    father_full_name = models.CharField(max_length=200, verbose_name=_("Father's Full Name"))
    father_occupation = models.CharField(max_length=100, verbose_name=_("Father's Occupation"))
    father_annual_income = models.CharField(max_length=50, blank=True, verbose_name=_("Father's Annual Income"))
    father_mobile_number = models.CharField(
        max_length=10,
        validators=[mobile_regex],
        verbose_name=_("Father's Mobile Number")
    )
    father_email = models.EmailField(blank=True, verbose_name=_("Father's Email"))
    father_aadhaar_number = EncryptedCharField(max_length=12, blank=True, verbose_name=_("Father's Aadhaar Number"))

    mother_full_name = models.CharField(max_length=200, verbose_name=_("Mother's Full Name"))
    mother_occupation = models.CharField(max_length=100, verbose_name=_("Mother's Occupation"))
    mother_annual_income = models.CharField(max_length=50, blank=True, verbose_name=_("Mother's Annual Income"))
    mother_mobile_number = models.CharField(
        max_length=10,
        validators=[mobile_regex],
        verbose_name=_("Mother's Mobile Number")
    )
    mother_email = models.EmailField(blank=True, verbose_name=_("Mother's Email"))
    mother_aadhaar_number = EncryptedCharField(max_length=12, blank=True, verbose_name=_("Mother's Aadhaar Number"))

    guardian_name = models.CharField(max_length=200, blank=True, verbose_name=_("Guardian Name"))
    guardian_relation = models.CharField(max_length=50, blank=True, verbose_name=_("Guardian Relation"))
    guardian_occupation = models.CharField(max_length=100, blank=True, verbose_name=_("Guardian Occupation"))
    guardian_mobile_number = models.CharField(max_length=15, blank=True, verbose_name=_("Guardian Mobile Number"))
    guardian_aadhaar_number = EncryptedCharField(
        max_length=12,
        blank=True,
        verbose_name=_("Guardian Aadhaar Number")
    )

    emergency_contact_name = models.CharField(max_length=200, blank=True, verbose_name=_("Emergency Contact Name"))
    emergency_contact_relation = models.CharField(
        max_length=50,
        blank=True,
        verbose_name=_("Emergency Contact Relation")
    )
    emergency_contact_mobile = models.CharField(max_length=15, blank=True, verbose_name=_("Emergency Contact Mobile"))

    # Section 6: Transport and Other Options
    transport_required = models.BooleanField(default=False, verbose_name=_("Transport Required"))
    pickup_drop_location = models.CharField(max_length=255, blank=True, verbose_name=_("Pickup/Drop Location"))
    medical_history_or_allergies = models.TextField(blank=True, verbose_name=_("Medical History or Allergies"))

    # Declaration
    declaration_accepted = models.BooleanField(default=False, verbose_name=_("Declaration Accepted"))

    class Meta:
        db_table = "admission_records"
        verbose_name = _("Admission Record")
        verbose_name_plural = _("Admission Records")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=['school_branch', 'created_at'], name='admission_branch_created_idx'),
        ]

    def __str__(self):
        return f"{self.student_full_name} ({self.standard_applying_for}, {self.school_branch})"

    def get_absolute_url(self):
        return reverse('admission:staff_detail', kwargs={'pk': self.pk})

    @property
    def shows_current_standard(self):
        return self.admission_type in AdmissionType.WITH_CURRENT_STANDARD

    @property
    def shows_siblings(self):
        """Siblings section is shown only when flagged and at least one row exists"""
        return self.has_siblings_in_school and bool(self.siblings.all())

    @property
    def has_guardian(self):
        return bool(self.guardian_name)

    @property
    def has_emergency_contact(self):
        return bool(self.emergency_contact_name)


# ==================== CHILD ROWS ====================

class Sibling(UUIDModel):
    """
    A sibling already studying in the school, owned by one admission record
    """
    admission = models.ForeignKey(
        AdmissionRecord,
        on_delete=models.CASCADE,
        related_name="siblings",
        verbose_name=_("Admission")
    )
    position = models.PositiveSmallIntegerField(default=0, verbose_name=_("Position"))
    name = models.CharField(max_length=200, verbose_name=_("Name"))
    class_grade = models.CharField(max_length=50, verbose_name=_("Class/Grade"))
    roll_number = models.CharField(max_length=50, blank=True, verbose_name=_("Roll Number"))
    branch = models.CharField(max_length=50, choices=SchoolBranch.CHOICES, verbose_name=_("Branch"))

    class Meta:
        db_table = "admission_siblings"
        verbose_name = _("Sibling")
        verbose_name_plural = _("Siblings")
        ordering = ["admission", "position"]

    def __str__(self):
        return f"{self.name} - {self.class_grade}"


class Vaccination(UUIDModel):
    """
    A vaccination declared on the admission form
    """
    admission = models.ForeignKey(
        AdmissionRecord,
        on_delete=models.CASCADE,
        related_name="vaccinations",
        verbose_name=_("Admission")
    )
    position = models.PositiveSmallIntegerField(default=0, verbose_name=_("Position"))
    vaccine_name = models.CharField(max_length=100, verbose_name=_("Vaccine Name"))
    vaccination_date = models.CharField(max_length=20, verbose_name=_("Vaccination Date"))

    class Meta:
        db_table = "admission_vaccinations"
        verbose_name = _("Vaccination")
        verbose_name_plural = _("Vaccinations")
        ordering = ["admission", "position"]

    def __str__(self):
        return f"{self.vaccine_name} ({self.vaccination_date})"
