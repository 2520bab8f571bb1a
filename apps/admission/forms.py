from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.forms import BaseForm
from apps.core.utils.form_helpers import DateInput, DigitsInput, PhoneInput

from .constants import DECLARATION_REQUIRED_MESSAGE
from .models import AdmissionRecord, Sibling, Vaccination, aadhaar_regex, mobile_regex

SIBLING_PREFIX = 'siblings'
VACCINATION_PREFIX = 'vaccinations'

# Flags rendered as checkboxes; an unchecked box is simply absent from POST data
BOOLEAN_FIELDS = (
    'is_rejoining',
    'has_siblings_in_school',
    'transport_required',
    'declaration_accepted',
)

REQUIRED_MESSAGES = {
    'school_branch': _('School branch is required'),
    'purpose_of_form': _('Purpose is required'),
    'academic_year': _('Academic year is required'),
    'student_full_name': _('Student name is required'),
    'date_of_birth': _('Date of birth is required'),
    'gender': _('Gender is required'),
    'nationality': _('Nationality is required'),
    'caste_category': _('Caste category is required'),
    'aadhaar_number': _('Aadhaar must be 12 digits'),
    'current_residential_address': _('Current address is required'),
    'admission_type': _('Admission type is required'),
    'standard_applying_for': _('Standard applying for is required'),
    'father_full_name': _("Father's name is required"),
    'father_occupation': _("Father's occupation is required"),
    'father_mobile_number': _('Mobile must be 10 digits'),
    'mother_full_name': _("Mother's name is required"),
    'mother_occupation': _("Mother's occupation is required"),
    'mother_mobile_number': _('Mobile must be 10 digits'),
}

EMPTY_CHOICE_LABELS = {
    'school_branch': _('Select Branch'),
    'purpose_of_form': _('Select Purpose'),
    'gender': _('Select Gender'),
    'religion': _('Select Religion'),
    'caste_category': _('Select Category'),
    'blood_group': _('Select Blood Group'),
    'admission_type': _('Select Type'),
    'current_last_standard': _('Select Standard'),
    'current_last_section': _('Select Section'),
    'standard_applying_for': _('Select Standard'),
    'branch': _('Select Branch'),
}


def _relabel_empty_choice(form):
    """Replace Django's '---------' placeholder with the form's own wording"""
    for field_name, label in EMPTY_CHOICE_LABELS.items():
        field = form.fields.get(field_name)
        if field is None or not hasattr(field, 'choices'):
            continue
        choices = [choice for choice in field.choices if choice[0] != '']
        field.choices = [('', label)] + choices


class AdmissionForm(BaseForm):
    """All scalar sections of the admission form"""

    aadhaar_number = forms.CharField(
        max_length=12,
        validators=[aadhaar_regex],
        label=_("Aadhaar Number"),
        widget=DigitsInput(length=12, attrs={'placeholder': _('12-digit Aadhaar number')})
    )
    father_mobile_number = forms.CharField(
        max_length=10,
        validators=[mobile_regex],
        label=_("Father's Mobile Number"),
        widget=PhoneInput(attrs={'placeholder': _('10-digit mobile number'), 'maxlength': '10'})
    )
    mother_mobile_number = forms.CharField(
        max_length=10,
        validators=[mobile_regex],
        label=_("Mother's Mobile Number"),
        widget=PhoneInput(attrs={'placeholder': _('10-digit mobile number'), 'maxlength': '10'})
    )
    declaration_accepted = forms.BooleanField(
        required=True,
        label=_(
            "I hereby declare that the information provided above is true and correct "
            "to the best of my knowledge."
        ),
        error_messages={'required': DECLARATION_REQUIRED_MESSAGE},
    )

    class Meta:
        model = AdmissionRecord
        fields = [
            # Section 1: Basic Information
            'school_branch', 'purpose_of_form', 'academic_year',
            # Section 2: Student's Personal Details
            'student_full_name', 'date_of_birth', 'gender', 'nationality',
            'religion', 'caste_category', 'sub_caste', 'aadhaar_number',
            'blood_group', 'identification_marks', 'special_needs_or_disabilities',
            'current_residential_address', 'permanent_address',
            # Section 3: Academic Details
            'admission_type', 'current_last_standard', 'current_last_section',
            'standard_applying_for', 'previous_school_name', 'previous_school_address',
            'last_class_attended', 'year_of_passing_last_class', 'marks_percentage_last_exam',
            'is_rejoining', 'previous_roll_number', 'year_standard_when_left',
            'reason_for_leaving', 'reason_for_rejoining', 'extracurricular_interests',
            # Section 4: Sibling Details
            'has_siblings_in_school',
            # Section 5: Parent/Guardian Details
            'father_full_name', 'father_occupation', 'father_annual_income',
            'father_mobile_number', 'father_email', 'father_aadhaar_number',
            'mother_full_name', 'mother_occupation', 'mother_annual_income',
            'mother_mobile_number', 'mother_email', 'mother_aadhaar_number',
            'guardian_name', 'guardian_relation', 'guardian_occupation',
            'guardian_mobile_number', 'guardian_aadhaar_number',
            'emergency_contact_name', 'emergency_contact_relation', 'emergency_contact_mobile',
            # Section 6: Transport and Other Options
            'transport_required', 'pickup_drop_location', 'medical_history_or_allergies',
            # Declaration
            'declaration_accepted',
        ]

        widgets = {
            'academic_year': forms.TextInput(attrs={'placeholder': _('e.g., 2025-2026')}),
            'student_full_name': forms.TextInput(attrs={'placeholder': _('Enter full name as per records')}),
            'date_of_birth': DateInput(),
            'identification_marks': forms.Textarea(attrs={'rows': 2}),
            'special_needs_or_disabilities': forms.Textarea(attrs={'rows': 2}),
            'current_residential_address': forms.Textarea(attrs={'rows': 3}),
            'permanent_address': forms.Textarea(attrs={'rows': 3}),
            'previous_school_address': forms.Textarea(attrs={'rows': 2}),
            'reason_for_leaving': forms.Textarea(attrs={'rows': 2}),
            'reason_for_rejoining': forms.Textarea(attrs={'rows': 2}),
            'extracurricular_interests': forms.Textarea(attrs={
                'rows': 2,
                'placeholder': _('Sports, music, arts, etc.')
            }),
            'guardian_mobile_number': PhoneInput(),
            'emergency_contact_mobile': PhoneInput(),
            'father_aadhaar_number': DigitsInput(length=12),
            'mother_aadhaar_number': DigitsInput(length=12),
            'guardian_aadhaar_number': DigitsInput(length=12),
            'medical_history_or_allergies': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        self.permanent_address_locked = kwargs.pop('permanent_address_locked', False)
        super().__init__(*args, **kwargs)

        for field_name, message in REQUIRED_MESSAGES.items():
            self.fields[field_name].error_messages['required'] = message

        _relabel_empty_choice(self)

        # Changing these shows or hides other sections
        for field_name in ('is_rejoining', 'admission_type', 'has_siblings_in_school', 'transport_required'):
            self.fields[field_name].widget.attrs['data-refresh'] = 'true'

        # Mirrors the current address while "same as current address" is ticked
        if self.permanent_address_locked:
            self.fields['permanent_address'].widget.attrs['readonly'] = 'readonly'


class SiblingForm(BaseForm):
    class Meta:
        model = Sibling
        fields = ['name', 'class_grade', 'roll_number', 'branch']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['name'].error_messages['required'] = _('Sibling name is required')
        self.fields['class_grade'].error_messages['required'] = _('Class/Grade is required')
        self.fields['branch'].error_messages['required'] = _('Branch is required')
        _relabel_empty_choice(self)


class VaccinationForm(BaseForm):
    class Meta:
        model = Vaccination
        fields = ['vaccine_name', 'vaccination_date']
        widgets = {
            'vaccination_date': DateInput(),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['vaccine_name'].error_messages['required'] = _('Vaccine name is required')
        self.fields['vaccination_date'].error_messages['required'] = _('Vaccination date is required')


class RequiredRowFormSet(forms.BaseFormSet):
    """
    Formset whose rows are always validated.

    Django lets blank extra rows through silently; here every row the parent
    added must be filled in or removed.
    """

    def get_form_kwargs(self, index):
        kwargs = super().get_form_kwargs(index)
        if index is not None:
            kwargs['empty_permitted'] = False
        return kwargs


SiblingFormSet = forms.formset_factory(
    SiblingForm,
    formset=RequiredRowFormSet,
    extra=0,
    can_delete=False
)

VaccinationFormSet = forms.formset_factory(
    VaccinationForm,
    formset=RequiredRowFormSet,
    extra=0,
    can_delete=False
)


class AdmissionFormBundle:
    """The main form together with its two row formsets"""

    def __init__(self, form, siblings, vaccinations):
        self.form = form
        self.siblings = siblings
        self.vaccinations = vaccinations

    def is_valid(self):
        # Evaluate all three so every error is collected in one pass
        results = [self.form.is_valid(), self.siblings.is_valid(), self.vaccinations.is_valid()]
        return all(results)


def build_admission_forms(data=None, initial=None, sibling_initial=None,
                          vaccination_initial=None, permanent_address_locked=False):
    """
    Build the main form and row formsets, bound to ``data`` when given,
    otherwise unbound and pre-filled from the ``initial`` values.
    """
    if data is not None:
        return AdmissionFormBundle(
            AdmissionForm(data, permanent_address_locked=permanent_address_locked),
            SiblingFormSet(data, prefix=SIBLING_PREFIX),
            VaccinationFormSet(data, prefix=VACCINATION_PREFIX),
        )

    return AdmissionFormBundle(
        AdmissionForm(initial=initial, permanent_address_locked=permanent_address_locked),
        SiblingFormSet(initial=sibling_initial or [], prefix=SIBLING_PREFIX),
        VaccinationFormSet(initial=vaccination_initial or [], prefix=VACCINATION_PREFIX),
    )
