"""
Constants for the Admission module.
Choice lists mirror the options printed on the paper admission form, so the
stored value is the same text the office already uses.
"""

from django.utils.translation import gettext_lazy as _


# ============================================================================
# SCHOOL BRANCH CONSTANTS
# ============================================================================

class SchoolBranch:
    """
    Campuses accepting admissions
    """
    T_PUDUR = 'T. Pudur'
    SURAKULLAM = 'Surakullam'

    CHOICES = (
        (T_PUDUR, _('T. Pudur')),
        (SURAKULLAM, _('Surakullam')),
    )


# ============================================================================
# FORM PURPOSE / ADMISSION TYPE CONSTANTS
# ============================================================================

class FormPurpose:
    NEW_ADMISSION = 'New Admission'
    RE_ADMISSION = 'Re-Admission'
    UPDATE_DETAILS = 'Update Existing Details'

    CHOICES = (
        (NEW_ADMISSION, _('New Admission')),
        (RE_ADMISSION, _('Re-Admission (left and rejoined)')),
        (UPDATE_DETAILS, _('Update Existing Details')),
    )


class AdmissionType:
    """
    Admission type constants
    """
    NEW_ADMISSION = 'New Admission'
    EXISTING_STUDENT = 'Existing Student'
    RE_ADMISSION = 'Re-Admission'

    CHOICES = (
        (NEW_ADMISSION, _('New Admission')),
        (EXISTING_STUDENT, _('Existing Student (updating details)')),
        (RE_ADMISSION, _('Re-Admission')),
    )

    # Types for which the current/last standard and section are asked
    WITH_CURRENT_STANDARD = (EXISTING_STUDENT, RE_ADMISSION)


# ============================================================================
# DEMOGRAPHIC CONSTANTS
# ============================================================================

class Gender:
    MALE = 'Male'
    FEMALE = 'Female'
    OTHER = 'Other'

    CHOICES = (
        (MALE, _('Male')),
        (FEMALE, _('Female')),
        (OTHER, _('Other')),
    )


class Religion:
    CHOICES = (
        ('Hindu', _('Hindu')),
        ('Muslim', _('Muslim')),
        ('Christian', _('Christian')),
        ('Sikh', _('Sikh')),
        ('Buddhist', _('Buddhist')),
        ('Jain', _('Jain')),
        ('Parsi (Zoroastrian)', _('Parsi (Zoroastrian)')),
        ('Jewish', _('Jewish')),
        ('Other', _('Other')),
        ('Prefer not to say', _('Prefer not to say')),
    )


class CasteCategory:
    """
    Caste category constants (for reservations)
    """
    GENERAL = 'General'
    OBC = 'OBC'
    SC = 'SC'
    ST = 'ST'
    EWS = 'EWS'
    OTHER = 'Other'

    CHOICES = (
        (GENERAL, _('General')),
        (OBC, _('OBC (Other Backward Classes)')),
        (SC, _('SC (Scheduled Caste)')),
        (ST, _('ST (Scheduled Tribe)')),
        (EWS, _('EWS (Economically Weaker Section)')),
        (OTHER, _('Other')),
    )


class BloodGroup:
    CHOICES = tuple(
        (group, group)
        for group in ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')
    ) + (('Unknown', _('Unknown')),)


# ============================================================================
# CLASS / SECTION CONSTANTS
# ============================================================================

NOT_APPLICABLE = 'Not Applicable'

STANDARD_CHOICES = (
    ('LKG', _('LKG')),
    ('UKG', _('UKG')),
) + tuple((f'Class {n}', f'Class {n}') for n in range(1, 13))

CURRENT_STANDARD_CHOICES = ((NOT_APPLICABLE, _('Not Applicable')),) + STANDARD_CHOICES

SECTION_CHOICES = ((NOT_APPLICABLE, _('Not Applicable')),) + tuple(
    (section, section) for section in 'ABCDEF'
)


# ============================================================================
# DEFAULTS & MESSAGES
# ============================================================================

DEFAULT_NATIONALITY = 'Indian'

SUBMISSION_SUCCESS_MESSAGE = _(
    'Form submitted successfully! We will contact you via email/mobile within 7 days.'
)
SUBMISSION_FAILURE_MESSAGE = 'Failed to submit form. Please try again.'
VALIDATION_FAILURE_MESSAGE = _('Please correct the errors highlighted below.')
DECLARATION_REQUIRED_MESSAGE = _('You must accept the declaration')

ADMISSION_LIST_CACHE_KEY = 'admission:list'
ADMISSION_LIST_GENERATION_KEY = 'admission:list:generation'
