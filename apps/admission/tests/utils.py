from apps.admission.constants import (
    AdmissionType,
    CasteCategory,
    FormPurpose,
    Gender,
    SchoolBranch,
)


def valid_admission_data(**overrides):
    """A complete, valid submission with no child rows"""
    data = {
        'school_branch': SchoolBranch.T_PUDUR,
        'purpose_of_form': FormPurpose.NEW_ADMISSION,
        'academic_year': '2025-2026',
        'student_full_name': 'Arun Kumar',
        'date_of_birth': '2015-06-12',
        'gender': Gender.MALE,
        'nationality': 'Indian',
        'caste_category': CasteCategory.GENERAL,
        'aadhaar_number': '123456789012',
        'current_residential_address': '12 Main Road, T. Pudur',
        'admission_type': AdmissionType.NEW_ADMISSION,
        'standard_applying_for': 'Class 5',
        'father_full_name': 'Ravi Kumar',
        'father_occupation': 'Farmer',
        'father_mobile_number': '9876543210',
        'mother_full_name': 'Lakshmi Ravi',
        'mother_occupation': 'Teacher',
        'mother_mobile_number': '9123456780',
        'declaration_accepted': True,
        'siblings': [],
        'vaccinations': [],
    }
    data.update(overrides)
    return data


def sibling_row(**overrides):
    row = {
        'name': 'Meena Kumar',
        'class_grade': 'Class 3',
        'roll_number': '14',
        'branch': SchoolBranch.SURAKULLAM,
    }
    row.update(overrides)
    return row


def vaccination_row(**overrides):
    row = {'vaccine_name': 'BCG', 'vaccination_date': '2015-07-01'}
    row.update(overrides)
    return row


def to_post_data(data, action='submit'):
    """Flatten submission data the way the browser posts the admission form"""
    post = {'action': action}
    for name, value in data.items():
        if name in ('siblings', 'vaccinations'):
            continue
        if value is True:
            post[name] = 'on'
        elif value is not False:
            post[name] = value

    for prefix in ('siblings', 'vaccinations'):
        rows = data.get(prefix, [])
        post[f'{prefix}-TOTAL_FORMS'] = str(len(rows))
        post[f'{prefix}-INITIAL_FORMS'] = '0'
        for index, row in enumerate(rows):
            for key, value in row.items():
                post[f'{prefix}-{index}-{key}'] = value
    return post
