"""
Validation entry point for admission data.

``validate_admission`` takes a nested mapping (scalar fields plus ``siblings``
and ``vaccinations`` lists of row mappings), runs it through the admission
forms and reports either the cleaned values or the errors keyed by field path:
``aadhaar_number``, ``siblings.0.name``, ``__all__``.
"""

from django.core.exceptions import NON_FIELD_ERRORS

from .exceptions import AdmissionValidationError
from .forms import (
    BOOLEAN_FIELDS,
    SIBLING_PREFIX,
    VACCINATION_PREFIX,
    build_admission_forms,
)

ROW_PREFIXES = (SIBLING_PREFIX, VACCINATION_PREFIX)


class ValidationOutcome:
    def __init__(self, bundle, cleaned_data, errors):
        self.bundle = bundle
        self.cleaned_data = cleaned_data
        self.errors = errors

    @property
    def is_valid(self):
        return not self.errors

    def raise_if_invalid(self):
        if self.errors:
            raise AdmissionValidationError(self.errors)
        return self.cleaned_data


def to_form_data(data):
    """
    Flatten nested admission data into the key layout the forms expect,
    including the formset management fields.
    """
    flat = {}
    for name, value in data.items():
        if name in ROW_PREFIXES:
            continue
        if name in BOOLEAN_FIELDS:
            # Only a real True ticks the box
            if value is True:
                flat[name] = 'on'
            continue
        if value is None:
            continue
        flat[name] = value

    for prefix in ROW_PREFIXES:
        rows = data.get(prefix) or []
        flat[f'{prefix}-TOTAL_FORMS'] = str(len(rows))
        flat[f'{prefix}-INITIAL_FORMS'] = '0'
        flat[f'{prefix}-MIN_NUM_FORMS'] = '0'
        flat[f'{prefix}-MAX_NUM_FORMS'] = '1000'
        for index, row in enumerate(rows):
            for key, value in row.items():
                flat[f'{prefix}-{index}-{key}'] = '' if value is None else value

    return flat


def collect_errors(bundle):
    """Flatten form and formset errors into a path -> messages mapping"""
    errors = {}

    for name, messages in bundle.form.errors.items():
        errors[name] = [str(message) for message in messages]

    for prefix, formset in ((SIBLING_PREFIX, bundle.siblings), (VACCINATION_PREFIX, bundle.vaccinations)):
        for index, row_errors in enumerate(formset.errors):
            for name, messages in row_errors.items():
                path = f'{prefix}.{index}' if name == NON_FIELD_ERRORS else f'{prefix}.{index}.{name}'
                errors[path] = [str(message) for message in messages]
        non_form_errors = formset.non_form_errors()
        if non_form_errors:
            errors[prefix] = [str(message) for message in non_form_errors]

    return errors


def validate_admission(data, permanent_address_locked=False):
    """
    Validate admission data without touching the database.

    Returns a ``ValidationOutcome``; ``cleaned_data`` is only populated when
    the data is valid.
    """
    bundle = build_admission_forms(
        data=to_form_data(data),
        permanent_address_locked=permanent_address_locked,
    )

    if not bundle.is_valid():
        return ValidationOutcome(bundle, {}, collect_errors(bundle))

    cleaned_data = dict(bundle.form.cleaned_data)
    cleaned_data[SIBLING_PREFIX] = [dict(form.cleaned_data) for form in bundle.siblings.forms]
    cleaned_data[VACCINATION_PREFIX] = [dict(form.cleaned_data) for form in bundle.vaccinations.forms]
    return ValidationOutcome(bundle, cleaned_data, {})
