"""
Server-side state of the admission form.

``AdmissionFormState`` holds every field value, the sibling and vaccination
rows, and the two UI toggles. The public view rebuilds it from POST data on
each request, applies one action and renders it again, so nothing is kept in
the session between requests.
"""

import logging

from django.core.exceptions import NON_FIELD_ERRORS
from django.utils import timezone

from .constants import (
    AdmissionType,
    DEFAULT_NATIONALITY,
    VALIDATION_FAILURE_MESSAGE,
)
from .forms import (
    AdmissionForm,
    BOOLEAN_FIELDS,
    SIBLING_PREFIX,
    SiblingForm,
    VACCINATION_PREFIX,
    VaccinationForm,
    build_admission_forms,
)
from .services import AdmissionService, SubmissionResult
from .validation import validate_admission

logger = logging.getLogger(__name__)

FIELD_NAMES = tuple(AdmissionForm.Meta.fields)
ROW_FIELDS = {
    SIBLING_PREFIX: tuple(SiblingForm.Meta.fields),
    VACCINATION_PREFIX: tuple(VaccinationForm.Meta.fields),
}
CHECKED_VALUES = ('on', 'true', 'True', '1')
MAX_ROWS = 1000


class FormStatus:
    EDITING = 'editing'
    SUBMITTING = 'submitting'
    SUBMITTED = 'submitted'


class Section:
    """Conditional parts of the form"""
    READMISSION = 'readmission'
    CURRENT_STANDARD = 'current_standard'
    SIBLINGS = 'siblings'
    PICKUP_LOCATION = 'pickup_location'
    PERMANENT_ADDRESS_LOCKED = 'permanent_address_locked'


# Inputs that only render while their section is visible; error paths are
# matched on their first segment
SECTION_FIELDS = {
    Section.READMISSION: (
        'previous_roll_number', 'year_standard_when_left',
        'reason_for_leaving', 'reason_for_rejoining',
    ),
    Section.CURRENT_STANDARD: ('current_last_standard', 'current_last_section'),
    Section.SIBLINGS: (SIBLING_PREFIX,),
    Section.PICKUP_LOCATION: ('pickup_drop_location',),
}


def default_values():
    values = {name: '' for name in FIELD_NAMES}
    values.update({name: False for name in BOOLEAN_FIELDS})
    values['nationality'] = DEFAULT_NATIONALITY
    return values


def empty_row(prefix):
    return {name: '' for name in ROW_FIELDS[prefix]}


def _row_count(data, prefix):
    try:
        count = int(data.get(f'{prefix}-TOTAL_FORMS', 0))
    except (TypeError, ValueError):
        return 0
    return max(0, min(count, MAX_ROWS))


class AdmissionFormState:
    """
    Field values, child rows and UI toggles of one admission form.

    ``clock`` returns the current date/datetime and is only consulted by
    ``use_current_academic_year``.
    """

    def __init__(self, values=None, clock=None):
        self.values = default_values()
        if values:
            for name, value in values.items():
                self.set_field(name, value)
        self.rows = {SIBLING_PREFIX: [], VACCINATION_PREFIX: []}
        self.copy_address = False
        self.use_current_year = False
        self.status = FormStatus.EDITING
        self.errors = {}
        self.outcome = None
        self.result = None
        self._clock = clock or timezone.localdate

    @classmethod
    def from_post(cls, data, clock=None):
        """Rebuild the state from a submitted form (a QueryDict or plain dict)"""
        state = cls(clock=clock)

        for name in FIELD_NAMES:
            if name in BOOLEAN_FIELDS:
                state.values[name] = data.get(name) in CHECKED_VALUES
            else:
                state.values[name] = data.get(name, '')

        for prefix, fields in ROW_FIELDS.items():
            for index in range(_row_count(data, prefix)):
                state.rows[prefix].append({
                    name: data.get(f'{prefix}-{index}-{name}', '') for name in fields
                })

        state.copy_address = data.get('copy_address') in CHECKED_VALUES
        state.use_current_year = data.get('use_current_year') in CHECKED_VALUES
        return state

    @property
    def siblings(self):
        return self.rows[SIBLING_PREFIX]

    @property
    def vaccinations(self):
        return self.rows[VACCINATION_PREFIX]

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def _resolve(self, path):
        """Return (container, key) for a field path, raising KeyError if unknown"""
        parts = path.split('.')
        if len(parts) == 1:
            if path not in self.values:
                raise KeyError(path)
            return self.values, path

        if len(parts) == 3 and parts[0] in ROW_FIELDS:
            prefix, index, name = parts
            rows = self.rows[prefix]
            if not index.isdigit() or int(index) >= len(rows) or name not in ROW_FIELDS[prefix]:
                raise KeyError(path)
            return rows[int(index)], name

        raise KeyError(path)

    def get_field(self, path):
        container, key = self._resolve(path)
        return container[key]

    def set_field(self, path, value):
        """Update one field. Nothing is validated until ``submit``."""
        container, key = self._resolve(path)
        container[key] = value

    # ------------------------------------------------------------------
    # Toggles
    # ------------------------------------------------------------------

    def toggle_copy_address(self, enabled):
        # One-shot copy; later edits to the current address are not mirrored
        self.copy_address = enabled
        if enabled:
            self.values['permanent_address'] = self.values['current_residential_address']
        else:
            self.values['permanent_address'] = ''

    def use_current_academic_year(self, enabled):
        self.use_current_year = enabled
        if enabled:
            year = self._clock().year
            self.values['academic_year'] = f'{year}-{year + 1}'

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def _append_row(self, prefix):
        self.rows[prefix].append(empty_row(prefix))
        return len(self.rows[prefix]) - 1

    def _remove_row(self, prefix, index):
        rows = self.rows[prefix]
        if not 0 <= index < len(rows):
            raise IndexError(f"No {prefix} row at index {index}")
        del rows[index]

    def append_sibling(self):
        return self._append_row(SIBLING_PREFIX)

    def remove_sibling(self, index):
        self._remove_row(SIBLING_PREFIX, index)

    def append_vaccination(self):
        return self._append_row(VACCINATION_PREFIX)

    def remove_vaccination(self, index):
        self._remove_row(VACCINATION_PREFIX, index)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def visible_sections(self):
        sections = set()
        if self.values['is_rejoining']:
            sections.add(Section.READMISSION)
        if self.values['admission_type'] in AdmissionType.WITH_CURRENT_STANDARD:
            sections.add(Section.CURRENT_STANDARD)
        if self.values['has_siblings_in_school']:
            sections.add(Section.SIBLINGS)
        if self.values['transport_required']:
            sections.add(Section.PICKUP_LOCATION)
        if self.copy_address:
            sections.add(Section.PERMANENT_ADDRESS_LOCKED)
        return frozenset(sections)

    def rendered_sections(self):
        """
        Sections the page renders as editable: the visible ones, plus any
        hidden section holding a validation error so it can be corrected.
        """
        sections = set(self.visible_sections())
        for section, fields in SECTION_FIELDS.items():
            if any(path.split('.')[0] in fields for path in self.errors):
                sections.add(section)
        return frozenset(sections)

    def to_data(self):
        data = dict(self.values)
        for prefix, rows in self.rows.items():
            data[prefix] = [dict(row) for row in rows]
        return data

    def build_forms(self):
        """
        Forms for rendering: the bound forms of the last submit attempt when
        there is one, so their errors show inline, otherwise unbound forms
        pre-filled with the current values.
        """
        if self.outcome is not None and not self.outcome.is_valid:
            return self.outcome.bundle
        return build_admission_forms(
            initial=self.values,
            sibling_initial=self.siblings,
            vaccination_initial=self.vaccinations,
            permanent_address_locked=self.copy_address,
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def apply_action(self, action):
        """
        Apply a named form action such as ``add_sibling`` or
        ``remove_vaccination-2``. Raises ValueError for unknown actions and
        IndexError for rows that do not exist.
        """
        name, _, argument = action.partition('-')

        if name == 'add_sibling':
            self.append_sibling()
        elif name == 'remove_sibling':
            self.remove_sibling(int(argument))
        elif name == 'add_vaccination':
            self.append_vaccination()
        elif name == 'remove_vaccination':
            self.remove_vaccination(int(argument))
        elif name == 'copy_address':
            self.toggle_copy_address(not self.copy_address)
        elif name == 'use_current_year':
            self.use_current_academic_year(not self.use_current_year)
        elif name == 'refresh':
            pass
        else:
            raise ValueError(f"Unknown form action: {action}")

    def submit(self, service=None):
        """
        Validate and persist the form.

        Moves to ``submitted`` on success; validation or persistence failures
        return the state to ``editing`` with ``errors`` filled in.
        """
        if self.status != FormStatus.EDITING:
            raise RuntimeError(f"Cannot submit a form in '{self.status}' state")

        self.status = FormStatus.SUBMITTING
        self.outcome = validate_admission(self.to_data(), permanent_address_locked=self.copy_address)

        if not self.outcome.is_valid:
            self.errors = self.outcome.errors
            self.status = FormStatus.EDITING
            self.result = SubmissionResult.failure(str(VALIDATION_FAILURE_MESSAGE))
            logger.info("Admission form rejected with %d invalid field(s)", len(self.errors))
            return self.result

        service = service or AdmissionService
        self.result = service.submit(self.outcome.cleaned_data)

        if self.result.success:
            self.errors = {}
            self.status = FormStatus.SUBMITTED
        else:
            self.errors = {NON_FIELD_ERRORS: [self.result.error]}
            self.status = FormStatus.EDITING
        return self.result

    def reset(self):
        """Back to fresh defaults, as after a successful submission"""
        self.__init__(clock=self._clock)
