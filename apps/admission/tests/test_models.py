from django.test import TestCase
from django.urls import reverse

from apps.admission.constants import AdmissionType
from apps.admission.models import AdmissionRecord, Sibling, Vaccination
from apps.admission.services import AdmissionService
from apps.admission.validation import validate_admission
from .utils import sibling_row, vaccination_row, valid_admission_data


class AdmissionRecordModelTests(TestCase):
    def setUp(self):
        cleaned = validate_admission(valid_admission_data(
            siblings=[sibling_row()],
            vaccinations=[vaccination_row()],
        )).raise_if_invalid()
        self.admission = AdmissionRecord.objects.get(pk=AdmissionService.submit(cleaned).id)

    def test_str(self):
        self.assertEqual(str(self.admission), 'Arun Kumar (Class 5, T. Pudur)')
        self.assertEqual(str(self.admission.siblings.get()), 'Meena Kumar - Class 3')
        self.assertEqual(str(self.admission.vaccinations.get()), 'BCG (2015-07-01)')

    def test_absolute_url(self):
        self.assertEqual(
            self.admission.get_absolute_url(),
            reverse('admission:staff_detail', kwargs={'pk': self.admission.pk}),
        )

    def test_short_id(self):
        self.assertEqual(self.admission.short_id, str(self.admission.pk)[:8])

    def test_defaults(self):
        self.assertEqual(self.admission.nationality, 'Indian')
        self.assertFalse(self.admission.transport_required)
        self.assertEqual(self.admission.guardian_aadhaar_number, '')

    def test_visibility_properties(self):
        self.assertFalse(self.admission.shows_current_standard)
        self.assertFalse(self.admission.shows_siblings)
        self.assertFalse(self.admission.has_guardian)

        self.admission.admission_type = AdmissionType.RE_ADMISSION
        self.admission.has_siblings_in_school = True
        self.admission.guardian_name = 'Suresh'
        self.assertTrue(self.admission.shows_current_standard)
        self.assertTrue(self.admission.shows_siblings)
        self.assertTrue(self.admission.has_guardian)

    def test_children_are_owned_by_the_record(self):
        self.admission.delete()
        self.assertEqual(Sibling.objects.count(), 0)
        self.assertEqual(Vaccination.objects.count(), 0)
