from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.admission.models import AdmissionRecord


class LoadAdmissionDummyTests(TestCase):
    def test_creates_valid_admissions(self):
        out = StringIO()
        call_command('load_admission_dummy', count=3, seed=7, stdout=out)

        self.assertEqual(AdmissionRecord.objects.count(), 3)
        self.assertIn('Successfully created 3 dummy admissions', out.getvalue())
        for admission in AdmissionRecord.objects.all():
            self.assertTrue(admission.declaration_accepted)
            self.assertRegex(admission.aadhaar_number, r'^\d{12}$')
