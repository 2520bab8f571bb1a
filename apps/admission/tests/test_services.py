import uuid
from datetime import datetime, timezone as dt_timezone
from unittest import mock

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.test import TestCase

from apps.admission.exceptions import AdmissionNotFound, AdmissionValidationError
from apps.admission.models import AdmissionRecord, Sibling, Vaccination
from apps.admission.services import AdmissionService, SubmissionResult
from apps.admission.validation import validate_admission
from .utils import sibling_row, vaccination_row, valid_admission_data


def cleaned(**overrides):
    return validate_admission(valid_admission_data(**overrides)).raise_if_invalid()


class AdmissionSubmitTests(TestCase):
    def setUp(self):
        cache.clear()

    def test_submit_creates_record_and_rows(self):
        result = AdmissionService.submit(cleaned(
            has_siblings_in_school=True,
            siblings=[sibling_row(name='First'), sibling_row(name='Second')],
            vaccinations=[vaccination_row()],
        ))

        self.assertTrue(result.success)
        self.assertIsNone(result.error)
        admission = AdmissionRecord.objects.get(pk=result.id)
        self.assertEqual(admission.student_full_name, 'Arun Kumar')
        self.assertEqual(admission.aadhaar_number, '123456789012')
        self.assertEqual([s.name for s in admission.siblings.all()], ['First', 'Second'])
        self.assertEqual([s.position for s in admission.siblings.all()], [0, 1])
        self.assertEqual(admission.siblings.first().branch, 'Surakullam')
        self.assertEqual(admission.vaccinations.get().vaccine_name, 'BCG')

    def test_created_at_is_set_by_server(self):
        before = datetime.now(dt_timezone.utc)
        result = AdmissionService.submit(cleaned())
        admission = AdmissionRecord.objects.get(pk=result.id)
        self.assertGreaterEqual(admission.created_at, before)

    def test_rows_are_kept_when_flag_is_off(self):
        result = AdmissionService.submit(cleaned(
            has_siblings_in_school=False,
            siblings=[sibling_row()],
        ))
        self.assertEqual(Sibling.objects.filter(admission_id=result.id).count(), 1)

    def test_aadhaar_is_encrypted_at_rest(self):
        AdmissionService.submit(cleaned())
        with connection.cursor() as cursor:
            cursor.execute('SELECT aadhaar_number FROM admission_records')
            stored = cursor.fetchone()[0]
        self.assertNotEqual(stored, '123456789012')
        self.assertNotIn('123456789012', stored)

    def test_failed_child_insert_rolls_back_everything(self):
        data = cleaned(
            has_siblings_in_school=True,
            siblings=[sibling_row()],
            vaccinations=[vaccination_row()],
        )
        with mock.patch.object(
            Vaccination.objects, 'bulk_create', side_effect=DatabaseError('disk I/O error')
        ):
            with self.assertLogs('apps.admission.services', level='ERROR') as logs:
                result = AdmissionService.submit(data)

        self.assertFalse(result.success)
        self.assertIsNone(result.id)
        self.assertEqual(result.error, 'Failed to submit form. Please try again.')
        self.assertNotIn('disk I/O', result.error)
        self.assertIn('disk I/O error', logs.output[0])
        self.assertEqual(AdmissionRecord.objects.count(), 0)
        self.assertEqual(Sibling.objects.count(), 0)

    def test_submit_raw_validates_first(self):
        with self.assertRaises(AdmissionValidationError) as ctx:
            AdmissionService.submit_raw(valid_admission_data(father_mobile_number='123'))
        self.assertEqual(ctx.exception.errors['father_mobile_number'], ['Mobile must be 10 digits'])
        self.assertEqual(AdmissionRecord.objects.count(), 0)

        result = AdmissionService.submit_raw(valid_admission_data())
        self.assertTrue(result.success)

    def test_result_to_dict(self):
        pk = uuid.uuid4()
        self.assertEqual(SubmissionResult.ok(pk).to_dict(), {'success': True, 'id': str(pk)})
        self.assertEqual(
            SubmissionResult.failure('nope').to_dict(),
            {'success': False, 'error': 'nope'},
        )


class AdmissionReadTests(TestCase):
    def setUp(self):
        cache.clear()

    def submit(self, name):
        return AdmissionService.submit(cleaned(student_full_name=name)).id

    def test_list_is_newest_first(self):
        times = {
            'T1': datetime(2025, 1, 1, tzinfo=dt_timezone.utc),
            'T2': datetime(2025, 1, 2, tzinfo=dt_timezone.utc),
            'T3': datetime(2025, 1, 3, tzinfo=dt_timezone.utc),
        }
        for name in ('T2', 'T1', 'T3'):
            pk = self.submit(name)
            AdmissionRecord.objects.filter(pk=pk).update(created_at=times[name])
        cache.clear()

        names = [a.student_full_name for a in AdmissionService.list_admissions()]
        self.assertEqual(names, ['T3', 'T2', 'T1'])

    def test_empty_list(self):
        self.assertEqual(AdmissionService.list_admissions(), [])

    def test_list_is_cached(self):
        self.submit('Cached')
        cache.clear()
        AdmissionService.list_admissions()
        with self.assertNumQueries(0):
            admissions = AdmissionService.list_admissions()
        self.assertEqual(len(admissions), 1)

    def test_submission_invalidates_cached_list(self):
        self.assertEqual(AdmissionService.list_admissions(), [])

        with self.captureOnCommitCallbacks(execute=True):
            self.submit('Fresh')

        names = [a.student_full_name for a in AdmissionService.list_admissions()]
        self.assertEqual(names, ['Fresh'])

    def test_submission_during_list_read_is_not_hidden(self):
        # A submission commits after the list query but before it is cached
        real_set = cache.set
        committed = []

        def set_after_submission(key, value, *args, **kwargs):
            if not committed:
                committed.append(key)
                with self.captureOnCommitCallbacks(execute=True):
                    self.submit('Late')
            return real_set(key, value, *args, **kwargs)

        with mock.patch.object(cache, 'set', side_effect=set_after_submission):
            self.assertEqual(AdmissionService.list_admissions(), [])

        self.assertEqual(len(committed), 1)
        names = [a.student_full_name for a in AdmissionService.list_admissions()]
        self.assertEqual(names, ['Late'])

    def test_invalidate_without_generation(self):
        cache.clear()
        AdmissionService.invalidate_list_cache()
        self.assertEqual(AdmissionService.list_admissions(), [])

    def test_get_admission(self):
        pk = self.submit('Detail')
        admission = AdmissionService.get_admission(pk)
        self.assertEqual(admission.student_full_name, 'Detail')
        with self.assertNumQueries(0):
            list(admission.siblings.all())
            list(admission.vaccinations.all())

    def test_get_missing_admission(self):
        missing = uuid.uuid4()
        with self.assertRaises(AdmissionNotFound) as ctx:
            AdmissionService.get_admission(missing)
        self.assertEqual(ctx.exception.pk, missing)

        with self.assertRaises(AdmissionNotFound):
            AdmissionService.get_admission('not-a-uuid')
