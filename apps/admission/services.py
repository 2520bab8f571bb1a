import logging
import time
from typing import Any, Dict, List, Optional
from uuid import UUID

from django.conf import settings
from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from .constants import (
    ADMISSION_LIST_CACHE_KEY,
    ADMISSION_LIST_GENERATION_KEY,
    SUBMISSION_FAILURE_MESSAGE,
)
from .exceptions import AdmissionNotFound, AdmissionPersistenceError
from .forms import SIBLING_PREFIX, VACCINATION_PREFIX
from .models import AdmissionRecord, Sibling, Vaccination
from .validation import validate_admission

logger = logging.getLogger(__name__)


class SubmissionResult:
    """
    Outcome of a submission attempt. ``error`` is always safe to show to the
    parent; database details only go to the log.
    """

    def __init__(self, success: bool, id: Optional[UUID] = None, error: Optional[str] = None):
        self.success = success
        self.id = id
        self.error = error

    @classmethod
    def ok(cls, pk: UUID) -> 'SubmissionResult':
        return cls(success=True, id=pk)

    @classmethod
    def failure(cls, error: str) -> 'SubmissionResult':
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        data = {'success': self.success}
        if self.success:
            data['id'] = str(self.id)
        else:
            data['error'] = self.error
        return data

    def __repr__(self):
        return f"<SubmissionResult success={self.success} id={self.id} error={self.error!r}>"


class AdmissionService:
    """
    Service for admission submissions and the staff read views
    """

    @staticmethod
    def create_admission(cleaned_data: Dict[str, Any]) -> AdmissionRecord:
        """
        Insert the admission record and its child rows in one transaction.

        Args:
            cleaned_data: Validated values, with ``siblings`` and
                ``vaccinations`` as lists of row mappings

        Returns:
            The saved AdmissionRecord

        Raises:
            AdmissionPersistenceError: when any insert fails; nothing is kept
        """
        record_data = dict(cleaned_data)
        siblings = record_data.pop(SIBLING_PREFIX, None) or []
        vaccinations = record_data.pop(VACCINATION_PREFIX, None) or []

        try:
            with transaction.atomic():
                admission = AdmissionRecord.objects.create(**record_data)

                # Rows are stored as entered, whatever the governing flag says
                Sibling.objects.bulk_create([
                    Sibling(admission=admission, position=position, **row)
                    for position, row in enumerate(siblings)
                ])
                Vaccination.objects.bulk_create([
                    Vaccination(admission=admission, position=position, **row)
                    for position, row in enumerate(vaccinations)
                ])
        except DatabaseError as e:
            raise AdmissionPersistenceError(str(e)) from e

        return admission

    @staticmethod
    def submit(cleaned_data: Dict[str, Any]) -> SubmissionResult:
        """
        Persist already validated admission data.

        Args:
            cleaned_data: Output of ``validate_admission``

        Returns:
            SubmissionResult with the new record id, or the generic failure message
        """
        try:
            admission = AdmissionService.create_admission(cleaned_data)
        except AdmissionPersistenceError as e:
            logger.error(f"Error submitting admission form: {str(e)}", exc_info=True)
            return SubmissionResult.failure(SUBMISSION_FAILURE_MESSAGE)

        logger.info(
            f"Admission {admission.short_id} submitted for {admission.school_branch} "
            f"({admission.standard_applying_for})"
        )
        return SubmissionResult.ok(admission.pk)

    @staticmethod
    def submit_raw(data: Dict[str, Any]) -> SubmissionResult:
        """
        Validate then persist.

        Raises:
            AdmissionValidationError: when ``data`` is invalid
        """
        cleaned_data = validate_admission(data).raise_if_invalid()
        return AdmissionService.submit(cleaned_data)

    @staticmethod
    def list_admissions() -> List[AdmissionRecord]:
        """
        All admissions, newest first, with their child rows prefetched.
        Cached until the next submission is committed.
        """
        # Read the generation before querying: a submission committed while
        # the query runs bumps it, so the list stored below is never served.
        cache_key = f"{ADMISSION_LIST_CACHE_KEY}:{AdmissionService._list_generation()}"
        admissions = cache.get(cache_key)
        if admissions is not None:
            return admissions

        admissions = list(
            AdmissionRecord.objects
            .prefetch_related('siblings', 'vaccinations')
            .order_by('-created_at')
        )
        cache.set(cache_key, admissions, settings.ADMISSION_LIST_CACHE_TIMEOUT)
        return admissions

    @staticmethod
    def _list_generation() -> int:
        return cache.get_or_set(ADMISSION_LIST_GENERATION_KEY, time.time_ns, None)

    @staticmethod
    def get_admission(pk) -> AdmissionRecord:
        """
        One admission with its child rows.

        Raises:
            AdmissionNotFound: when no record has this id
        """
        try:
            return (
                AdmissionRecord.objects
                .prefetch_related('siblings', 'vaccinations')
                .get(pk=pk)
            )
        except (AdmissionRecord.DoesNotExist, ValidationError, ValueError):
            raise AdmissionNotFound(pk)

    @staticmethod
    def invalidate_list_cache():
        """Move readers to a new generation; older cached lists are never read again"""
        try:
            cache.incr(ADMISSION_LIST_GENERATION_KEY)
        except ValueError:
            # Generation evicted or never set
            cache.set(ADMISSION_LIST_GENERATION_KEY, time.time_ns(), None)
