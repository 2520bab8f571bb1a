from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import AdmissionRecord
from .services import AdmissionService


@receiver(post_save, sender=AdmissionRecord)
def invalidate_admission_list(sender, instance, created, **kwargs):
    """
    Drop the cached staff list once the new admission is committed
    """
    if created:
        transaction.on_commit(AdmissionService.invalidate_list_cache)
