import uuid

from django.db import models


class UUIDModel(models.Model):
    """
    UUID primary key to prevent ID enumeration on public URLs
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name='Universal ID'
    )

    class Meta:
        abstract = True

    @property
    def short_id(self):
        """Short identifier for logging and display"""
        return str(self.id)[:8]


class TimeStampedModel(models.Model):
    """
    Creation and modification timestamps, both set by the database layer
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        verbose_name='Creation Timestamp'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Last Modification Timestamp'
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']


class BaseModel(UUIDModel, TimeStampedModel):
    """
    Base model combining UUID and timestamps
    """

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.__class__.__name__} {self.short_id}"
