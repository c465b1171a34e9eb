"""
Notification model — header notices raised by stock adjustments.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from stockwise.models.enums import NotificationType
from stockwise.models.loan import new_record_id


class Notification(models.Model):

    id = models.CharField(primary_key=True, max_length=64, default=new_record_id, editable=False)
    type = models.CharField(
        max_length=20,
        choices=NotificationType.choices,
        default=NotificationType.ADJUSTMENT,
    )
    title = models.CharField(max_length=200, verbose_name=_('Título'))
    description = models.TextField(blank=True, verbose_name=_('Descripción'))
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    is_read = models.BooleanField(default=False, verbose_name=_('Leída'))

    class Meta:
        verbose_name = _('Notificación')
        verbose_name_plural = _('Notificaciones')
        ordering = ['-created_at']

    def __str__(self) -> str:
        return self.title
