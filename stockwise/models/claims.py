"""
AccountClaims model — custom claims for django.contrib.auth accounts.

Only used by ``DjangoIdentityBackend``.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class AccountClaims(models.Model):

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='stockwise_claims',
    )
    claims = models.JSONField(default=dict, blank=True, verbose_name=_('Claims'))

    class Meta:
        verbose_name = _('Claims de cuenta')
        verbose_name_plural = _('Claims de cuentas')

    def __str__(self) -> str:
        return f"{self.user} {self.claims}"
