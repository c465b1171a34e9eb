"""
UserProfile model — application-side profile of an identity account.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from stockwise.models.enums import Role


ADMIN_USERNAME = 'admin'


class UserProfile(models.Model):
    """
    Profile document keyed by the identity backend's uid.

    Permissions are a list of screen names (see ``Permission``). The
    profile with username "admin" is protected from edits and deletion.
    """

    uid = models.CharField(primary_key=True, max_length=128, verbose_name=_('UID'))
    name = models.CharField(max_length=200, verbose_name=_('Nombre'))
    username = models.CharField(max_length=150, unique=True, verbose_name=_('Usuario'))
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        default=Role.USER,
        verbose_name=_('Rol'),
    )
    permissions = models.JSONField(default=list, blank=True, verbose_name=_('Permisos'))

    class Meta:
        verbose_name = _('Perfil de usuario')
        verbose_name_plural = _('Perfiles de usuario')
        ordering = ['username']

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"

    @property
    def is_protected(self) -> bool:
        return self.username == ADMIN_USERNAME

    def has_permission(self, permission: str) -> bool:
        return self.role == Role.ADMIN or permission in (self.permissions or [])
