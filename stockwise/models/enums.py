"""
Enums for StockWise models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class LoanStatus(models.TextChoices):
    """
    Loan lifecycle status.

    LOANED --return_loan()--> RETURNED (terminal, irreversible)
    """
    LOANED = 'Prestado', _('Prestado')
    RETURNED = 'Devuelto', _('Devuelto')


class MovementType(models.TextChoices):
    """Kind of audit movement."""
    DEDUCTION = 'descuento', _('Descuento')


class NotificationType(models.TextChoices):
    ADJUSTMENT = 'ajuste', _('Ajuste')


class Role(models.TextChoices):
    ADMIN = 'admin', _('Administrador')
    USER = 'user', _('Usuario')


class Permission(models.TextChoices):
    """Screens a profile may access."""
    DASHBOARD = 'dashboard', _('Panel')
    INVENTORY = 'inventory', _('Inventario')
    LOANS = 'loans', _('Préstamos')
    REPORTS = 'reports', _('Reportes')
    SETTINGS = 'settings', _('Configuración')


ALL_PERMISSIONS = [p.value for p in Permission]
