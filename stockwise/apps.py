"""Django app configuration for StockWise."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class StockwiseConfig(AppConfig):
    """Configuration for StockWise app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "stockwise"
    verbose_name = _("Inventario D.E.C.D")
