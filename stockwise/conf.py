"""
StockWise configuration.

Usage in settings.py:
    STOCKWISE = {
        "IDENTITY_BACKEND": "stockwise.adapters.django_auth.DjangoIdentityBackend",
        "EMAIL_DOMAIN": "decd.local",
        "PRODUCTS_FIXTURE": "/srv/decd/products.json",
        "NOTIFY_ON_ADJUST": True,
    }
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from django.conf import settings


DEFAULT_PRODUCTS_FIXTURE = Path(__file__).resolve().parent / 'fixtures' / 'products.json'


@dataclass
class StockwiseSettings:
    """StockWise configuration settings."""

    # Identity backend (dotted path)
    IDENTITY_BACKEND: str = "stockwise.adapters.django_auth.DjangoIdentityBackend"

    # Domain used to turn usernames into login emails
    EMAIL_DOMAIN: str = "decd.local"

    # JSON file used by seed_products ("" = bundled fixture)
    PRODUCTS_FIXTURE: str = ""

    # Create a Notification for every stock adjustment
    NOTIFY_ON_ADJUST: bool = True

    # Notifications shown in the header
    NOTIFICATIONS_LIMIT: int = 5

    @property
    def products_fixture_path(self) -> Path:
        return Path(self.PRODUCTS_FIXTURE) if self.PRODUCTS_FIXTURE else DEFAULT_PRODUCTS_FIXTURE


def get_stockwise_settings() -> StockwiseSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "STOCKWISE", {})
    return StockwiseSettings(**{
        k: v for k, v in user_settings.items()
        if k in StockwiseSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_stockwise_settings(), name)


stockwise_settings = _LazySettings()
