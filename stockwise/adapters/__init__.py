"""
StockWise Adapters.

Implementations of protocols for external systems.

Usage:
    from stockwise.adapters import build_identity_backend

    identity = build_identity_backend()
    service = AccessService(identity)

Each call builds a new backend; callers own the instance and pass it on.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from stockwise.conf import stockwise_settings
from stockwise.protocols.identity import IdentityBackend

logger = logging.getLogger(__name__)


def build_identity_backend(path: str | None = None) -> IdentityBackend:
    """
    Instantiate the identity backend named by STOCKWISE['IDENTITY_BACKEND'].

    Raises:
        ImproperlyConfigured: If the path is empty or the import fails
    """
    backend_path = path or stockwise_settings.IDENTITY_BACKEND
    if not backend_path:
        raise ImproperlyConfigured(
            "STOCKWISE['IDENTITY_BACKEND'] must be configured. "
            "Example: 'stockwise.adapters.django_auth.DjangoIdentityBackend'"
        )

    try:
        backend_class = import_string(backend_path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Failed to import identity backend '{backend_path}': {e}"
        ) from e

    backend = backend_class()
    if not isinstance(backend, IdentityBackend):
        raise ImproperlyConfigured(
            f"'{backend_path}' does not implement the IdentityBackend protocol"
        )
    logger.debug("Loaded identity backend: %s", backend_path)
    return backend


__all__ = [
    "build_identity_backend",
]
