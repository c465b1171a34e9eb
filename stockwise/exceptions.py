"""
Exceptions for StockWise.

All business errors are StockWiseError with a structured code for
programmatic handling. Identity adapters raise IdentityError so that the
rest of the app never inspects the collaborator's native error shapes.
"""

from typing import Any


class BaseError(Exception):
    """
    Exception carrying a stable code, a human message and context data.

    Subclasses provide ``_default_messages`` keyed by code.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.code!r}, {self.message!r})"

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': self.data,
        }


class StockwiseError(BaseError):
    """
    Structured exception for inventory, loan and access operations.

    Usage:
        try:
            inventory.loan_out('PRJ-01', 10, 'Aula 3')
        except StockwiseError as e:
            if e.code == 'INSUFFICIENT_STOCK':
                print(f"Solo quedan {e.available} unidades")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages = {
        'NOT_FOUND': 'No se encontró el registro solicitado.',
        'INSUFFICIENT_STOCK': 'Stock insuficiente.',
        'INVALID_STATE': 'El préstamo no existe o ya fue devuelto.',
        'CONFLICT': 'La operación no está permitida en el estado actual.',
        'VALIDATION_ERROR': 'Datos inválidos.',
        'DUPLICATE_ID': 'Este ID ya existe. Por favor, utiliza uno único.',
        'UPSTREAM_ERROR': 'Ocurrió un error desconocido.',
    }

    # HTTP status used by the JSON views
    http_status = {
        'NOT_FOUND': 404,
        'INSUFFICIENT_STOCK': 409,
        'INVALID_STATE': 409,
        'CONFLICT': 409,
        'DUPLICATE_ID': 409,
        'VALIDATION_ERROR': 400,
        'UPSTREAM_ERROR': 502,
    }

    @property
    def available(self) -> int:
        """Shortcut for data['available']."""
        return self.data.get('available', 0)

    @property
    def requested(self) -> int:
        """Shortcut for data['requested']."""
        return self.data.get('requested', 0)

    @property
    def status_code(self) -> int:
        return self.http_status.get(self.code, 400)


class IdentityError(BaseError):
    """Typed failure from an identity backend."""

    _default_messages = {
        'USER_NOT_FOUND': 'El usuario no fue encontrado en el sistema de autenticación.',
        'EMAIL_EXISTS': 'Este nombre de usuario ya está en uso.',
        'INVALID_PASSWORD': 'La contraseña no es válida. Debe tener al menos 6 caracteres.',
        'UPSTREAM': 'Error del servicio de autenticación.',
    }
