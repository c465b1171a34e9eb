"""
Identity Protocol — Interface for the authentication service.

StockWise defines this protocol; adapters in ``stockwise.adapters``
implement it. Adapters translate every native failure into
``IdentityError`` with one of these codes:

    USER_NOT_FOUND    no account for the uid/email
    EMAIL_EXISTS      create_user with an email already in use
    INVALID_PASSWORD  password rejected by the service
    UPSTREAM          anything else
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class IdentityRecord:
    """Account as seen by the identity service."""

    uid: str
    email: str
    display_name: str = ""
    custom_claims: dict = field(default_factory=dict)


@runtime_checkable
class IdentityBackend(Protocol):
    """
    Protocol for identity services.

    Implementations should provide methods to look up, create, update and
    delete accounts, and to set the custom claims carried by their tokens.
    """

    def get_user_by_email(self, email: str) -> IdentityRecord:
        """
        Look up an account by email.

        Raises:
            IdentityError('USER_NOT_FOUND'): no such account
        """
        ...

    def create_user(
        self, email: str, password: str, display_name: str = "", *, validate: bool = True,
    ) -> IdentityRecord:
        """
        Create an account.

        ``validate=False`` skips the service's password policy; seed accounts
        with fixed passwords use it.

        Raises:
            IdentityError('EMAIL_EXISTS'): email already registered
            IdentityError('INVALID_PASSWORD'): password rejected
        """
        ...

    def update_user(self, uid: str, *, display_name: str | None = None) -> IdentityRecord:
        """
        Update account attributes. None leaves the attribute unchanged.

        Raises:
            IdentityError('USER_NOT_FOUND'): no such account
        """
        ...

    def set_custom_claims(self, uid: str, claims: dict) -> None:
        """
        Replace the account's custom claims.

        Raises:
            IdentityError('USER_NOT_FOUND'): no such account
        """
        ...

    def delete_user(self, uid: str) -> None:
        """
        Delete an account.

        Raises:
            IdentityError('USER_NOT_FOUND'): no such account
        """
        ...
