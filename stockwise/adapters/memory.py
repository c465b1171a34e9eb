"""
In-memory identity backend — Stub adapter for development and testing.

Usage in settings.py:
    STOCKWISE = {
        "IDENTITY_BACKEND": "stockwise.adapters.memory.InMemoryIdentityBackend",
    }

WARNING: Do NOT use in production. Accounts live in a dict and vanish with
the process; passwords are only length-checked.
"""

from __future__ import annotations

import uuid

from stockwise.exceptions import IdentityError
from stockwise.protocols.identity import IdentityRecord

MIN_PASSWORD_LENGTH = 6


class InMemoryIdentityBackend:
    """
    Identity backend holding accounts in a dictionary.

    Implements the ``IdentityBackend`` protocol without any external
    dependencies, making it suitable for:

    - Unit/integration tests that must not touch a real auth service
    - Local development
    """

    def __init__(self):
        self.accounts: dict[str, IdentityRecord] = {}
        self.passwords: dict[str, str] = {}

    def _get(self, uid: str) -> IdentityRecord:
        try:
            return self.accounts[uid]
        except KeyError:
            raise IdentityError('USER_NOT_FOUND', uid=uid) from None

    def get_user_by_email(self, email: str) -> IdentityRecord:
        for record in self.accounts.values():
            if record.email.lower() == email.lower():
                return record
        raise IdentityError('USER_NOT_FOUND', email=email)

    def create_user(
        self, email: str, password: str, display_name: str = "", *, validate: bool = True,
    ) -> IdentityRecord:
        if any(r.email.lower() == email.lower() for r in self.accounts.values()):
            raise IdentityError('EMAIL_EXISTS', email=email)
        if validate and (not password or len(password) < MIN_PASSWORD_LENGTH):
            raise IdentityError('INVALID_PASSWORD')

        record = IdentityRecord(uid=uuid.uuid4().hex, email=email, display_name=display_name)
        self.accounts[record.uid] = record
        self.passwords[record.uid] = password
        return record

    def update_user(self, uid: str, *, display_name: str | None = None) -> IdentityRecord:
        record = self._get(uid)
        if display_name is not None:
            record = IdentityRecord(
                uid=record.uid,
                email=record.email,
                display_name=display_name,
                custom_claims=record.custom_claims,
            )
            self.accounts[uid] = record
        return record

    def set_custom_claims(self, uid: str, claims: dict) -> None:
        record = self._get(uid)
        self.accounts[uid] = IdentityRecord(
            uid=record.uid,
            email=record.email,
            display_name=record.display_name,
            custom_claims=dict(claims),
        )

    def delete_user(self, uid: str) -> None:
        self._get(uid)
        del self.accounts[uid]
        self.passwords.pop(uid, None)
