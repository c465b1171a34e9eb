"""
Django identity backend — accounts stored in django.contrib.auth.

The uid is the auth user's primary key as a string; custom claims live in
``AccountClaims``. Password rules come from AUTH_PASSWORD_VALIDATORS,
except for seed accounts created with ``validate=False``.

Usage in settings.py:
    STOCKWISE = {
        "IDENTITY_BACKEND": "stockwise.adapters.django_auth.DjangoIdentityBackend",
    }
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from stockwise.exceptions import IdentityError
from stockwise.models.claims import AccountClaims
from stockwise.protocols.identity import IdentityRecord

logger = logging.getLogger(__name__)


class DjangoIdentityBackend:
    """Implements ``IdentityBackend`` over the project's user model."""

    def __init__(self, user_model=None):
        self.user_model = user_model or get_user_model()

    def _record(self, user) -> IdentityRecord:
        claims = AccountClaims.objects.filter(user=user).values_list('claims', flat=True).first()
        return IdentityRecord(
            uid=str(user.pk),
            email=user.email,
            display_name=user.first_name,
            custom_claims=claims or {},
        )

    def _get(self, uid: str):
        try:
            return self.user_model.objects.get(pk=uid)
        except (self.user_model.DoesNotExist, ValueError):
            raise IdentityError('USER_NOT_FOUND', uid=uid) from None

    def get_user_by_email(self, email: str) -> IdentityRecord:
        user = self.user_model.objects.filter(email__iexact=email).first()
        if user is None:
            raise IdentityError('USER_NOT_FOUND', email=email)
        return self._record(user)

    def create_user(
        self, email: str, password: str, display_name: str = "", *, validate: bool = True,
    ) -> IdentityRecord:
        if self.user_model.objects.filter(email__iexact=email).exists():
            raise IdentityError('EMAIL_EXISTS', email=email)
        if validate:
            try:
                validate_password(password)
            except ValidationError as e:
                raise IdentityError('INVALID_PASSWORD', message=' '.join(e.messages)) from e

        username = email.split('@', 1)[0]
        try:
            with transaction.atomic():
                user = self.user_model.objects.create_user(
                    username=username,
                    email=email,
                    password=password,
                    first_name=display_name,
                )
        except DatabaseError as e:
            raise IdentityError('UPSTREAM', message=str(e)) from e
        logger.debug("Created auth user %s", user.pk)
        return self._record(user)

    def update_user(self, uid: str, *, display_name: str | None = None) -> IdentityRecord:
        user = self._get(uid)
        if display_name is not None:
            user.first_name = display_name
            user.save(update_fields=['first_name'])
        return self._record(user)

    def set_custom_claims(self, uid: str, claims: dict) -> None:
        user = self._get(uid)
        AccountClaims.objects.update_or_create(user=user, defaults={'claims': dict(claims)})
        if 'role' in claims:
            is_admin = claims['role'] == 'admin'
            if user.is_staff != is_admin:
                user.is_staff = is_admin
                user.save(update_fields=['is_staff'])

    def delete_user(self, uid: str) -> None:
        user = self._get(uid)
        user.delete()
