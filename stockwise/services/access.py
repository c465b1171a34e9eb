"""
Access — seed accounts, user creation, permission updates and removal.

The identity backend is passed in; nothing here keeps a module-level
client. Identity failures arrive as IdentityError and leave this module
as StockwiseError.

Usage:
    from stockwise.adapters import build_identity_backend
    from stockwise.services.access import AccessService, UserUpdate

    access = AccessService(build_identity_backend())
    access.ensure_seed_users()
    access.update_user(uid, UserUpdate(role='admin'))
"""

import logging
from dataclasses import dataclass

from django.db import transaction

from stockwise.conf import stockwise_settings
from stockwise.exceptions import IdentityError, StockwiseError
from stockwise.forms import NewUserForm, UserUpdateForm, validated
from stockwise.models.enums import ALL_PERMISSIONS, Permission, Role
from stockwise.models.profile import UserProfile
from stockwise.protocols.identity import IdentityBackend

logger = logging.getLogger('stockwise')


@dataclass(frozen=True)
class SeedAccount:
    email: str
    password: str
    name: str
    username: str
    role: str
    permissions: tuple[str, ...]


SEED_ACCOUNTS = (
    SeedAccount(
        email='admin@decd.local',
        password='password123',
        name='Administrador',
        username='admin',
        role=Role.ADMIN,
        permissions=tuple(ALL_PERMISSIONS),
    ),
    SeedAccount(
        email='educacion@decd.local',
        password='123456',
        name='Centro educativo',
        username='educacion',
        role=Role.USER,
        permissions=(Permission.DASHBOARD.value, Permission.INVENTORY.value, Permission.LOANS.value),
    ),
)


@dataclass(frozen=True)
class UserUpdate:
    """Editable profile fields. None means "leave unchanged"."""

    name: str | None = None
    role: str | None = None
    permissions: list[str] | None = None


@dataclass(frozen=True)
class SeedResult:
    username: str
    uid: str
    identity_created: bool
    profile_created: bool


@dataclass(frozen=True)
class UserRemoval:
    uid: str
    identity_removed: bool
    message: str


def build_profile_changes(update: UserUpdate) -> dict:
    """
    Profile fields to write for ``update``.

    - name is copied when given
    - role 'admin' forces every permission
    - role 'user' stores the given permissions (or none)
    - permissions alone replace the permission list
    """
    changes = {}
    if update.name:
        changes['name'] = update.name
    if update.role:
        changes['role'] = update.role
        if update.role == Role.ADMIN:
            changes['permissions'] = list(ALL_PERMISSIONS)
        else:
            changes['permissions'] = list(update.permissions or [])
    elif update.permissions is not None:
        changes['permissions'] = list(update.permissions)
    return changes


def _upstream(error: IdentityError) -> StockwiseError:
    return StockwiseError('UPSTREAM_ERROR', message=error.message, identity_code=error.code)


class AccessService:
    """User and permission management over an identity backend."""

    def __init__(self, identity: IdentityBackend, seed_accounts=SEED_ACCOUNTS):
        self.identity = identity
        self.seed_accounts = seed_accounts

    # ══════════════════════════════════════════════════════════════
    # SEEDING
    # ══════════════════════════════════════════════════════════════

    def ensure_seed_users(self) -> list[SeedResult]:
        """
        Make sure every seed account exists with its role claim and profile.

        Idempotent: existing accounts are reused, the role claim is always
        re-set and an existing profile is never overwritten.

        Raises:
            StockwiseError('UPSTREAM_ERROR'): identity service failure
        """
        results = []
        for account in self.seed_accounts:
            results.append(self._ensure_seed_user(account))
        return results

    def _ensure_seed_user(self, account: SeedAccount) -> SeedResult:
        identity_created = False
        try:
            try:
                record = self.identity.get_user_by_email(account.email)
            except IdentityError as e:
                if e.code != 'USER_NOT_FOUND':
                    raise
                # Seed passwords are fixed; the project's policy applies to new users only.
                record = self.identity.create_user(
                    account.email, account.password, display_name=account.name, validate=False,
                )
                identity_created = True

            self.identity.set_custom_claims(record.uid, {'role': str(account.role)})
        except IdentityError as e:
            logger.error(
                "access.seed.failed",
                extra={"email": account.email, "identity_code": e.code},
            )
            raise _upstream(e) from e

        _, profile_created = UserProfile.objects.get_or_create(
            uid=record.uid,
            defaults={
                'name': account.name,
                'username': account.username,
                'role': account.role,
                'permissions': list(account.permissions),
            },
        )

        logger.info(
            "access.seed",
            extra={
                "username": account.username,
                "uid": record.uid,
                "identity_created": identity_created,
                "profile_created": profile_created,
            },
        )
        return SeedResult(
            username=account.username,
            uid=record.uid,
            identity_created=identity_created,
            profile_created=profile_created,
        )

    # ══════════════════════════════════════════════════════════════
    # MANAGEMENT
    # ══════════════════════════════════════════════════════════════

    def create_user(self, username, password, name, permissions=None) -> UserProfile:
        """
        Create an identity account and its profile with role 'user'.

        Raises:
            StockwiseError('VALIDATION_ERROR'): invalid input or password
            StockwiseError('CONFLICT'): username already in use
            StockwiseError('UPSTREAM_ERROR'): identity service failure
        """
        data = validated(NewUserForm, {
            'username': username,
            'password': password,
            'name': name,
            'permissions': list(permissions or []),
        })
        if UserProfile.objects.filter(username__iexact=data['username']).exists():
            raise StockwiseError(
                'CONFLICT',
                message='Este nombre de usuario ya está en uso.',
                username=data['username'],
            )

        email = f"{data['username']}@{stockwise_settings.EMAIL_DOMAIN}"
        try:
            record = self.identity.create_user(email, data['password'], display_name=data['name'])
        except IdentityError as e:
            logger.warning("access.create.failed", extra={"email": email, "identity_code": e.code})
            if e.code == 'EMAIL_EXISTS':
                raise StockwiseError('CONFLICT', message=e.message, username=data['username']) from e
            if e.code == 'INVALID_PASSWORD':
                raise StockwiseError('VALIDATION_ERROR', message=e.message, field='password') from e
            raise _upstream(e) from e

        profile = UserProfile.objects.create(
            uid=record.uid,
            name=data['name'],
            username=data['username'],
            role=Role.USER,
            permissions=data['permissions'],
        )
        logger.info("access.user.created", extra={"uid": record.uid, "username": profile.username})
        return profile

    def update_user(self, uid: str, update: UserUpdate) -> UserProfile:
        """
        Apply a partial update to a profile and mirror it to the identity.

        name → display name, role → 'role' claim.

        The profile write and both identity calls run in one transaction, so
        an identity failure leaves the profile untouched. An identity service
        outside the database cannot be rolled back: if the display name
        update fails after the claim was set, the claim stays ahead of the
        profile until the update is retried.

        Raises:
            StockwiseError('VALIDATION_ERROR'): unknown role or permission
            StockwiseError('NOT_FOUND'): no profile for uid
            StockwiseError('CONFLICT'): the admin account is protected
            StockwiseError('UPSTREAM_ERROR'): identity service failure
        """
        form_data = {k: v for k, v in {
            'name': update.name,
            'role': update.role,
            'permissions': update.permissions,
        }.items() if v is not None}
        validated(UserUpdateForm, form_data)

        profile = UserProfile.objects.filter(pk=uid).first()
        if profile is None:
            raise StockwiseError('NOT_FOUND', message='No se encontró el usuario.', uid=uid)
        if profile.is_protected:
            raise StockwiseError(
                'CONFLICT',
                message='El usuario administrador no se puede modificar.',
                uid=uid,
            )

        changes = build_profile_changes(update)

        try:
            with transaction.atomic():
                if changes:
                    UserProfile.objects.filter(pk=uid).update(**changes)
                if update.role:
                    self.identity.set_custom_claims(uid, {'role': str(update.role)})
                if update.name:
                    self.identity.update_user(uid, display_name=update.name)
        except IdentityError as e:
            logger.error("access.update.failed", extra={"uid": uid, "identity_code": e.code})
            raise _upstream(e) from e

        logger.info("access.user.updated", extra={"uid": uid, "fields": sorted(changes)})
        profile.refresh_from_db()
        return profile

    def delete_user(self, uid: str, remove_identity: bool = True) -> UserRemoval:
        """
        Remove a user's profile, then (best effort) their identity account.

        The profile deletion is what removes access to the app. An identity
        account that is already gone counts as removed; any other identity
        failure is logged and reported in the result.

        Raises:
            StockwiseError('NOT_FOUND'): no profile for uid
            StockwiseError('CONFLICT'): the admin account is protected
        """
        profile = UserProfile.objects.filter(pk=uid).first()
        if profile is None:
            raise StockwiseError('NOT_FOUND', message='No se encontró el usuario.', uid=uid)
        if profile.is_protected:
            raise StockwiseError(
                'CONFLICT',
                message='El usuario administrador no se puede eliminar.',
                uid=uid,
            )

        profile.delete()
        logger.info("access.user.profile_deleted", extra={"uid": uid})

        if not remove_identity:
            return UserRemoval(uid=uid, identity_removed=False, message='Perfil de usuario eliminado.')

        try:
            self.identity.delete_user(uid)
        except IdentityError as e:
            if e.code != 'USER_NOT_FOUND':
                logger.error("access.user.identity_delete_failed",
                             extra={"uid": uid, "identity_code": e.code})
                return UserRemoval(
                    uid=uid,
                    identity_removed=False,
                    message='El perfil fue eliminado, pero no se pudo eliminar el acceso.',
                )
            logger.info("access.user.identity_missing", extra={"uid": uid})

        return UserRemoval(uid=uid, identity_removed=True, message='Usuario eliminado completamente.')
