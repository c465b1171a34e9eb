"""
Management command to create the seed accounts.

Usage:
    python manage.py seed_users
    python manage.py seed_users --backend stockwise.adapters.memory.InMemoryIdentityBackend
"""

from django.core.management.base import BaseCommand, CommandError

from stockwise.adapters import build_identity_backend
from stockwise.exceptions import StockwiseError
from stockwise.services.access import AccessService


class Command(BaseCommand):
    """Ensure seed users command."""

    help = 'Crea (si faltan) las cuentas iniciales y sus perfiles'

    def add_arguments(self, parser):
        parser.add_argument(
            '--backend',
            default=None,
            help='Ruta del backend de identidad (por defecto STOCKWISE["IDENTITY_BACKEND"])'
        )

    def handle(self, *args, **options):
        access = AccessService(build_identity_backend(options['backend']))
        try:
            results = access.ensure_seed_users()
        except StockwiseError as e:
            raise CommandError(e.message) from e

        for result in results:
            state = 'creado' if result.identity_created else 'existente'
            profile = 'perfil creado' if result.profile_created else 'perfil existente'
            self.stdout.write(f'{result.username}: {state}, {profile}')
        self.stdout.write(self.style.SUCCESS(f'{len(results)} cuenta(s) verificada(s)'))
