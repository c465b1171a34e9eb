"""
Management command to load products from a JSON file.

Usage:
    python manage.py seed_products
    python manage.py seed_products --file products.json --dry-run
"""

from django.core.management.base import BaseCommand, CommandError

from stockwise import inventory
from stockwise.exceptions import StockwiseError


class Command(BaseCommand):
    """Seed products command."""

    help = 'Carga productos desde un archivo JSON {"products": [...]}'

    def add_arguments(self, parser):
        parser.add_argument(
            '--file',
            default=None,
            help='Archivo JSON (por defecto STOCKWISE["PRODUCTS_FIXTURE"])'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Valida el archivo sin escribir nada'
        )

    def handle(self, *args, **options):
        try:
            count = inventory.seed_products(options['file'], dry_run=options['dry_run'])
        except (OSError, ValueError) as e:
            raise CommandError(f'No se pudo leer el archivo: {e}') from e
        except StockwiseError as e:
            raise CommandError(e.message) from e

        if options['dry_run']:
            self.stdout.write(f'{count} producto(s) se cargaría(n)')
        else:
            self.stdout.write(self.style.SUCCESS(f'{count} producto(s) cargado(s)'))
