"""
Catalog — product CRUD, loan record cleanup and product seeding.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from django.db import transaction

from stockwise.conf import stockwise_settings
from stockwise.exceptions import StockwiseError
from stockwise.forms import ProductForm, ProductUpdateForm, validated
from stockwise.models.enums import LoanStatus
from stockwise.models.loan import Loan
from stockwise.models.product import Product

logger = logging.getLogger('stockwise')


@dataclass(frozen=True)
class ProductChanges:
    """Mutable product fields. None means "leave unchanged"."""

    name: str | None = None
    category: str | None = None
    location: str | None = None
    quantity: int | None = None
    reorder_point: int | None = None

    def as_updates(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


class CatalogOperations:
    """Product and loan record maintenance."""

    @classmethod
    def create_product(cls, data: dict) -> Product:
        """
        Create a product.

        Raises:
            StockwiseError('VALIDATION_ERROR'): invalid fields
            StockwiseError('DUPLICATE_ID'): id already used (case-insensitive)
        """
        cleaned = validated(ProductForm, data)

        with transaction.atomic():
            if Product.objects.filter(pk__iexact=cleaned['id']).exists():
                raise StockwiseError('DUPLICATE_ID', product_id=cleaned['id'])
            product = Product.objects.create(**cleaned)

        logger.info("catalog.product.created", extra={"product_id": product.pk})
        return product

    @classmethod
    def update_product(cls, product_id: str, changes: ProductChanges | dict) -> Product:
        """
        Apply a partial update. The product id cannot be changed.

        Raises:
            StockwiseError('VALIDATION_ERROR'): invalid fields or id given
            StockwiseError('NOT_FOUND'): product does not exist
        """
        if isinstance(changes, dict):
            if 'id' in changes:
                raise StockwiseError(
                    'VALIDATION_ERROR',
                    message='El ID del producto no se puede modificar.',
                    field='id',
                )
            unknown = set(changes) - {f.name for f in fields(ProductChanges)}
            if unknown:
                raise StockwiseError(
                    'VALIDATION_ERROR',
                    message='Datos de actualización inválidos.',
                    field=sorted(unknown)[0],
                )
            changes = ProductChanges(**changes)

        updates = changes.as_updates()
        if updates:
            cleaned = validated(ProductUpdateForm, updates)
            updates = {k: cleaned[k] for k in updates}

        with transaction.atomic():
            try:
                product = Product.objects.select_for_update().get(pk=product_id)
            except Product.DoesNotExist:
                raise StockwiseError(
                    'NOT_FOUND',
                    message='No se encontró el producto a actualizar.',
                    product_id=product_id,
                ) from None

            for field, value in updates.items():
                setattr(product, field, value)
            if updates:
                product.save(update_fields=[*updates, 'updated_at'])

        logger.info(
            "catalog.product.updated",
            extra={"product_id": product_id, "fields": sorted(updates)},
        )
        return product

    @classmethod
    def delete_loan(cls, loan_id: str) -> None:
        """
        Delete a returned loan record.

        Active loans cannot be deleted: their stock would be lost.

        Raises:
            StockwiseError('NOT_FOUND'): loan does not exist
            StockwiseError('CONFLICT'): loan is still active
        """
        with transaction.atomic():
            loan = Loan.objects.select_for_update().filter(pk=loan_id).first()
            if loan is None:
                raise StockwiseError(
                    'NOT_FOUND',
                    message='No se encontró el préstamo a eliminar.',
                    loan_id=loan_id,
                )
            if loan.status == LoanStatus.LOANED:
                raise StockwiseError(
                    'CONFLICT',
                    message='Solo se pueden eliminar préstamos ya devueltos.',
                    loan_id=loan_id,
                )
            loan.delete()

        logger.info("catalog.loan.deleted", extra={"loan_id": loan_id})

    @classmethod
    def seed_products(cls, path: str | Path | None = None, dry_run: bool = False) -> int:
        """
        Upsert products from a JSON file shaped ``{"products": [...]}``.

        Entries use the same keys as ``create_product``; ``reorderPoint`` is
        accepted as an alias of ``reorder_point``. Entries without an id are
        skipped.

        Returns:
            Number of products written (or that would be written).
        """
        path = Path(path) if path else stockwise_settings.products_fixture_path
        with open(path, encoding='utf-8') as fh:
            payload = json.load(fh)

        entries = payload.get('products') or []
        rows = []
        for entry in entries:
            if not entry.get('id'):
                logger.warning(
                    "catalog.seed.skipped",
                    extra={"product_name": entry.get('name', ''), "path": str(path)},
                )
                continue
            entry = dict(entry)
            if 'reorderPoint' in entry:
                entry['reorder_point'] = entry.pop('reorderPoint')
            rows.append(validated(ProductForm, entry))

        if dry_run:
            return len(rows)

        with transaction.atomic():
            for row in rows:
                product_id = row.pop('id')
                Product.objects.update_or_create(pk=product_id, defaults=row)

        logger.info("catalog.seed", extra={"count": len(rows), "path": str(path)})
        return len(rows)
