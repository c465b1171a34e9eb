"""
Quantity ledger — loans, returns, stock deductions and product deletion.

All state-changing methods run under transaction.atomic() and re-read the
rows they check with select_for_update(). A StockwiseError raised inside the
block rolls everything back: no partial quantity changes, no orphaned
loans or movements.
"""

import logging

from django.db import transaction
from django.utils import timezone

from stockwise.conf import stockwise_settings
from stockwise.exceptions import StockwiseError
from stockwise.forms import LoanForm, StockAdjustmentForm, validated
from stockwise.models.enums import LoanStatus, MovementType, NotificationType
from stockwise.models.loan import Loan
from stockwise.models.movement import StockMovement
from stockwise.models.notification import Notification
from stockwise.models.product import Product

logger = logging.getLogger('stockwise')


def _lock_product(product_id: str) -> Product:
    try:
        return Product.objects.select_for_update().get(pk=product_id)
    except Product.DoesNotExist:
        raise StockwiseError(
            'NOT_FOUND',
            message='El producto seleccionado ya no existe.',
            product_id=product_id,
        ) from None


def _check_available(product: Product, quantity: int) -> None:
    if quantity > product.quantity:
        raise StockwiseError(
            'INSUFFICIENT_STOCK',
            message=f'Stock insuficiente. Solo quedan {product.quantity} unidades.',
            available=product.quantity,
            requested=quantity,
        )


class LedgerOperations:
    """State-changing ledger methods."""

    @classmethod
    def loan_out(cls, product_id, quantity, requester, loan_date=None) -> Loan:
        """
        Lend stock of a product.

        Returns:
            The created Loan (status LOANED, generated id).

        Raises:
            StockwiseError('VALIDATION_ERROR'): bad quantity/requester
            StockwiseError('NOT_FOUND'): product does not exist
            StockwiseError('INSUFFICIENT_STOCK'): quantity > product.quantity

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on Product
            - Verifies stock after lock
        """
        data = validated(LoanForm, {
            'product_id': product_id,
            'quantity': quantity,
            'requester': requester,
            'loan_date': loan_date,
        })

        with transaction.atomic():
            product = _lock_product(data['product_id'])
            _check_available(product, data['quantity'])

            product.quantity -= data['quantity']
            product.save(update_fields=['quantity', 'updated_at'])

            loan = Loan.objects.create(
                product_id=product.pk,
                product_name=product.name,
                requester=data['requester'],
                loan_date=data['loan_date'] or timezone.now(),
                quantity=data['quantity'],
                status=LoanStatus.LOANED,
            )
            logger.info(
                "ledger.loan_out",
                extra={
                    "product_id": product.pk,
                    "qty": data['quantity'],
                    "requester": data['requester'],
                    "loan_id": loan.pk,
                    "remaining": product.quantity,
                },
            )
            return loan

    @classmethod
    def return_loan(cls, loan_id) -> Loan:
        """
        Mark a loan as returned and put its quantity back in stock.

        If the product was deleted in the meantime the return still
        succeeds, without restoring any quantity.

        Raises:
            StockwiseError('INVALID_STATE'): loan missing or already returned

        Concurrency:
            - Runs under transaction.atomic()
            - Locks the Loan, then the Product
        """
        with transaction.atomic():
            loan = Loan.objects.select_for_update().filter(pk=loan_id).first()
            if loan is None:
                raise StockwiseError(
                    'INVALID_STATE',
                    message='No se encontró el préstamo.',
                    loan_id=loan_id,
                )
            if loan.status != LoanStatus.LOANED:
                raise StockwiseError(
                    'INVALID_STATE',
                    message='Este préstamo ya fue devuelto.',
                    loan_id=loan_id,
                    status=loan.status,
                )

            product = Product.objects.select_for_update().filter(pk=loan.product_id).first()
            if product is not None:
                product.quantity += loan.quantity
                product.save(update_fields=['quantity', 'updated_at'])
            else:
                logger.warning(
                    "ledger.return.product_missing",
                    extra={"loan_id": loan.pk, "product_id": loan.product_id},
                )

            loan.status = LoanStatus.RETURNED
            loan.return_date = timezone.now()
            loan.save(update_fields=['status', 'return_date'])

            logger.info(
                "ledger.return",
                extra={
                    "loan_id": loan.pk,
                    "product_id": loan.product_id,
                    "qty": loan.quantity,
                },
            )
            return loan

    @classmethod
    def adjust_stock(cls, product_id, quantity, reason) -> StockMovement:
        """
        Deduct stock (damage, loss, consumption) with an audit movement.

        Returns:
            The StockMovement recorded for the deduction.

        Raises:
            StockwiseError('VALIDATION_ERROR'): quantity <= 0 or reason too short
            StockwiseError('NOT_FOUND'): product does not exist
            StockwiseError('INSUFFICIENT_STOCK'): quantity > product.quantity
        """
        data = validated(StockAdjustmentForm, {
            'product_id': product_id,
            'quantity': quantity,
            'reason': reason,
        })

        with transaction.atomic():
            product = _lock_product(data['product_id'])
            _check_available(product, data['quantity'])

            product.quantity -= data['quantity']
            product.save(update_fields=['quantity', 'updated_at'])

            now = timezone.now()
            movement = StockMovement.objects.create(
                product_id=product.pk,
                product_name=product.name,
                quantity=data['quantity'],
                type=MovementType.DEDUCTION,
                reason=data['reason'],
                date=now,
            )

            if stockwise_settings.NOTIFY_ON_ADJUST:
                Notification.objects.create(
                    type=NotificationType.ADJUSTMENT,
                    title=f'Ajuste de stock: {product.name}',
                    description=(
                        f'Se descontaron {data["quantity"]} unidad(es). '
                        f'Razón: {data["reason"]}'
                    ),
                    created_at=now,
                )

            logger.info(
                "ledger.adjust",
                extra={
                    "product_id": product.pk,
                    "qty": data['quantity'],
                    "reason": data['reason'],
                    "remaining": product.quantity,
                },
            )
            return movement

    @classmethod
    def delete_product(cls, product_id) -> None:
        """
        Delete a product that has no active loans.

        Historical movements and returned loans are kept.

        Raises:
            StockwiseError('CONFLICT'): an active loan references the product
            StockwiseError('NOT_FOUND'): product does not exist
        """
        with transaction.atomic():
            product = _lock_product(product_id)

            active = Loan.objects.active().for_product(product.pk).count()
            if active:
                raise StockwiseError(
                    'CONFLICT',
                    message=(
                        'No se puede eliminar el producto: tiene '
                        f'{active} préstamo(s) activo(s).'
                    ),
                    product_id=product.pk,
                    active_loans=active,
                )

            product.delete()
            logger.info("ledger.delete_product", extra={"product_id": product_id})
