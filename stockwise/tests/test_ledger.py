"""
Tests for the quantity ledger (loans, returns, adjustments, deletion).
"""

import pytest

from stockwise import inventory, StockwiseError
from stockwise.models import Loan, LoanStatus, MovementType, Notification, Product, StockMovement


pytestmark = pytest.mark.django_db


class TestLoanOut:
    """Tests for inventory.loan_out()."""

    def test_loan_out_decrements_and_creates_loan(self, projector):
        """Loan deducts stock and records an active loan."""
        loan = inventory.loan_out('PRJ-01', 2, 'Aula 3')

        projector.refresh_from_db()
        assert projector.quantity == 3
        assert loan.pk
        assert loan.status == LoanStatus.LOANED
        assert loan.product_name == 'Proyector Epson'
        assert loan.quantity == 2
        assert loan.return_date is None

    def test_loan_out_entire_stock(self, projector):
        """Lending every unit leaves quantity at zero."""
        inventory.loan_out('PRJ-01', 5, 'Biblioteca')

        projector.refresh_from_db()
        assert projector.quantity == 0

    def test_loan_out_insufficient_stock_writes_nothing(self, projector):
        """Asking for more than available fails with no writes."""
        with pytest.raises(StockwiseError) as exc:
            inventory.loan_out('PRJ-01', 6, 'Aula 3')

        assert exc.value.code == 'INSUFFICIENT_STOCK'
        assert exc.value.available == 5
        assert exc.value.requested == 6
        projector.refresh_from_db()
        assert projector.quantity == 5
        assert Loan.objects.count() == 0
        assert StockMovement.objects.count() == 0

    def test_loan_out_missing_product(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.loan_out('NOPE', 1, 'Aula 3')

        assert exc.value.code == 'NOT_FOUND'

    @pytest.mark.parametrize('quantity', [0, -1, 'dos'])
    def test_loan_out_invalid_quantity(self, projector, quantity):
        """Quantity must be an integer >= 1, checked before any write."""
        with pytest.raises(StockwiseError) as exc:
            inventory.loan_out('PRJ-01', quantity, 'Aula 3')

        assert exc.value.code == 'VALIDATION_ERROR'
        assert exc.value.data['field'] == 'quantity'
        projector.refresh_from_db()
        assert projector.quantity == 5

    def test_loan_out_short_requester(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.loan_out('PRJ-01', 1, 'A')

        assert exc.value.code == 'VALIDATION_ERROR'
        assert exc.value.message == 'El solicitante debe tener al menos 2 caracteres.'

    def test_sequential_loans_never_go_negative(self, projector):
        """Second loan sees the quantity left by the first."""
        inventory.loan_out('PRJ-01', 4, 'Aula 1')

        with pytest.raises(StockwiseError) as exc:
            inventory.loan_out('PRJ-01', 2, 'Aula 2')

        assert exc.value.code == 'INSUFFICIENT_STOCK'
        projector.refresh_from_db()
        assert projector.quantity == 1


class TestReturnLoan:
    """Tests for inventory.return_loan()."""

    def test_return_restores_quantity(self, projector):
        """loan_out followed by return_loan restores the original quantity."""
        loan = inventory.loan_out('PRJ-01', 3, 'Aula 3')
        returned = inventory.return_loan(loan.pk)

        projector.refresh_from_db()
        assert projector.quantity == 5
        assert returned.status == LoanStatus.RETURNED
        assert returned.return_date is not None

    def test_return_twice_fails_without_writes(self, projector):
        """A returned loan cannot be returned again."""
        loan = inventory.loan_out('PRJ-01', 3, 'Aula 3')
        inventory.return_loan(loan.pk)
        first_return = Loan.objects.get(pk=loan.pk).return_date

        with pytest.raises(StockwiseError) as exc:
            inventory.return_loan(loan.pk)

        assert exc.value.code == 'INVALID_STATE'
        projector.refresh_from_db()
        assert projector.quantity == 5
        assert Loan.objects.get(pk=loan.pk).return_date == first_return

    def test_return_unknown_loan(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.return_loan('does-not-exist')

        assert exc.value.code == 'INVALID_STATE'

    def test_return_when_product_deleted(self, projector):
        """Return succeeds without restoring stock if the product is gone."""
        loan = inventory.loan_out('PRJ-01', 1, 'Aula 3')
        Product.objects.filter(pk='PRJ-01').delete()

        returned = inventory.return_loan(loan.pk)

        assert returned.status == LoanStatus.RETURNED
        assert not Product.objects.filter(pk='PRJ-01').exists()


class TestAdjustStock:
    """Tests for inventory.adjust_stock()."""

    def test_adjust_deducts_and_records_movement(self, projector):
        movement = inventory.adjust_stock('PRJ-01', 3, 'damage')

        projector.refresh_from_db()
        assert projector.quantity == 2
        assert StockMovement.objects.count() == 1
        assert movement.type == MovementType.DEDUCTION
        assert movement.reason == 'damage'
        assert movement.quantity == 3
        assert movement.product_name == 'Proyector Epson'

    def test_adjust_creates_notification(self, projector):
        inventory.adjust_stock('PRJ-01', 1, 'Extraviado')

        notification = Notification.objects.get()
        assert 'Proyector Epson' in notification.title
        assert 'Extraviado' in notification.description
        assert not notification.is_read

    def test_adjust_without_notification(self, projector, settings):
        settings.STOCKWISE = {'NOTIFY_ON_ADJUST': False}

        inventory.adjust_stock('PRJ-01', 1, 'Extraviado')

        assert Notification.objects.count() == 0

    def test_adjust_insufficient_stock_writes_nothing(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.adjust_stock('PRJ-01', 6, 'damage')

        assert exc.value.code == 'INSUFFICIENT_STOCK'
        projector.refresh_from_db()
        assert projector.quantity == 5
        assert StockMovement.objects.count() == 0
        assert Notification.objects.count() == 0

    def test_adjust_missing_product(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.adjust_stock('NOPE', 1, 'damage')

        assert exc.value.code == 'NOT_FOUND'

    def test_adjust_requires_reason(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.adjust_stock('PRJ-01', 1, 'ab')

        assert exc.value.code == 'VALIDATION_ERROR'
        assert exc.value.data['field'] == 'reason'

    def test_adjust_zero_quantity(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.adjust_stock('PRJ-01', 0, 'damage')

        assert exc.value.code == 'VALIDATION_ERROR'
        assert exc.value.message == 'La cantidad a descontar debe ser mayor que cero.'

    def test_movements_are_immutable(self, projector):
        movement = inventory.adjust_stock('PRJ-01', 1, 'damage')

        movement.reason = 'otra cosa'
        with pytest.raises(ValueError):
            movement.save()
        with pytest.raises(ValueError):
            movement.delete()


class TestDeleteProduct:
    """Tests for inventory.delete_product()."""

    def test_delete_blocked_by_active_loan(self, projector):
        inventory.loan_out('PRJ-01', 1, 'Aula 3')

        with pytest.raises(StockwiseError) as exc:
            inventory.delete_product('PRJ-01')

        assert exc.value.code == 'CONFLICT'
        assert exc.value.data['active_loans'] == 1
        assert Product.objects.filter(pk='PRJ-01').exists()

    def test_delete_after_return_keeps_history(self, projector):
        """Returned loans and movements survive product deletion."""
        loan = inventory.loan_out('PRJ-01', 1, 'Aula 3')
        inventory.return_loan(loan.pk)
        inventory.adjust_stock('PRJ-01', 1, 'damage')

        inventory.delete_product('PRJ-01')

        assert not Product.objects.filter(pk='PRJ-01').exists()
        assert Loan.objects.filter(pk=loan.pk).exists()
        assert StockMovement.objects.filter(product_id='PRJ-01').count() == 1

    def test_delete_missing_product(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.delete_product('NOPE')

        assert exc.value.code == 'NOT_FOUND'


class TestLedgerSequence:

    def test_quantity_never_negative(self, projector, laptop):
        """Accepted and rejected operations keep every quantity >= 0."""
        operations = [
            lambda: inventory.loan_out('PRJ-01', 3, 'Aula 1'),
            lambda: inventory.adjust_stock('PRJ-01', 2, 'damage'),
            lambda: inventory.loan_out('PRJ-01', 1, 'Aula 2'),
            lambda: inventory.adjust_stock('LAP-01', 10, 'obsoleto'),
            lambda: inventory.loan_out('LAP-01', 1, 'Aula 3'),
        ]
        for operation in operations:
            try:
                operation()
            except StockwiseError:
                pass
            assert not Product.objects.filter(quantity__lt=0).exists()

        projector.refresh_from_db()
        laptop.refresh_from_db()
        assert projector.quantity == 0
        assert laptop.quantity == 0
