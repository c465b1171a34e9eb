"""
Tests for product maintenance, loan cleanup and product seeding.
"""

import json

import pytest

from stockwise import inventory, StockwiseError
from stockwise.models import Loan, Product
from stockwise.services.catalog import ProductChanges


pytestmark = pytest.mark.django_db


PRODUCT_DATA = {
    'id': 'ALT-01',
    'name': 'Altavoz portátil',
    'category': 'Audiovisual',
    'location': 'Almacén B',
    'quantity': 2,
    'reorder_point': 2,
}


class TestCreateProduct:

    def test_create_product(self, db):
        product = inventory.create_product(PRODUCT_DATA)

        assert product.pk == 'ALT-01'
        assert Product.objects.get(pk='ALT-01').quantity == 2

    def test_create_duplicate_id_case_insensitive(self, projector):
        """Ids are unique regardless of case."""
        with pytest.raises(StockwiseError) as exc:
            inventory.create_product({**PRODUCT_DATA, 'id': 'prj-01'})

        assert exc.value.code == 'DUPLICATE_ID'
        assert Product.objects.count() == 1

    def test_create_negative_quantity(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.create_product({**PRODUCT_DATA, 'quantity': -1})

        assert exc.value.code == 'VALIDATION_ERROR'
        assert exc.value.message == 'La cantidad no puede ser negativa.'

    def test_create_short_name(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.create_product({**PRODUCT_DATA, 'name': 'A'})

        assert exc.value.data['field'] == 'name'


class TestUpdateProduct:

    def test_partial_update(self, projector):
        product = inventory.update_product('PRJ-01', {'location': 'Sótano', 'reorder_point': 4})

        assert product.location == 'Sótano'
        assert product.reorder_point == 4
        assert product.name == 'Proyector Epson'

    def test_update_with_struct(self, projector):
        product = inventory.update_product('PRJ-01', ProductChanges(quantity=8))

        assert product.quantity == 8

    def test_update_cannot_change_id(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.update_product('PRJ-01', {'id': 'PRJ-99'})

        assert exc.value.code == 'VALIDATION_ERROR'
        assert exc.value.data['field'] == 'id'

    def test_update_unknown_field(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.update_product('PRJ-01', {'price': 10})

        assert exc.value.code == 'VALIDATION_ERROR'

    def test_update_invalid_value(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.update_product('PRJ-01', {'reorder_point': -3})

        assert exc.value.code == 'VALIDATION_ERROR'
        projector.refresh_from_db()
        assert projector.reorder_point == 2

    def test_update_blank_value(self, projector):
        with pytest.raises(StockwiseError) as exc:
            inventory.update_product('PRJ-01', ProductChanges(name='  ', quantity=8))

        assert exc.value.code == 'VALIDATION_ERROR'
        assert exc.value.data['field'] == 'name'
        projector.refresh_from_db()
        assert projector.name == 'Proyector Epson'
        assert projector.quantity == 5

    def test_update_missing_product(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.update_product('NOPE', {'name': 'Nuevo nombre'})

        assert exc.value.code == 'NOT_FOUND'


class TestDeleteLoan:

    def test_delete_returned_loan(self, projector):
        loan = inventory.loan_out('PRJ-01', 1, 'Aula 3')
        inventory.return_loan(loan.pk)

        inventory.delete_loan(loan.pk)

        assert not Loan.objects.filter(pk=loan.pk).exists()

    def test_delete_active_loan_blocked(self, projector):
        loan = inventory.loan_out('PRJ-01', 1, 'Aula 3')

        with pytest.raises(StockwiseError) as exc:
            inventory.delete_loan(loan.pk)

        assert exc.value.code == 'CONFLICT'
        assert Loan.objects.filter(pk=loan.pk).exists()

    def test_delete_missing_loan(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.delete_loan('nope')

        assert exc.value.code == 'NOT_FOUND'


class TestSeedProducts:

    def test_seed_bundled_fixture(self, db):
        count = inventory.seed_products()

        assert count == 5
        assert Product.objects.get(pk='EXT-01').quantity == 0
        assert Product.objects.get(pk='PRJ-01').reorder_point == 1

    def test_seed_is_upsert(self, projector, tmp_path):
        path = tmp_path / 'products.json'
        path.write_text(json.dumps({'products': [
            {**PRODUCT_DATA, 'id': 'PRJ-01', 'name': 'Proyector nuevo', 'quantity': 7},
            {'name': 'Sin id', 'category': 'Varios', 'location': 'Aquí',
             'quantity': 1, 'reorderPoint': 0},
        ]}), encoding='utf-8')

        count = inventory.seed_products(path)

        assert count == 1
        assert Product.objects.count() == 1
        projector.refresh_from_db()
        assert projector.name == 'Proyector nuevo'
        assert projector.quantity == 7

    def test_seed_dry_run(self, db):
        count = inventory.seed_products(dry_run=True)

        assert count == 5
        assert Product.objects.count() == 0


class TestQueries:

    def test_active_loans_only_loaned(self, projector):
        first = inventory.loan_out('PRJ-01', 1, 'Aula 1')
        second = inventory.loan_out('PRJ-01', 1, 'Aula 2')
        inventory.return_loan(first.pk)

        assert list(inventory.active_loans()) == [second]

    def test_get_product_missing(self, db):
        with pytest.raises(StockwiseError) as exc:
            inventory.get_product('NOPE')

        assert exc.value.code == 'NOT_FOUND'

    def test_list_movements_by_product(self, projector, laptop):
        inventory.adjust_stock('PRJ-01', 1, 'damage')
        inventory.adjust_stock('LAP-01', 1, 'damage')

        assert inventory.list_movements('LAP-01').count() == 1
        assert inventory.list_movements().count() == 2
