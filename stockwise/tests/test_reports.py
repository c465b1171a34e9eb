"""
Tests for the inventory report aggregator.
"""

from datetime import datetime, timezone

import pytest

from stockwise import inventory
from stockwise.reports import classify, generate_inventory_report, summarize_movements


class TestGenerateInventoryReport:

    def test_buckets_and_summary(self):
        """Each product lands in exactly one tier, counts in the summary."""
        products = [
            {'name': 'p0', 'quantity': 0, 'reorderPoint': 2},
            {'name': 'p1', 'quantity': 1, 'reorderPoint': 2},
            {'name': 'p2', 'quantity': 5, 'reorderPoint': 2},
        ]

        report = generate_inventory_report(products, [])

        assert [l.name for l in report.critical] == ['p0']
        assert [l.name for l in report.low] == ['p1']
        assert [l.name for l in report.in_stock] == ['p2']
        assert report.general_summary == (
            'El inventario cuenta con un total de 3 tipos de productos. '
            'Hay 1 producto(s) agotados y 1 con stock bajo, requiriendo atención. '
            'Actualmente, existen 0 préstamos activos.'
        )

    def test_healthy_summary(self):
        report = generate_inventory_report([{'name': 'a', 'quantity': 9, 'reorderPoint': 1}], [])

        assert 'En general, los niveles de stock son saludables.' in report.general_summary

    def test_order_preserved(self):
        products = [{'name': n, 'quantity': 10, 'reorderPoint': 0} for n in 'dcba']

        report = generate_inventory_report(products, [])

        assert [l.name for l in report.in_stock] == ['d', 'c', 'b', 'a']

    def test_zero_reorder_point_zero_quantity_is_critical(self):
        assert classify(0, 0) == 'critical'
        assert classify(3, 3) == 'low'
        assert classify(4, 3) == 'in_stock'

    def test_as_dict_shape(self):
        loans = [{'id': 'l1', 'productName': 'Proyector', 'quantity': 2, 'requester': 'Aula 3'}]

        data = generate_inventory_report([], loans).as_dict()

        assert data['stockAlerts'] == {'critical': [], 'low': []}
        assert data['inStock'] == []
        assert data['activeLoans'] == [
            {'id': 'l1', 'name': 'Proyector', 'quantity': 2, 'requester': 'Aula 3'}
        ]
        assert 'existen 1 préstamos activos' in data['generalSummary']

    def test_deterministic(self):
        products = [{'name': 'x', 'quantity': 1, 'reorderPoint': 1}]

        assert generate_inventory_report(products, []) == generate_inventory_report(products, [])


class TestSummarizeMovements:

    def test_no_movements(self):
        assert summarize_movements([]) == ''

    def test_latest_movement(self):
        movements = [
            {'date': datetime(2026, 1, 1, tzinfo=timezone.utc), 'quantity': 1,
             'productName': 'Viejo', 'reason': 'antes'},
            {'date': datetime(2026, 3, 1, tzinfo=timezone.utc), 'quantity': 2,
             'productName': 'Proyector', 'reason': 'roto'},
        ]

        summary = summarize_movements(movements)

        assert summary == 'El último ajuste descontó 2 unidad(es) de Proyector. Razón: roto.'


@pytest.mark.django_db
class TestInventoryReport:

    def test_report_from_database(self, projector, laptop):
        inventory.loan_out('PRJ-01', 4, 'Aula 3')

        report = inventory.report()

        assert [l.name for l in report.low] == ['Proyector Epson']
        assert [l.name for l in report.in_stock] == ['Portátil Lenovo']
        assert report.active_loans[0].requester == 'Aula 3'
