"""
Inventory Service — The single public interface for inventory operations.

Usage:
    from stockwise import inventory, StockwiseError

    loan = inventory.loan_out('PRJ-01', 2, 'Aula 3')
    inventory.return_loan(loan.pk)
    inventory.adjust_stock('PRJ-01', 1, 'Dañado')
    inventory.report().as_dict()

User management needs an identity backend and lives in
``stockwise.services.access.AccessService``.
"""

from stockwise.models.movement import StockMovement
from stockwise.models.product import Product
from stockwise.reports import InventoryReport, generate_inventory_report, summarize_movements
from stockwise.services.catalog import CatalogOperations
from stockwise.services.ledger import LedgerOperations
from stockwise.services.queries import InventoryQueries


class Inventory(InventoryQueries, LedgerOperations, CatalogOperations):
    """
    Single interface for inventory operations.

    Parameter convention: (product_id, quantity, ...)

    IMPORTANT: All state-changing methods use atomic transactions with
    row locks. See each method's docstring.
    """

    @classmethod
    def report(cls) -> InventoryReport:
        """Report over every product and the loans still out."""
        return generate_inventory_report(
            Product.objects.order_by('name'),
            cls.active_loans().order_by('loan_date'),
        )

    @classmethod
    def movements_summary(cls, limit: int = 20) -> str:
        return summarize_movements(StockMovement.objects.order_by('-date')[:limit])
