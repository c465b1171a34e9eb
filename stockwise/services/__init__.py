"""
Inventory services — modular organization of inventory operations.

Re-exports the public classes:
    from stockwise.services import InventoryQueries, LedgerOperations, CatalogOperations, AccessService
"""

from stockwise.services.access import AccessService, UserUpdate
from stockwise.services.catalog import CatalogOperations, ProductChanges
from stockwise.services.ledger import LedgerOperations
from stockwise.services.queries import InventoryQueries

__all__ = [
    'InventoryQueries',
    'LedgerOperations',
    'CatalogOperations',
    'ProductChanges',
    'AccessService',
    'UserUpdate',
]
