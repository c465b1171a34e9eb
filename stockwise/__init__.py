"""
Django StockWise — Inventario y préstamos del D.E.C.D.

Uso:
    from stockwise import inventory, StockwiseError

    loan = inventory.loan_out('PRJ-01', 2, 'Aula 3')
    inventory.return_loan(loan.pk)
    inventory.adjust_stock('PRJ-01', 1, 'Dañado en traslado')
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'inventory':
        from stockwise.service import Inventory
        return Inventory
    elif name == 'StockwiseError':
        from stockwise.exceptions import StockwiseError
        return StockwiseError
    elif name == 'IdentityError':
        from stockwise.exceptions import IdentityError
        return IdentityError
    elif name == 'AccessService':
        from stockwise.services.access import AccessService
        return AccessService
    elif name == 'generate_inventory_report':
        from stockwise.reports import generate_inventory_report
        return generate_inventory_report
    elif name == 'Product':
        from stockwise.models.product import Product
        return Product
    elif name == 'Loan':
        from stockwise.models.loan import Loan
        return Loan
    elif name == 'StockMovement':
        from stockwise.models.movement import StockMovement
        return StockMovement
    elif name == 'UserProfile':
        from stockwise.models.profile import UserProfile
        return UserProfile
    elif name == 'LoanStatus':
        from stockwise.models.enums import LoanStatus
        return LoanStatus
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'inventory',
    'StockwiseError',
    'IdentityError',
    'AccessService',
    'generate_inventory_report',
    'Product',
    'Loan',
    'StockMovement',
    'UserProfile',
    'LoanStatus',
]

__version__ = '0.1.0'
