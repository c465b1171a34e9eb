"""
StockWise Models.

- Product: inventory item with current quantity
- Loan: stock lent out, pending return
- StockMovement: immutable audit trail of deductions
- Notification: header notices for adjustments
- UserProfile: application profile of an identity account
- AccountClaims: custom claims for the Django identity backend
"""

from stockwise.models.claims import AccountClaims
from stockwise.models.enums import (
    ALL_PERMISSIONS,
    LoanStatus,
    MovementType,
    NotificationType,
    Permission,
    Role,
)
from stockwise.models.loan import Loan
from stockwise.models.movement import StockMovement
from stockwise.models.notification import Notification
from stockwise.models.product import Product
from stockwise.models.profile import ADMIN_USERNAME, UserProfile

__all__ = [
    'ALL_PERMISSIONS',
    'ADMIN_USERNAME',
    'LoanStatus',
    'MovementType',
    'NotificationType',
    'Permission',
    'Role',
    'Product',
    'Loan',
    'StockMovement',
    'Notification',
    'UserProfile',
    'AccountClaims',
]
