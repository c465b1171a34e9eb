"""
Inventory queries — read-only operations.
"""

from stockwise.exceptions import StockwiseError
from stockwise.models.loan import Loan
from stockwise.models.movement import StockMovement
from stockwise.models.product import Product


class InventoryQueries:
    """Read-only inventory query methods."""

    @classmethod
    def get_product(cls, product_id: str) -> Product:
        try:
            return Product.objects.get(pk=product_id)
        except Product.DoesNotExist:
            raise StockwiseError('NOT_FOUND', message='No se encontró el producto.',
                                 product_id=product_id) from None

    @classmethod
    def list_products(cls, category: str | None = None):
        qs = Product.objects.all()
        if category:
            qs = qs.filter(category=category)
        return qs

    @classmethod
    def list_loans(cls, status: str | None = None):
        qs = Loan.objects.all()
        if status:
            qs = qs.filter(status=status)
        return qs

    @classmethod
    def active_loans(cls):
        """Loans still out (status LOANED)."""
        return Loan.objects.active()

    @classmethod
    def list_movements(cls, product_id: str | None = None):
        qs = StockMovement.objects.all()
        if product_id:
            qs = qs.filter(product_id=product_id)
        return qs
