"""
Product model — an inventory item with a current quantity.
"""

from django.db import models
from django.db.models.functions import Lower
from django.utils.translation import gettext_lazy as _


class Product(models.Model):
    """
    Inventory item.

    The primary key is chosen by the user (e.g. "PRJ-01") and never changes.
    ``quantity`` only changes through the ledger operations in
    ``stockwise.services.ledger`` (or an explicit catalog edit).
    """

    id = models.CharField(
        primary_key=True,
        max_length=64,
        verbose_name=_('ID'),
        help_text=_('Identificador único, no se puede cambiar.'),
    )
    name = models.CharField(max_length=200, verbose_name=_('Nombre'))
    category = models.CharField(max_length=100, verbose_name=_('Categoría'))
    location = models.CharField(max_length=100, verbose_name=_('Ubicación'))
    quantity = models.PositiveIntegerField(default=0, verbose_name=_('Cantidad'))
    reorder_point = models.PositiveIntegerField(
        default=0,
        verbose_name=_('Punto de reorden'),
        help_text=_('Con esta cantidad o menos el stock se considera bajo.'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Producto')
        verbose_name_plural = _('Productos')
        ordering = ['name']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name='product_quantity_non_negative',
            ),
            models.UniqueConstraint(
                Lower('id'),
                name='unique_product_id_ci',
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity == 0

    @property
    def is_low_stock(self) -> bool:
        return 0 < self.quantity <= self.reorder_point
