"""
StockMovement model — Immutable audit trail of stock deductions.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from stockwise.models.enums import MovementType
from stockwise.models.loan import new_record_id


class StockMovement(models.Model):
    """
    Immutable record of a stock deduction.

    Rules:
    - NEVER update() or delete()
    - Survives deletion of its product (product_id is not a foreign key)
    """

    id = models.CharField(primary_key=True, max_length=64, default=new_record_id, editable=False)
    product_id = models.CharField(max_length=64, db_index=True, verbose_name=_('Producto'))
    product_name = models.CharField(max_length=200, verbose_name=_('Nombre del producto'))
    quantity = models.PositiveIntegerField(verbose_name=_('Cantidad'))
    type = models.CharField(
        max_length=20,
        choices=MovementType.choices,
        default=MovementType.DEDUCTION,
        verbose_name=_('Tipo'),
    )
    reason = models.CharField(max_length=255, verbose_name=_('Razón'))
    date = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Fecha'))

    class Meta:
        verbose_name = _('Movimiento')
        verbose_name_plural = _('Movimientos')
        ordering = ['-date']

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Los movimientos son inmutables.")
        if not self.reason:
            raise ValueError("La razón es obligatoria.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Prevent deletion — movements are immutable."""
        raise ValueError("Los movimientos son inmutables y no se pueden eliminar.")

    def __str__(self) -> str:
        return f"-{self.quantity} {self.product_name} | {self.reason}"
