"""
Loan model — stock temporarily handed out, pending return.
"""

import uuid

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from stockwise.models.enums import LoanStatus


def new_record_id() -> str:
    """Generated string key for loans, movements and notifications."""
    return uuid.uuid4().hex


class LoanQuerySet(models.QuerySet):

    def active(self):
        return self.filter(status=LoanStatus.LOANED)

    def for_product(self, product_id: str):
        return self.filter(product_id=product_id)


class Loan(models.Model):
    """
    Record of stock lent to a requester.

    While status is LOANED the product's quantity already reflects the
    deduction. A loan moves to RETURNED exactly once.

    ``product_id`` is a plain string rather than a foreign key: returned
    loans stay as history after the product is deleted.
    """

    id = models.CharField(primary_key=True, max_length=64, default=new_record_id, editable=False)
    product_id = models.CharField(max_length=64, db_index=True, verbose_name=_('Producto'))
    product_name = models.CharField(max_length=200, verbose_name=_('Nombre del producto'))
    requester = models.CharField(max_length=200, verbose_name=_('Solicitante'))
    loan_date = models.DateTimeField(default=timezone.now, verbose_name=_('Fecha de préstamo'))
    quantity = models.PositiveIntegerField(verbose_name=_('Cantidad'))
    status = models.CharField(
        max_length=20,
        choices=LoanStatus.choices,
        default=LoanStatus.LOANED,
        db_index=True,
        verbose_name=_('Estado'),
    )
    return_date = models.DateTimeField(null=True, blank=True, verbose_name=_('Fecha de devolución'))

    objects = LoanQuerySet.as_manager()

    class Meta:
        verbose_name = _('Préstamo')
        verbose_name_plural = _('Préstamos')
        ordering = ['-loan_date']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name='loan_quantity_positive',
            ),
        ]

    def __str__(self) -> str:
        return f"{self.quantity} x {self.product_name} → {self.requester} [{self.status}]"

    @property
    def is_active(self) -> bool:
        return self.status == LoanStatus.LOANED
