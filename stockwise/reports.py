"""
Inventory report — deterministic aggregation of products and active loans.

No I/O: callers pass the product list and the loans already filtered to
status LOANED. Groupings preserve input order.

Usage:
    from stockwise.reports import generate_inventory_report

    report = generate_inventory_report(Product.objects.all(), Loan.objects.active())
    report.general_summary
    report.as_dict()   # camelCase shape used by the reports screen
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StockLine:
    name: str
    quantity: int

    def as_dict(self) -> dict[str, Any]:
        return {'name': self.name, 'quantity': self.quantity}


@dataclass(frozen=True)
class LoanLine:
    id: str
    name: str
    quantity: int
    requester: str

    def as_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'quantity': self.quantity,
            'requester': self.requester,
        }


@dataclass(frozen=True)
class InventoryReport:
    """Report sections. ``critical`` and ``low`` form the stock alerts."""

    general_summary: str
    critical: list[StockLine] = field(default_factory=list)
    low: list[StockLine] = field(default_factory=list)
    in_stock: list[StockLine] = field(default_factory=list)
    active_loans: list[LoanLine] = field(default_factory=list)

    @property
    def stock_alerts(self) -> dict[str, list[StockLine]]:
        return {'critical': self.critical, 'low': self.low}

    def as_dict(self) -> dict[str, Any]:
        return {
            'generalSummary': self.general_summary,
            'stockAlerts': {
                'critical': [line.as_dict() for line in self.critical],
                'low': [line.as_dict() for line in self.low],
            },
            'inStock': [line.as_dict() for line in self.in_stock],
            'activeLoans': [line.as_dict() for line in self.active_loans],
        }


def _get(obj, *names, default=None):
    """Read the first available attribute/key among ``names``."""
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return default


def classify(quantity: int, reorder_point: int) -> str:
    """Stock tier: 'critical', 'low' or 'in_stock'."""
    if quantity == 0:
        return 'critical'
    if 0 < quantity <= reorder_point:
        return 'low'
    return 'in_stock'


def build_summary(total: int, critical: int, low: int, active_loans: int) -> str:
    summary = f"El inventario cuenta con un total de {total} tipos de productos. "
    if critical > 0 or low > 0:
        summary += (
            f"Hay {critical} producto(s) agotados y {low} con stock bajo, "
            "requiriendo atención. "
        )
    else:
        summary += "En general, los niveles de stock son saludables. "
    summary += f"Actualmente, existen {active_loans} préstamos activos."
    return summary


def generate_inventory_report(products: Iterable, active_loans: Iterable) -> InventoryReport:
    """
    Classify products into stock tiers and list active loans.

    Products may be model instances or mappings; both ``reorder_point`` and
    ``reorderPoint`` are understood.
    """
    products = list(products)
    buckets: dict[str, list[StockLine]] = {'critical': [], 'low': [], 'in_stock': []}

    for product in products:
        quantity = _get(product, 'quantity', default=0)
        reorder_point = _get(product, 'reorder_point', 'reorderPoint', default=0)
        line = StockLine(name=_get(product, 'name', default=''), quantity=quantity)
        buckets[classify(quantity, reorder_point)].append(line)

    loans = [
        LoanLine(
            id=str(_get(loan, 'id', 'pk', default='')),
            name=_get(loan, 'product_name', 'productName', default=''),
            quantity=_get(loan, 'quantity', default=0),
            requester=_get(loan, 'requester', default=''),
        )
        for loan in active_loans
    ]

    return InventoryReport(
        general_summary=build_summary(
            len(products), len(buckets['critical']), len(buckets['low']), len(loans),
        ),
        critical=buckets['critical'],
        low=buckets['low'],
        in_stock=buckets['in_stock'],
        active_loans=loans,
    )


def summarize_movements(movements: Iterable) -> str:
    """One sentence about the most recent movement ('' when there are none)."""
    latest = None
    for movement in movements:
        if latest is None or _get(movement, 'date') > _get(latest, 'date'):
            latest = movement
    if latest is None:
        return ''
    return (
        f"El último ajuste descontó {_get(latest, 'quantity')} unidad(es) de "
        f"{_get(latest, 'product_name', 'productName')}. "
        f"Razón: {_get(latest, 'reason')}."
    )
