"""
StockWise Admin.

Provides views for production debugging:
- Product: list + edit (quantity is read-only, it changes via the ledger)
- Loan: read-only with "return" action
- StockMovement: read-only audit trail
- Notification: list + mark read
- UserProfile: read-only (managed through AccessService)
"""

import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from stockwise.exceptions import StockwiseError
from stockwise.models import LoanStatus, Loan, Notification, Product, StockMovement, UserProfile

logger = logging.getLogger(__name__)


class ReadOnlyAdmin(admin.ModelAdmin):

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# PRODUCT ADMIN
# =========================================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Product admin — editable, quantity read-only once created."""

    list_display = ['id', 'name', 'category', 'location', 'quantity',
                    'reorder_point', 'stock_status']
    list_filter = ['category', 'location']
    search_fields = ['id', 'name']
    readonly_fields = ['created_at', 'updated_at']

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return ['id', 'quantity', *self.readonly_fields]
        return self.readonly_fields

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.display(description=_('Estado'))
    def stock_status(self, obj):
        if obj.is_out_of_stock:
            return _('Agotado')
        if obj.is_low_stock:
            return _('Stock bajo')
        return _('En stock')


# =========================================================================
# LOAN ADMIN (read-only with return action)
# =========================================================================

@admin.register(Loan)
class LoanAdmin(ReadOnlyAdmin):
    """Loan admin — read-only with return action."""

    list_display = ['loan_date', 'product_name', 'quantity', 'requester',
                    'status', 'return_date']
    list_filter = ['status', 'loan_date']
    search_fields = ['product_id', 'product_name', 'requester']
    readonly_fields = ['id', 'product_id', 'product_name', 'requester', 'loan_date',
                       'quantity', 'status', 'return_date']
    date_hierarchy = 'loan_date'
    actions = ['return_loans']

    @admin.action(description=_('Marcar préstamos como devueltos'))
    def return_loans(self, request, queryset):
        from stockwise import inventory

        count = 0
        for loan in queryset.filter(status=LoanStatus.LOANED):
            try:
                inventory.return_loan(loan.pk)
                count += 1
            except StockwiseError as exc:
                logger.warning("return_loans: failed to return %s: %s", loan.pk, exc)

        self.message_user(request, _('{count} préstamo(s) devuelto(s).').format(count=count))


# =========================================================================
# MOVEMENT ADMIN (read-only audit trail)
# =========================================================================

@admin.register(StockMovement)
class StockMovementAdmin(ReadOnlyAdmin):
    """Movement admin — read-only. Immutable audit trail."""

    list_display = ['date', 'product_name', 'quantity', 'type', 'reason']
    list_filter = ['type', 'date']
    search_fields = ['product_id', 'product_name', 'reason']
    readonly_fields = ['id', 'product_id', 'product_name', 'quantity', 'type',
                       'reason', 'date']
    date_hierarchy = 'date'


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'title', 'is_read']
    list_filter = ['is_read', 'type']
    readonly_fields = ['id', 'type', 'title', 'description', 'created_at']


@admin.register(UserProfile)
class UserProfileAdmin(ReadOnlyAdmin):
    """Profiles change only through AccessService (identity claims stay in sync)."""

    list_display = ['username', 'name', 'role']
    list_filter = ['role']
    search_fields = ['username', 'name']
