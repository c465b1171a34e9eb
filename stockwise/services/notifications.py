"""
Notifications — header notices and stock alert counts.

Usage:
    from stockwise.services.notifications import recent_notifications, stock_alert_counts

    notices = recent_notifications()
    counts = stock_alert_counts()   # {'low': 2, 'out_of_stock': 1}
"""

import logging

from django.db.models import F

from stockwise.conf import stockwise_settings
from stockwise.exceptions import StockwiseError
from stockwise.models.notification import Notification
from stockwise.models.product import Product

logger = logging.getLogger('stockwise')


def recent_notifications(limit: int | None = None) -> list[Notification]:
    """Newest notifications first."""
    limit = limit or stockwise_settings.NOTIFICATIONS_LIMIT
    return list(Notification.objects.order_by('-created_at')[:limit])


def mark_read(notification_id: str) -> Notification:
    updated = Notification.objects.filter(pk=notification_id).update(is_read=True)
    if not updated:
        raise StockwiseError('NOT_FOUND', message='No se encontró la notificación.',
                             notification_id=notification_id)
    return Notification.objects.get(pk=notification_id)


def delete_notification(notification_id: str) -> None:
    deleted, _ = Notification.objects.filter(pk=notification_id).delete()
    if not deleted:
        raise StockwiseError('NOT_FOUND', message='No se encontró la notificación.',
                             notification_id=notification_id)
    logger.info("notification.deleted", extra={"notification_id": notification_id})


def stock_alert_counts() -> dict[str, int]:
    """
    Count products needing attention.

    Returns:
        {'low': products with 0 < quantity <= reorder_point,
         'out_of_stock': products with quantity == 0}
    """
    return {
        'low': Product.objects.filter(quantity__gt=0, quantity__lte=F('reorder_point')).count(),
        'out_of_stock': Product.objects.filter(quantity=0).count(),
    }
