"""
JSON endpoints for the dashboard screens.

Every mutation goes through ``run_action`` so failures come back as
``{"success": false, "error": "...", "code": "..."}`` with a matching
HTTP status instead of an exception.
"""

import json
import logging
from functools import wraps

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from stockwise.models.enums import Permission
from stockwise.models.profile import UserProfile
from stockwise.results import ActionResult, run_action
from stockwise.service import Inventory
from stockwise.services import notifications

logger = logging.getLogger('stockwise')


def product_to_dict(product) -> dict:
    return {
        'id': product.pk,
        'name': product.name,
        'category': product.category,
        'location': product.location,
        'quantity': product.quantity,
        'reorderPoint': product.reorder_point,
    }


def loan_to_dict(loan) -> dict:
    return {
        'id': loan.pk,
        'productId': loan.product_id,
        'productName': loan.product_name,
        'requester': loan.requester,
        'loanDate': loan.loan_date.isoformat(),
        'returnDate': loan.return_date.isoformat() if loan.return_date else None,
        'quantity': loan.quantity,
        'status': loan.status,
    }


def movement_to_dict(movement) -> dict:
    return {
        'id': movement.pk,
        'productId': movement.product_id,
        'productName': movement.product_name,
        'quantity': movement.quantity,
        'type': movement.type,
        'reason': movement.reason,
        'date': movement.date.isoformat(),
    }


def notification_to_dict(notification) -> dict:
    return {
        'id': notification.pk,
        'type': notification.type,
        'title': notification.title,
        'description': notification.description,
        'createdAt': notification.created_at.isoformat(),
        'isRead': notification.is_read,
    }


def _payload(request) -> dict:
    if request.content_type == 'application/json':
        try:
            data = json.loads(request.body or b'{}')
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    return request.POST.dict()


def _respond(result: ActionResult, serializer=None) -> JsonResponse:
    if result.success and serializer is not None and result.data is not None:
        result = ActionResult(success=True, data=serializer(result.data))
    return JsonResponse(result.as_dict(), status=result.status_code)


def requires_permission(permission: str):
    """Allow superusers and profiles holding ``permission``."""

    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(request, *args, **kwargs):
            if not request.user.is_superuser:
                profile = UserProfile.objects.filter(uid=str(request.user.pk)).first()
                if profile is None or not profile.has_permission(permission):
                    logger.warning(
                        "access.denied",
                        extra={"user_id": request.user.pk, "permission": permission},
                    )
                    return JsonResponse(
                        {'success': False, 'error': 'No tienes permiso para esta sección.',
                         'code': 'FORBIDDEN'},
                        status=403,
                    )
            return view(request, *args, **kwargs)
        return wrapper

    return decorator


# =========================================================================
# PRODUCTS
# =========================================================================

@require_GET
@requires_permission(Permission.INVENTORY)
def product_list(request):
    products = Inventory.list_products(category=request.GET.get('category'))
    return JsonResponse({'success': True, 'data': [product_to_dict(p) for p in products]})


@require_POST
@requires_permission(Permission.INVENTORY)
def product_create(request):
    data = _payload(request)
    if 'reorderPoint' in data:
        data['reorder_point'] = data.pop('reorderPoint')
    return _respond(run_action(Inventory.create_product, data), product_to_dict)


@require_POST
@requires_permission(Permission.INVENTORY)
def product_update(request, product_id):
    data = _payload(request)
    if 'reorderPoint' in data:
        data['reorder_point'] = data.pop('reorderPoint')
    return _respond(run_action(Inventory.update_product, product_id, data), product_to_dict)


@require_POST
@requires_permission(Permission.INVENTORY)
def product_delete(request, product_id):
    return _respond(run_action(Inventory.delete_product, product_id))


@require_POST
@requires_permission(Permission.INVENTORY)
def product_adjust(request, product_id):
    data = _payload(request)
    result = run_action(
        Inventory.adjust_stock, product_id, data.get('quantity'), data.get('reason'),
    )
    return _respond(result, movement_to_dict)


# =========================================================================
# LOANS
# =========================================================================

@require_GET
@requires_permission(Permission.LOANS)
def loan_list(request):
    loans = Inventory.list_loans(status=request.GET.get('status'))
    return JsonResponse({'success': True, 'data': [loan_to_dict(loan) for loan in loans]})


@require_POST
@requires_permission(Permission.LOANS)
def loan_create(request):
    data = _payload(request)
    result = run_action(
        Inventory.loan_out,
        data.get('productId', data.get('product_id')),
        data.get('quantity'),
        data.get('requester'),
        data.get('loanDate', data.get('loan_date')),
    )
    return _respond(result, loan_to_dict)


@require_POST
@requires_permission(Permission.LOANS)
def loan_return(request, loan_id):
    return _respond(run_action(Inventory.return_loan, loan_id), loan_to_dict)


@require_POST
@requires_permission(Permission.LOANS)
def loan_delete(request, loan_id):
    return _respond(run_action(Inventory.delete_loan, loan_id))


# =========================================================================
# REPORTS & NOTIFICATIONS
# =========================================================================

@require_GET
@requires_permission(Permission.REPORTS)
def inventory_report(request):
    report = Inventory.report().as_dict()
    report['recentMovementsSummary'] = Inventory.movements_summary()
    return JsonResponse({'success': True, 'data': report})


@require_GET
@requires_permission(Permission.DASHBOARD)
def notification_list(request):
    return JsonResponse({
        'success': True,
        'data': {
            'notifications': [
                notification_to_dict(n) for n in notifications.recent_notifications()
            ],
            'stock': notifications.stock_alert_counts(),
        },
    })


@require_POST
@requires_permission(Permission.DASHBOARD)
def notification_read(request, notification_id):
    return _respond(run_action(notifications.mark_read, notification_id), notification_to_dict)


@require_POST
@requires_permission(Permission.DASHBOARD)
def notification_delete(request, notification_id):
    return _respond(run_action(notifications.delete_notification, notification_id))
