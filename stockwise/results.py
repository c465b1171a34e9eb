"""
Action results — the structured outcome returned across the request boundary.

Operations raise StockwiseError; callers that must not see exceptions
(views, management commands) go through ``run_action``:

    result = run_action(inventory.loan_out, 'PRJ-01', 2, 'Aula 3')
    if not result.success:
        messages.error(request, result.error)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from stockwise.exceptions import StockwiseError

logger = logging.getLogger('stockwise')


@dataclass(frozen=True)
class ActionResult:
    success: bool
    data: Any = None
    error: str | None = None
    code: str | None = None
    status_code: int = 200

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {'success': self.success}
        if self.success:
            if self.data is not None:
                payload['data'] = self.data
        else:
            payload['error'] = self.error
            payload['code'] = self.code
        return payload


def run_action(fn: Callable, *args, **kwargs) -> ActionResult:
    """
    Call ``fn`` and turn its outcome into an ActionResult.

    StockwiseError becomes a failure with its localized message. Any other
    exception is logged with traceback and reported as UPSTREAM_ERROR with
    its original message.
    """
    try:
        data = fn(*args, **kwargs)
    except StockwiseError as e:
        logger.info(
            "action.failed",
            extra={"action": getattr(fn, '__name__', str(fn)), "code": e.code},
        )
        return ActionResult(
            success=False,
            error=e.message,
            code=e.code,
            status_code=e.status_code,
        )
    except Exception as e:
        logger.exception("action.error", extra={"action": getattr(fn, '__name__', str(fn))})
        return ActionResult(
            success=False,
            error=str(e) or StockwiseError._default_messages['UPSTREAM_ERROR'],
            code='UPSTREAM_ERROR',
            status_code=StockwiseError.http_status['UPSTREAM_ERROR'],
        )
    return ActionResult(success=True, data=data)
