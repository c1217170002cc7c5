"""
HTTP request logging middleware.

Binds the request id plus the payment context carried in the query string
(deposit address on status polls, fee mode on plan requests) so every log
line emitted while serving the request can be tied back to one payment.
"""

import time
import uuid
from typing import Dict

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..core.privacy.models import FeeMode

logger = structlog.stdlib.get_logger("paylink.http")

REQUEST_ID_HEADER = "x-request-id"

_TRUTHY = {"1", "true", "yes", "on"}


def payment_log_context(request: Request) -> Dict[str, str]:
    """Payment identifiers found on the request, keyed by log field name."""
    context: Dict[str, str] = {}
    params = request.query_params

    deposit_address = params.get("depositAddress", "").strip()
    if deposit_address:
        context["deposit_address"] = deposit_address

    if "amount" in params:
        recipient_pays = params.get("recipientPaysFees", "").strip().lower() in _TRUTHY
        mode = FeeMode.RECIPIENT_PAYS_FEES if recipient_pays else FeeMode.SENDER_PAYS_FEES
        context["fee_mode"] = mode.value
    return context


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One structured line per request; status polls and plan lookups carry their payment context."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            **payment_log_context(request),
        )

        start = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            poll = request.url.path == "/api/status" and status_code == 200

            if status_code >= 500:
                log = logger.error
            elif status_code >= 400:
                log = logger.warning
            elif poll:
                # Clients poll every few seconds while a swap is in flight
                log = logger.debug
            else:
                log = logger.info

            log(
                "http_request",
                method=request.method,
                path=request.url.path,
                status=status_code,
                duration_ms=duration_ms,
            )
