"""
Execution Status Normalizer

Maps the upstream swap-status payload, whose shape has drifted across API
versions (``status`` / ``executionStatus`` / ``state``, details nested under
``swapDetails`` or flattened onto the root), to one complete
``NormalizedExecutionStatus``.

Never raises on malformed input: every field falls back to a typed default.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .models import NormalizedExecutionStatus, SwapDetails

Accessor = Callable[[Mapping, Mapping], Any]

UNKNOWN_STATUS = "UNKNOWN"

# Evaluated in order; the first non-empty value wins.
STATUS_SOURCES: Tuple[Accessor, ...] = (
    lambda raw, details: raw.get("status"),
    lambda raw, details: raw.get("executionStatus"),
    lambda raw, details: raw.get("state"),
)

UPDATED_AT_SOURCES: Tuple[Accessor, ...] = (
    lambda raw, details: raw.get("updatedAt"),
    lambda raw, details: details.get("updatedAt"),
)

# (output field, upstream key)
NULLABLE_DETAIL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("amount_in", "amountIn"),
    ("amount_in_formatted", "amountInFormatted"),
    ("amount_in_usd", "amountInUsd"),
    ("amount_out", "amountOut"),
    ("amount_out_formatted", "amountOutFormatted"),
    ("amount_out_usd", "amountOutUsd"),
    ("deposited_amount", "depositedAmount"),
    ("deposited_amount_formatted", "depositedAmountFormatted"),
    ("deposited_amount_usd", "depositedAmountUsd"),
    ("slippage", "slippage"),
)

REFUND_DETAIL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("refunded_amount", "refundedAmount"),
    ("refunded_amount_formatted", "refundedAmountFormatted"),
    ("refunded_amount_usd", "refundedAmountUsd"),
)

HASH_LIST_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("destination_chain_tx_hashes", "destinationChainTxHashes"),
    ("intent_hashes", "intentHashes"),
    ("near_tx_hashes", "nearTxHashes"),
    ("origin_chain_tx_hashes", "originChainTxHashes"),
)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) == 0
    return False


def first_present(sources: Sequence[Accessor], raw: Mapping, details: Mapping) -> Any:
    """Return the first non-empty value produced by ``sources``, else None."""
    for source in sources:
        value = source(raw, details)
        if not _is_empty(value):
            return value
    return None


def _dig(data: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(data, Mapping):
            return None
        data = data.get(key)
    return data


def _scalar(value: Any, default: Any) -> Any:
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    return value


def _hash_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _details_source(raw: Mapping) -> Mapping:
    details = raw.get("swapDetails")
    if isinstance(details, Mapping):
        return details
    # Only a missing or falsy swapDetails means the details were flattened onto the root
    if details is None or details is False or details == "" or details == 0:
        return raw
    return {}


def _now_iso(now: Optional[datetime] = None) -> str:
    moment = now or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_execution_status(
    payload: Any,
    *,
    now: Optional[datetime] = None,
) -> NormalizedExecutionStatus:
    """
    Normalize one upstream status payload.

    Fallbacks:
      - status:     status -> executionStatus -> state -> "UNKNOWN"
      - updatedAt:  updatedAt -> swapDetails.updatedAt -> now (ISO-8601)
      - assets:     quoteResponse.quoteRequest.{originAsset,destinationAsset} or None
      - details:    read from swapDetails, or the payload root when it is absent
                    or falsy; any other non-mapping swapDetails yields no details.
                    Amounts default to None, refunds to "0", hash lists to []

    Blank strings, False, zero and empty containers count as absent.
    """
    raw: Mapping = payload if isinstance(payload, Mapping) else {}
    details = _details_source(raw)

    status = first_present(STATUS_SOURCES, raw, details)
    updated_at = first_present(UPDATED_AT_SOURCES, raw, details)

    origin_asset = _dig(raw, "quoteResponse", "quoteRequest", "originAsset")
    destination_asset = _dig(raw, "quoteResponse", "quoteRequest", "destinationAsset")

    fields: Dict[str, Any] = {}
    for name, key in NULLABLE_DETAIL_FIELDS:
        fields[name] = _scalar(details.get(key), None)
    for name, key in REFUND_DETAIL_FIELDS:
        fields[name] = _scalar(details.get(key), "0")
    for name, key in HASH_LIST_FIELDS:
        fields[name] = _hash_list(details.get(key))

    return NormalizedExecutionStatus(
        status=UNKNOWN_STATUS if status is None else str(status),
        updated_at=_now_iso(now) if updated_at is None else str(updated_at),
        origin_asset=None if _is_empty(origin_asset) else str(origin_asset),
        destination_asset=None if _is_empty(destination_asset) else str(destination_asset),
        swap_details=SwapDetails(**fields),
    )
