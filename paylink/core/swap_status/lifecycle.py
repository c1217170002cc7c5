"""Swap lifecycle helpers used by status polling and claim bookkeeping."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Optional

TERMINAL_STATUSES: FrozenSet[str] = frozenset({"SUCCESS", "FAILED", "REFUNDED", "EXPIRED"})

# Upstream swap status -> claim status shown to the payer
CLAIM_STATUS_MAP: Dict[str, str] = {
    "SUCCESS": "SUCCESS",
    "IN_FLIGHT": "IN_FLIGHT",
    "PENDING_DEPOSIT": "PENDING_DEPOSIT",
    "PRIVATE_TRANSFER_PENDING": "PRIVATE_TRANSFER_PENDING",
    "REFUNDED": "FAILED",
    "FAILED": "FAILED",
    "EXPIRED": "FAILED",
    "CANCELLED": "FAILED",
}


def _upper(status: Any) -> str:
    return str(status).strip().upper() if status is not None else ""


def is_terminal_status(status: Any) -> bool:
    return _upper(status) in TERMINAL_STATUSES


def next_poll_interval(status: Any, interval_seconds: float) -> Optional[float]:
    """Seconds until the next poll, or None once the swap has settled."""
    if is_terminal_status(status):
        return None
    return interval_seconds


def map_claim_status(status: Any) -> str:
    upper = _upper(status)
    return CLAIM_STATUS_MAP.get(upper, upper)
