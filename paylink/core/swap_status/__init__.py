"""Execution status normalization for cross-chain swaps."""

from .lifecycle import TERMINAL_STATUSES, is_terminal_status, map_claim_status, next_poll_interval
from .models import NormalizedExecutionStatus, SwapDetails
from .normalizer import UNKNOWN_STATUS, normalize_execution_status

__all__ = [
    "NormalizedExecutionStatus",
    "SwapDetails",
    "TERMINAL_STATUSES",
    "UNKNOWN_STATUS",
    "is_terminal_status",
    "map_claim_status",
    "next_poll_interval",
    "normalize_execution_status",
]
