"""Private payments through the Privacy Cash pool."""

from .constants import PRIVACY_CASH_USDC_FEES, USDC_DECIMALS
from .fees import (
    compute_recipient_pays_fees,
    compute_sender_pays_fees,
    plan_withdrawal,
    round_up_decimals,
    to_base_units,
)
from .models import (
    BelowMinimumAmount,
    FeeCalculationError,
    FeeMode,
    FeeSchedule,
    InvalidInput,
    PrivatePaymentRequest,
    PrivatePaymentResult,
    WithdrawalPlan,
)
from .payment import PrivacyPool, pay_privately

__all__ = [
    "BelowMinimumAmount",
    "FeeCalculationError",
    "FeeMode",
    "FeeSchedule",
    "InvalidInput",
    "PRIVACY_CASH_USDC_FEES",
    "PrivacyPool",
    "PrivatePaymentRequest",
    "PrivatePaymentResult",
    "USDC_DECIMALS",
    "WithdrawalPlan",
    "compute_recipient_pays_fees",
    "compute_sender_pays_fees",
    "pay_privately",
    "plan_withdrawal",
    "round_up_decimals",
    "to_base_units",
]
