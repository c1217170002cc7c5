"""Typed models used by the private payment subsystem."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional


class FeeCalculationError(ValueError):
    """Base error for amounts the privacy pool cannot move."""


class InvalidInput(FeeCalculationError):
    """Amount is not a positive, finite number."""


class BelowMinimumAmount(FeeCalculationError):
    """Amount is below the pool's minimum withdrawal."""

    def __init__(self, amount: Decimal, minimum: Decimal):
        super().__init__(f"Amount {amount} is below the minimum withdrawal of {minimum}")
        self.amount = amount
        self.minimum = minimum


class FeeMode(str, Enum):
    """Who absorbs the pool's withdrawal fee."""
    SENDER_PAYS_FEES = "SenderPaysFees"
    RECIPIENT_PAYS_FEES = "RecipientPaysFees"


@dataclass(frozen=True)
class FeeSchedule:
    """Withdrawal fee charged by the pool: ``gross * proportional_rate + fixed_fee``.

    Amounts are expressed in the transferred asset's whole units (e.g. USDC).
    """

    proportional_rate: Decimal
    fixed_fee: Decimal
    minimum_net: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        for name in ("proportional_rate", "fixed_fee", "minimum_net"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

        if not Decimal("0") <= self.proportional_rate < Decimal("1"):
            raise ValueError(f"proportional_rate must be in [0, 1), got {self.proportional_rate}")
        if self.fixed_fee < 0:
            raise ValueError(f"fixed_fee must be >= 0, got {self.fixed_fee}")
        if self.minimum_net < 0:
            raise ValueError(f"minimum_net must be >= 0, got {self.minimum_net}")

    def withdrawal_fee(self, gross: Decimal) -> Decimal:
        return gross * self.proportional_rate + self.fixed_fee

    def net_of(self, gross: Decimal) -> Decimal:
        """Amount the pool delivers for a withdrawal of ``gross``."""
        return gross - self.withdrawal_fee(gross)


@dataclass(frozen=True)
class WithdrawalPlan:
    """Amounts to deposit into and withdraw from the pool for one payment.

    ``gross_amount`` is both the deposit and the withdrawal instruction; the
    pool deducts its own fee on withdrawal, so ``implied_fee`` is informational.
    """

    requested_amount: Decimal
    gross_amount: Decimal
    gross_base_units: int
    implied_fee: Decimal
    mode: FeeMode
    decimals: int
    exact_gross_amount: Decimal = field(default=Decimal("0"))

    @property
    def expected_recipient_amount(self) -> Decimal:
        if self.mode is FeeMode.SENDER_PAYS_FEES:
            return self.requested_amount
        return self.gross_amount - self.implied_fee

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "requestedAmount": str(self.requested_amount),
            "grossAmount": str(self.gross_amount),
            "grossBaseUnits": self.gross_base_units,
            "impliedFee": str(self.implied_fee),
            "expectedRecipientAmount": str(self.expected_recipient_amount),
            "decimals": self.decimals,
        }


@dataclass
class PrivatePaymentRequest:
    wallet_address: str
    recipient_address: str
    amount: Decimal
    recipient_pays_fees: bool = False


@dataclass
class PrivatePaymentResult:
    """Outcome of a deposit + withdraw round trip through the pool."""

    success: bool
    signature: Optional[str] = None
    error: Optional[str] = None
    plan: Optional[WithdrawalPlan] = None
    deposit_signature: Optional[str] = None
