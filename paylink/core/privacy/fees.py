"""
Fee inversion for withdrawals through the privacy pool.

The pool deducts ``gross * rate + fixed`` from every withdrawal, so the
recipient receives ``gross * (1 - rate) - fixed``. When the sender covers the
fee we solve for the gross amount that nets the requested amount:

    gross = (net + fixed) / (1 - rate)

The result is floored to the asset's base units. Flooring loses less than one
base unit before the pool's own fee is applied, and the pool keeps ``rate`` of
that loss, so the recipient is short by strictly less than one base unit.
"""

from __future__ import annotations

import logging
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, InvalidOperation
from typing import Tuple, Union

from .constants import USDC_DECIMALS
from .models import BelowMinimumAmount, FeeMode, FeeSchedule, InvalidInput, WithdrawalPlan

logger = logging.getLogger(__name__)

AmountLike = Union[Decimal, int, float, str]

# Beyond any token supply; keeps quantize and scaleb within 28 digits of precision
MAX_AMOUNT_EXPONENT = 20


def to_decimal_amount(value: AmountLike) -> Decimal:
    """Parse a positive, finite amount or raise ``InvalidInput``."""
    if isinstance(value, bool):
        raise InvalidInput(f"Amount must be numeric, got {value!r}")

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, int):
            amount = Decimal(value)
        elif isinstance(value, float):
            amount = Decimal(str(value))
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            raise InvalidInput(f"Amount must be numeric, got {type(value).__name__}")
    except InvalidOperation as exc:
        raise InvalidInput(f"Amount must be numeric, got {value!r}") from exc

    if not amount.is_finite():
        raise InvalidInput(f"Amount must be finite, got {value!r}")
    if amount <= 0:
        raise InvalidInput(f"Amount must be greater than zero, got {value!r}")
    if amount.adjusted() > MAX_AMOUNT_EXPONENT or amount.adjusted() < -MAX_AMOUNT_EXPONENT:
        raise InvalidInput(f"Amount is out of range, got {value!r}")
    return amount


def to_base_units(amount: Decimal, decimals: int) -> Tuple[Decimal, int]:
    """Floor ``amount`` to the smallest transferable unit.

    Returns the floored amount and the same quantity as integer base units.
    """
    units = int((amount.scaleb(decimals)).to_integral_value(rounding=ROUND_FLOOR))
    return Decimal(units).scaleb(-decimals), units


def round_up_decimals(value: AmountLike, places: int = 2) -> Decimal:
    """Round a displayed amount up so totals are never understated."""
    amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_CEILING)


def _check_minimum(amount: Decimal, schedule: FeeSchedule) -> None:
    if amount < schedule.minimum_net:
        raise BelowMinimumAmount(amount, schedule.minimum_net)


def compute_sender_pays_fees(
    requested_net: AmountLike,
    schedule: FeeSchedule,
    *,
    decimals: int = USDC_DECIMALS,
) -> WithdrawalPlan:
    """Gross amount to move so the recipient nets exactly ``requested_net``."""
    net = to_decimal_amount(requested_net)
    _check_minimum(net, schedule)

    exact_gross = (net + schedule.fixed_fee) / (Decimal("1") - schedule.proportional_rate)
    gross, units = to_base_units(exact_gross, decimals)

    plan = WithdrawalPlan(
        requested_amount=net,
        gross_amount=gross,
        gross_base_units=units,
        implied_fee=gross - net,
        mode=FeeMode.SENDER_PAYS_FEES,
        decimals=decimals,
        exact_gross_amount=exact_gross,
    )
    logger.debug(
        "Sender-pays plan: requested=%s gross=%s fee=%s base_units=%s",
        net,
        gross,
        plan.implied_fee,
        units,
    )
    return plan


def compute_recipient_pays_fees(
    requested_amount: AmountLike,
    schedule: FeeSchedule,
    *,
    decimals: int = USDC_DECIMALS,
) -> WithdrawalPlan:
    """Move ``requested_amount`` as-is; the pool's fee comes out of the recipient's share."""
    amount = to_decimal_amount(requested_amount)
    _check_minimum(amount, schedule)

    fee = schedule.withdrawal_fee(amount)
    if fee >= amount:
        # Recipient would receive nothing; the fee itself becomes the floor
        raise BelowMinimumAmount(amount, fee)

    _, units = to_base_units(amount, decimals)
    plan = WithdrawalPlan(
        requested_amount=amount,
        gross_amount=amount,
        gross_base_units=units,
        implied_fee=fee,
        mode=FeeMode.RECIPIENT_PAYS_FEES,
        decimals=decimals,
        exact_gross_amount=amount,
    )
    logger.debug(
        "Recipient-pays plan: amount=%s fee=%s recipient_receives=%s base_units=%s",
        amount,
        fee,
        plan.expected_recipient_amount,
        units,
    )
    return plan


def plan_withdrawal(
    amount: AmountLike,
    schedule: FeeSchedule,
    *,
    recipient_pays_fees: bool = False,
    decimals: int = USDC_DECIMALS,
) -> WithdrawalPlan:
    if recipient_pays_fees:
        return compute_recipient_pays_fees(amount, schedule, decimals=decimals)
    return compute_sender_pays_fees(amount, schedule, decimals=decimals)
