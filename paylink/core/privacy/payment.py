"""
Private payment flow: deposit into the privacy pool, then withdraw to the
recipient so there is no on-chain link between payer and payee.

The pool SDK (proof generation, note encryption, transaction signing) is an
external collaborator reached through ``PrivacyPool``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol

from .constants import PRIVACY_CASH_SIGN_IN_MESSAGE, USDC_DECIMALS
from .fees import plan_withdrawal
from .models import FeeSchedule, PrivatePaymentRequest, PrivatePaymentResult

logger = logging.getLogger(__name__)


class PrivacyPool(Protocol):
    """Call contract of the pool SDK, bound to one payer wallet."""

    async def sign_in(self, message: str) -> None:
        """Sign ``message`` with the wallet and derive the encryption key."""

    async def deposit(self, base_units: int) -> Mapping[str, Any]:
        ...

    async def withdraw(self, base_units: int, recipient: str) -> Mapping[str, Any]:
        ...


def _mask(address: str) -> str:
    return f"{address[:8]}…" if address else ""


def _signature_of(result: Optional[Mapping[str, Any]]) -> Optional[str]:
    if not result:
        return None
    return result.get("tx") or result.get("signature")


async def pay_privately(
    request: PrivatePaymentRequest,
    pool: PrivacyPool,
    schedule: FeeSchedule,
    *,
    decimals: int = USDC_DECIMALS,
) -> PrivatePaymentResult:
    """Run one deposit + withdraw round trip.

    Amount errors (``InvalidInput``, ``BelowMinimumAmount``) propagate before
    the pool is touched. Pool failures are returned verbatim and never
    retried: a half-finished round trip may already have moved funds.
    """
    plan = plan_withdrawal(
        request.amount,
        schedule,
        recipient_pays_fees=request.recipient_pays_fees,
        decimals=decimals,
    )
    logger.info(
        "Private payment planned: wallet=%s recipient=%s mode=%s requested=%s gross=%s fee=%s",
        _mask(request.wallet_address),
        _mask(request.recipient_address),
        plan.mode.value,
        plan.requested_amount,
        plan.gross_amount,
        plan.implied_fee,
    )

    deposit_signature: Optional[str] = None
    try:
        await pool.sign_in(PRIVACY_CASH_SIGN_IN_MESSAGE)

        deposit_result = await pool.deposit(plan.gross_base_units)
        deposit_signature = _signature_of(deposit_result)
        logger.info("Private payment deposit confirmed: signature=%s", deposit_signature)

        withdraw_result = await pool.withdraw(plan.gross_base_units, request.recipient_address)
    except Exception as exc:
        logger.error("Private payment failed: %s", exc, exc_info=True)
        return PrivatePaymentResult(
            success=False,
            error=str(exc) or "Private payment failed",
            plan=plan,
            deposit_signature=deposit_signature,
        )

    signature = _signature_of(withdraw_result)
    logger.info("Private payment withdrawn to recipient: signature=%s", signature)
    return PrivatePaymentResult(
        success=True,
        signature=signature,
        plan=plan,
        deposit_signature=deposit_signature,
    )
