from decimal import Decimal

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from ..config import settings
from ..core.privacy import FeeCalculationError, plan_withdrawal, round_up_decimals

router = APIRouter(prefix="/api/privacy")


@router.get("/plan")
async def get_withdrawal_plan(
    amount: str = Query(..., description="Amount in whole USDC"),
    recipient_pays_fees: bool = Query(default=False, alias="recipientPaysFees"),
) -> JSONResponse:
    """Deposit/withdraw amounts for a private USDC payment, computed before any transaction."""
    schedule = settings.fee_schedule
    try:
        plan = plan_withdrawal(
            amount,
            schedule,
            recipient_pays_fees=recipient_pays_fees,
            decimals=settings.usdc_decimals,
        )
    except FeeCalculationError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    body = plan.to_dict()
    body["displayTotal"] = str(round_up_decimals(plan.gross_amount, 2))
    body["feeSchedule"] = {
        "withdrawFeeRate": str(schedule.proportional_rate),
        "withdrawRentFee": str(schedule.fixed_fee),
        "minimumWithdrawal": str(schedule.minimum_net),
        "depositFeeRate": str(settings.privacy_deposit_fee_rate),
    }
    return JSONResponse(status_code=200, content=body)


@router.get("/fees")
async def get_fee_schedule() -> dict:
    schedule = settings.fee_schedule
    percent = schedule.proportional_rate * Decimal(100)
    return {
        "withdrawFeeRate": str(schedule.proportional_rate),
        "withdrawRentFee": str(schedule.fixed_fee),
        "withdrawRentFeeSol": str(settings.privacy_withdraw_rent_fee_sol),
        "minimumWithdrawal": str(schedule.minimum_net),
        "depositFeeRate": str(settings.privacy_deposit_fee_rate),
        "summary": f"{percent.normalize()}% + ${round_up_decimals(schedule.fixed_fee, 2)} per payment",
    }
