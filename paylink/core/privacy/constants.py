"""Constants for private payments routed through the Privacy Cash pool."""

from decimal import Decimal

from .models import FeeSchedule

# Message the pool SDK expects to be signed to derive the account's encryption key
PRIVACY_CASH_SIGN_IN_MESSAGE = "Privacy Money account sign in"

USDC_DECIMALS = 6

PRIVACY_CASH_USDC_FEES = FeeSchedule(
    proportional_rate=Decimal("0.0035"),
    fixed_fee=Decimal("0.744548676"),
    minimum_net=Decimal("2"),
)
