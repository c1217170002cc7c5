import os

from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.privacy.models import FeeSchedule


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Ensure we pick up legacy environment variable aliases."""

        super().model_post_init(__context)

        if not self.one_click_jwt:
            fallback = os.getenv("NEAR_INTENTS_JWT") or os.getenv("NEAR_INTENTS_API_KEY")
            if fallback:
                object.__setattr__(self, "one_click_jwt", fallback)

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    request_timeout_seconds: int = Field(default=30, description="Request timeout")

    # Execution status upstream (1-Click swap API)
    one_click_base_url: str = Field(
        default="https://1click.chaindefuser.com",
        description="Base URL of the 1-Click execution status API",
    )
    one_click_jwt: str = Field(
        default="",
        description="Optional bearer token for the 1-Click API",
        validation_alias=AliasChoices("one_click_jwt", "ONE_CLICK_JWT"),
    )
    status_poll_interval_seconds: int = Field(
        default=15,
        ge=1,
        description="Poll interval advertised to clients while a swap is in flight",
    )

    # Privacy pool fees
    privacy_withdraw_fee_rate: Decimal = Field(
        default=Decimal("0.0035"),
        ge=0,
        lt=1,
        description="Proportional fee charged by the privacy pool on withdrawal",
    )
    privacy_usdc_withdraw_rent_fee: Decimal = Field(
        default=Decimal("0.744548676"),
        ge=0,
        description="Fixed USDC rent fee charged by the privacy pool on withdrawal",
    )
    privacy_withdraw_rent_fee_sol: Decimal = Field(
        default=Decimal("0.006"),
        ge=0,
        description="Fixed SOL rent fee (displayed only, native withdrawals are not supported)",
    )
    privacy_deposit_fee_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        lt=1,
        description=(
            "Proportional fee charged by the privacy pool on deposit. Informational: "
            "shown in the fee summary only, never applied to withdrawal plans"
        ),
    )
    privacy_minimum_withdrawal_usdc: Decimal = Field(
        default=Decimal("2"),
        ge=0,
        description="Smallest USDC amount the pool will withdraw",
    )
    usdc_decimals: int = Field(default=6, ge=0, le=18, description="USDC decimal precision")

    @property
    def fee_schedule(self) -> FeeSchedule:
        """USDC withdrawal fee schedule of the privacy pool."""
        return FeeSchedule(
            proportional_rate=self.privacy_withdraw_fee_rate,
            fixed_fee=self.privacy_usdc_withdraw_rent_fee,
            minimum_net=self.privacy_minimum_withdrawal_usdc,
        )


# Global settings instance
settings = Settings()
