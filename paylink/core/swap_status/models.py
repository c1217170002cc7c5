"""Client-facing shape of a cross-chain swap's execution status."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Scalar = Union[str, int, float]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SwapDetails(_CamelModel):
    amount_in: Optional[Scalar] = None
    amount_in_formatted: Optional[Scalar] = None
    amount_in_usd: Optional[Scalar] = None
    amount_out: Optional[Scalar] = None
    amount_out_formatted: Optional[Scalar] = None
    amount_out_usd: Optional[Scalar] = None
    deposited_amount: Optional[Scalar] = None
    deposited_amount_formatted: Optional[Scalar] = None
    deposited_amount_usd: Optional[Scalar] = None
    destination_chain_tx_hashes: List[Any] = Field(default_factory=list)
    intent_hashes: List[Any] = Field(default_factory=list)
    near_tx_hashes: List[Any] = Field(default_factory=list)
    origin_chain_tx_hashes: List[Any] = Field(default_factory=list)
    refunded_amount: Scalar = "0"
    refunded_amount_formatted: Scalar = "0"
    refunded_amount_usd: Scalar = "0"
    slippage: Optional[Scalar] = None


class NormalizedExecutionStatus(_CamelModel):
    status: str = "UNKNOWN"
    updated_at: str
    origin_asset: Optional[str] = None
    destination_asset: Optional[str] = None
    swap_details: SwapDetails = Field(default_factory=SwapDetails)

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
