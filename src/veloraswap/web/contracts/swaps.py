"""Swap request and response contracts.

Field names follow the camelCase wire format (fromToken, transactionCount);
snake_case names are accepted as well.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from veloraswap.routing.base import SwapMode
from veloraswap.web.contracts.transactions import UnsignedTransaction


class SwapRequest(BaseModel):
    """A swap intent to translate into unsigned transactions.

    Content is checked by the request validator, not here, so that every
    problem with a request is reported at once.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    amount: str = Field(..., description="The amount to swap")
    from_token: str = Field(..., description="Source token symbol or address")
    to_token: str = Field(..., description="Target token symbol or address")
    from_address: str = Field(..., description="Source wallet address")
    from_chain: str = Field(
        ..., description="Source blockchain name (e.g., ETHEREUM, ARBITRUM)"
    )
    mode: SwapMode = Field(
        default=SwapMode.MARKET, description="Trading mode: market (direct swap)"
    )
    slippage: Optional[float] = Field(
        default=None,
        description="Slippage tolerance as percentage (e.g., 0.5 for 0.5%); defaults to 0.5",
    )

    def masked(self) -> dict:
        """Request fields for logging, with the wallet address shortened."""
        data = self.model_dump(by_alias=True, mode="json")
        data["fromAddress"] = f"{self.from_address[:8]}..."
        return data


class SwapResult(BaseModel):
    """Ordered transactions (approval first, if any) plus the quote used."""

    transactions: list[UnsignedTransaction] = Field(default_factory=list)
    quote: dict[str, Any] = Field(default_factory=dict)


class BuildSwapResponse(BaseModel):
    """Response envelope for the build-swap-transactions call."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = Field(..., description="Whether the transactions were built")
    transaction_count: int = Field(default=0, description="Number of transactions")
    transactions: list[UnsignedTransaction] = Field(
        default_factory=list,
        description="Transactions to sign and submit in order",
    )
    quote: Optional[dict[str, Any]] = Field(None, description="Price route used")
    mode: Optional[SwapMode] = Field(None, description="Effective trading mode")
    error: Optional[str] = Field(None, description="Error message if failed")


class SwapQuoteResponse(BaseModel):
    """Response envelope for a quote-only request."""

    success: bool
    quote: Optional[dict[str, Any]] = None
    error: Optional[str] = None


class TokenValidationResponse(BaseModel):
    """Whether both tokens resolve on a chain."""

    chain: str
    from_token: str
    to_token: str
    valid: bool
