"""Abstract interface for swap aggregators.

The swap builder needs three things from an aggregator: a price quote,
the spender address to approve, and calldata for a quoted swap.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SwapMode(str, Enum):
    """Trading mode requested by the client."""

    MARKET = "market"  # direct swap, submitted by the requester


class SwapSide(str, Enum):
    """Which side of the trade the amount refers to."""

    SELL = "SELL"
    BUY = "BUY"


@dataclass(frozen=True)
class QuoteParams:
    """Parameters for a price quote."""

    src_token: str
    dest_token: str
    amount: str  # base units
    user_address: str
    src_decimals: int
    dest_decimals: int
    chain_id: int
    side: SwapSide = SwapSide.SELL
    mode: SwapMode = SwapMode.MARKET


@dataclass(frozen=True)
class BuildTxParams:
    """Parameters for building swap calldata from a quote."""

    src_token: str
    dest_token: str
    src_amount: str  # base units
    slippage_bps: int
    price_route: dict[str, Any]
    user_address: str
    chain_id: int


class SwapAggregator(ABC):
    """Abstract base class for pricing/building collaborators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Aggregator name identifier."""
        pass

    @abstractmethod
    async def get_quote(self, params: QuoteParams) -> Optional[dict[str, Any]]:
        """Get a price quote.

        Returns:
            Raw quote payload, or None if no route is available
        """
        pass

    @abstractmethod
    async def get_spender(self, chain_id: int) -> str:
        """Get the contract address that must be approved to move tokens."""
        pass

    @abstractmethod
    async def build_tx(self, params: BuildTxParams) -> Optional[dict[str, Any]]:
        """Build swap calldata for a previously quoted route.

        Returns:
            Transaction params with at least ``to`` and ``data``, or None
        """
        pass

    async def close(self) -> None:
        """Release network resources."""
        return None
