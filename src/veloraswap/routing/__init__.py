"""Aggregator clients used to price swaps and build calldata."""

from veloraswap.routing.base import (
    BuildTxParams,
    QuoteParams,
    SwapAggregator,
    SwapMode,
    SwapSide,
)
from veloraswap.routing.velora import VeloraClient, create_velora_client

__all__ = [
    "BuildTxParams",
    "QuoteParams",
    "SwapAggregator",
    "SwapMode",
    "SwapSide",
    "VeloraClient",
    "create_velora_client",
]
