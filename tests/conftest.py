"""Pytest configuration and fixtures."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["VELORA_API_URL"] = "https://velora.test"
os.environ["VELORA_PARTNER"] = "veloraswap-test"

from veloraswap.registry import ChainTokenRegistry
from veloraswap.routing.base import SwapAggregator
from veloraswap.web.contracts.swaps import SwapRequest
from veloraswap.web.services.swap_service import SwapService

WALLET = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
SPENDER = "0x6A000F20005980200259B80c5102003040001068"

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"

PRICE_ROUTE = {
    "blockNumber": 19000000,
    "network": 1,
    "srcToken": USDC,
    "srcDecimals": 6,
    "srcAmount": "1000000",
    "destToken": DAI,
    "destDecimals": 18,
    "destAmount": "999500000000000000",
    "contractMethod": "swapExactAmountIn",
}

TX_PARAMS = {
    "from": WALLET,
    "to": SPENDER,
    "value": "0",
    "data": "0xe3ead59e0000",
    "gasPrice": "0x3b9aca00",
    "gas": "210000",
    "chainId": 1,
}


def make_request(**overrides) -> SwapRequest:
    """Build a USDC -> DAI request on Ethereum with field overrides."""
    fields = {
        "amount": "1",
        "from_token": "USDC",
        "to_token": "DAI",
        "from_address": WALLET,
        "from_chain": "ETHEREUM",
        "slippage": 0.5,
    }
    fields.update(overrides)
    return SwapRequest(**fields)


@pytest.fixture
def registry() -> ChainTokenRegistry:
    """Registry over the bundled directory and fallback tables."""
    return ChainTokenRegistry()


@pytest.fixture
def mock_aggregator():
    """Aggregator double returning a market quote, spender and tx params."""
    aggregator = MagicMock(spec=SwapAggregator)
    aggregator.name = "velora (v6.2)"
    aggregator.get_quote = AsyncMock(return_value={"market": dict(PRICE_ROUTE)})
    aggregator.get_spender = AsyncMock(return_value=SPENDER)
    aggregator.build_tx = AsyncMock(return_value=dict(TX_PARAMS))
    aggregator.close = AsyncMock(return_value=None)
    return aggregator


@pytest.fixture
def swap_service(mock_aggregator, registry) -> SwapService:
    """Swap service wired to the aggregator double."""
    return SwapService(aggregator=mock_aggregator, registry=registry)
