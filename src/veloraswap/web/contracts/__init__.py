"""Request and response contracts for the web layer.

These Pydantic models define the API interface for web clients.
All contracts are for non-custodial operations.
"""

from veloraswap.web.contracts.swaps import (
    BuildSwapResponse,
    SwapQuoteResponse,
    SwapRequest,
    SwapResult,
    TokenValidationResponse,
)
from veloraswap.web.contracts.transactions import UnsignedTransaction

__all__ = [
    # Swap contracts
    "BuildSwapResponse",
    "SwapQuoteResponse",
    "SwapRequest",
    "SwapResult",
    "TokenValidationResponse",
    # Transaction contracts
    "UnsignedTransaction",
]
