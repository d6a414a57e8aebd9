"""Swap API endpoints for non-custodial web mode.

These endpoints return unsigned transaction data.
NO execution happens server-side - clients sign and broadcast themselves.
"""

import logging

import httpx
from fastapi import APIRouter, Query

from veloraswap.errors import SwapError
from veloraswap.registry import get_registry
from veloraswap.web.contracts.swaps import (
    BuildSwapResponse,
    SwapQuoteResponse,
    SwapRequest,
    TokenValidationResponse,
)
from veloraswap.web.services.swap_service import SwapService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/swaps", tags=["swaps"])

# Service instance
_swap_service = SwapService()


@router.post("/build", response_model=BuildSwapResponse, response_model_exclude_none=True)
async def build_swap_transactions(request: SwapRequest) -> BuildSwapResponse:
    """Build swap transactions ready for signing using Velora market swaps.

    The client must:
    1. Sign and submit the transactions in the returned order
       (approval first, when present)
    2. Broadcast them to the network

    NO signing or broadcasting happens server-side.
    """
    logger.debug(f"Building swap transactions for: {request.masked()}")

    try:
        result = await _swap_service.build_swap_transaction(request)
    except (SwapError, httpx.HTTPError) as e:
        logger.error(f"Error building swap transactions: {e}")
        return BuildSwapResponse(
            success=False,
            error=f"Error building swap transactions: {str(e) or type(e).__name__}",
        )

    logger.debug(f"Successfully built {len(result.transactions)} transactions for signing")
    return BuildSwapResponse(
        success=True,
        transaction_count=len(result.transactions),
        transactions=result.transactions,
        quote=result.quote,
        mode=request.mode,
    )


@router.post("/quote", response_model=SwapQuoteResponse)
async def get_swap_quote(request: SwapRequest) -> SwapQuoteResponse:
    """Get a quote without building transactions (for estimation)."""
    try:
        quote = await _swap_service.get_swap_quote(request)
    except (SwapError, httpx.HTTPError) as e:
        logger.error(f"Error getting swap quote: {e}")
        return SwapQuoteResponse(success=False, error=str(e) or type(e).__name__)

    return SwapQuoteResponse(success=True, quote=quote)


@router.get("/validate-tokens", response_model=TokenValidationResponse)
async def validate_tokens(
    chain: str = Query(..., description="Blockchain name (e.g., ETHEREUM)"),
    from_token: str = Query(..., description="Source token symbol or address"),
    to_token: str = Query(..., description="Target token symbol or address"),
) -> TokenValidationResponse:
    """Check that both tokens are known on a chain."""
    return TokenValidationResponse(
        chain=chain,
        from_token=from_token,
        to_token=to_token,
        valid=_swap_service.validate_tokens(chain, from_token, to_token),
    )


@router.get("/supported-chains")
async def get_supported_chains() -> dict:
    """Get list of chains supported for swaps."""
    chains = []
    for key, info in get_registry().supported_chains().items():
        chains.append({
            "id": key,
            "chain_id": info.id,
            "name": info.name,
            "is_testnet": info.is_testnet,
        })

    return {
        "success": True,
        "chains": chains,
    }
