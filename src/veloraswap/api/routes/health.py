"""Health check endpoints."""

from fastapi import APIRouter

from veloraswap import __version__
from veloraswap.config import get_settings
from veloraswap.registry import get_registry
from veloraswap.routing.velora import spender_contract_name

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "veloraswap"}


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check with aggregator and registry info.

    Reports configuration only; the Velora API itself is not called.
    """
    settings = get_settings()
    chains = get_registry().supported_chains()
    return {
        "status": "healthy",
        "service": "veloraswap",
        "version": __version__,
        "aggregator": {
            "name": "velora",
            "api_url": settings.velora_api_url,
            "api_version": settings.velora_api_version,
            "spender_contract": spender_contract_name(settings.velora_api_version),
        },
        "chains": {
            "mainnet": sorted(k for k, c in chains.items() if not c.is_testnet),
            "testnet": sorted(k for k, c in chains.items() if c.is_testnet),
        },
        "config": settings.get_safe_dict(),
    }
