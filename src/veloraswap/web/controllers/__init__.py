"""HTTP controllers for web API endpoints.

SECURITY: These controllers MUST NOT:
- Access private keys
- Sign or broadcast transactions

All operations prepare data for client-side signing.
"""

from veloraswap.web.controllers.swaps import router as swaps_router

__all__ = [
    "swaps_router",
]
