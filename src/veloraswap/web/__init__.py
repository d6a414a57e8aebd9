"""Web boundary layer for non-custodial operations.

SECURITY PRINCIPLES:
1. Nothing in this layer holds, derives or uses private keys.
2. Nothing in this layer signs or broadcasts transactions.
3. All operations prepare data for client-side signing.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
