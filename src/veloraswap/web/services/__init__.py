"""Web services for non-custodial swap building.

SECURITY: These services MUST NOT:
- Access private keys or seed phrases
- Sign or broadcast transactions

These services CAN:
- Resolve chain and token identifiers
- Fetch quotes from DEX aggregators
- Prepare unsigned transactions for client signing
"""

from veloraswap.web.services.swap_service import SwapService
from veloraswap.web.services.transaction_builder import TransactionBuilder
from veloraswap.web.services.validator import (
    SwapRequestValidator,
    ValidationResult,
    validate_swap_request,
)

__all__ = [
    "SwapRequestValidator",
    "SwapService",
    "TransactionBuilder",
    "ValidationResult",
    "validate_swap_request",
]
