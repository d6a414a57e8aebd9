"""Swap request validation.

Checks a request for well-formedness before any network call is made.
All checks run; the result lists every problem found.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional

from veloraswap.errors import SwapError
from veloraswap.registry import ChainTokenRegistry, get_registry, is_address
from veloraswap.web.contracts.swaps import SwapRequest

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of request validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def _is_positive_number(value: Optional[str]) -> bool:
    if value is None:
        return False
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return False
    return amount.is_finite() and amount > 0


class SwapRequestValidator:
    """Validates swap requests against the chain/token registry."""

    def __init__(self, registry: Optional[ChainTokenRegistry] = None):
        self.registry = registry or get_registry()

    def validate(self, request: SwapRequest) -> ValidationResult:
        """Validate a swap request.

        Never raises. Token checks only run when the chain is supported.

        Args:
            request: Swap request to check

        Returns:
            ValidationResult with every error found
        """
        errors: list[str] = []

        if not _is_positive_number(request.amount):
            errors.append("Invalid amount: must be a positive number")

        if not request.from_token or not request.from_token.strip():
            errors.append("From token is required")

        if not request.to_token or not request.to_token.strip():
            errors.append("To token is required")

        if not is_address(request.from_address):
            errors.append("Invalid from address format")

        chain_supported = self.registry.is_supported_chain(request.from_chain)
        if not chain_supported:
            errors.append(f"Unsupported chain: {request.from_chain}")

        if chain_supported and request.from_token.strip():
            if not self._token_resolves(request.from_chain, request.from_token):
                errors.append(
                    f"Token {request.from_token} not supported on {request.from_chain}"
                )

        if chain_supported and request.to_token.strip():
            if not self._token_resolves(request.from_chain, request.to_token):
                errors.append(
                    f"Token {request.to_token} not supported on {request.from_chain}"
                )

        if errors:
            logger.debug(f"Swap request rejected: {'; '.join(errors)}")

        return ValidationResult(valid=not errors, errors=errors)

    def _token_resolves(self, chain: str, token: str) -> bool:
        try:
            self.registry.resolve_token_address(chain, token)
        except SwapError:
            return False
        return True


def validate_swap_request(
    request: SwapRequest,
    registry: Optional[ChainTokenRegistry] = None,
) -> ValidationResult:
    """Validate a swap request with the given (or default) registry."""
    return SwapRequestValidator(registry).validate(request)
