"""Error taxonomy for swap transaction building.

Every error is terminal for the current request. The HTTP layer catches
SwapError and turns it into an error envelope; nothing here retries.
"""

from typing import Any, Optional


class SwapError(Exception):
    """Base class for all swap building failures."""
    pass


class InvalidRequestError(SwapError):
    """Raised when one or more request validation checks failed."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid request: {', '.join(self.errors)}")


class UnsupportedChainError(SwapError):
    """Raised when no registry tier recognizes a chain name."""

    def __init__(self, chain: str):
        self.chain = chain
        super().__init__(f"Unsupported chain: {chain}")


class UnsupportedTokenError(SwapError):
    """Raised when no registry tier yields an address for a token."""

    def __init__(self, symbol: str, chain: str):
        self.symbol = symbol
        self.chain = chain
        super().__init__(f"Token {symbol} not found on chain {chain}")


class AmountParseError(SwapError):
    """Raised when an amount cannot be converted to base units."""

    def __init__(self, amount: Any):
        self.amount = amount
        super().__init__(f"Failed to parse token amount: {amount}")


class QuoteUnavailableError(SwapError):
    """Raised when the aggregator returned no usable quote."""
    pass


class BuildTxFailedError(SwapError):
    """Raised when the aggregator returned no usable swap transaction."""
    pass


class ExternalApiError(SwapError):
    """Structured failure reported by the aggregator API.

    The message is the one embedded in the API response body, not the
    generic transport error text.
    """

    DEFAULT_MESSAGE = "Velora API request failed"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        status_code: Optional[int] = None,
    ) -> "ExternalApiError":
        """Build an error from a decoded API error body.

        Prefers the body's ``message`` field, then ``error``.
        """
        message = None
        if isinstance(payload, dict):
            message = payload.get("message") or payload.get("error")
        return cls(message or cls.DEFAULT_MESSAGE, status_code=status_code, payload=payload)
