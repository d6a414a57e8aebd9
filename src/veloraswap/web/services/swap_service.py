"""Swap service for non-custodial transaction building.

Turns a swap request into the ordered list of unsigned transactions the
wallet owner has to sign: an ERC-20 approval (unless the source is the
native coin) followed by the swap itself.

SECURITY: This service does NOT:
- Access private keys
- Sign transactions
- Broadcast transactions
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

import httpx

from veloraswap.config import get_settings
from veloraswap.errors import (
    AmountParseError,
    ExternalApiError,
    InvalidRequestError,
    QuoteUnavailableError,
)
from veloraswap.registry import ChainTokenRegistry, get_registry, is_native_token
from veloraswap.routing.base import (
    BuildTxParams,
    QuoteParams,
    SwapAggregator,
    SwapMode,
    SwapSide,
)
from veloraswap.routing.velora import create_velora_client
from veloraswap.utils.units import parse_units
from veloraswap.web.contracts.swaps import SwapRequest, SwapResult
from veloraswap.web.contracts.transactions import UnsignedTransaction
from veloraswap.web.services.transaction_builder import TransactionBuilder
from veloraswap.web.services.validator import SwapRequestValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSwap:
    """Registry-resolved identifiers for a validated request."""

    chain_id: int
    from_token: str
    to_token: str
    from_decimals: int
    to_decimals: int
    amount: str  # base units of the source token


def extract_price_route(quote: Any, mode: SwapMode) -> Optional[dict[str, Any]]:
    """Get the price route out of a quote response.

    Mode-keyed responses ({"market": {...}}) carry the route under the
    mode; otherwise the quote is the route.
    """
    if not isinstance(quote, dict):
        return None
    route = quote.get(mode.value, quote)
    return route if isinstance(route, dict) else None


def unwrap_api_error(exc: httpx.HTTPStatusError) -> ExternalApiError:
    """Convert an HTTP error from the aggregator into ExternalApiError."""
    try:
        payload = exc.response.json()
    except ValueError:
        payload = exc.response.text
    return ExternalApiError.from_payload(payload, status_code=exc.response.status_code)


def slippage_to_bps(slippage: float) -> int:
    """Convert percent slippage to basis points (0.5% -> 50)."""
    return int((Decimal(str(slippage)) * 100).to_integral_value())


class SwapService:
    """Non-custodial swap service that returns unsigned transactions.

    This service:
    1. Validates the request and resolves chain/token identifiers
    2. Fetches a quote from the aggregator
    3. Builds the approval (if needed) and swap transactions

    NO execution happens server-side.
    """

    def __init__(
        self,
        aggregator: Optional[SwapAggregator] = None,
        registry: Optional[ChainTokenRegistry] = None,
        builder: Optional[TransactionBuilder] = None,
    ):
        """Initialize swap service."""
        self.aggregator = aggregator or create_velora_client()
        self.registry = registry or get_registry()
        self.builder = builder or TransactionBuilder()
        self.validator = SwapRequestValidator(self.registry)

    def _slippage(self, request: SwapRequest) -> float:
        if request.slippage is None:
            return get_settings().default_slippage
        return request.slippage

    def _resolve(self, request: SwapRequest) -> ResolvedSwap:
        """Validate the request and resolve its identifiers."""
        validation = self.validator.validate(request)
        if not validation.valid:
            raise InvalidRequestError(validation.errors)

        chain = request.from_chain
        from_decimals = self.registry.resolve_token_decimals(chain, request.from_token)

        # Dust below one base unit rounds to nothing
        amount = parse_units(request.amount, from_decimals)
        if amount == 0:
            raise AmountParseError(request.amount)

        return ResolvedSwap(
            chain_id=self.registry.resolve_chain_id(chain),
            from_token=self.registry.resolve_token_address(chain, request.from_token),
            to_token=self.registry.resolve_token_address(chain, request.to_token),
            from_decimals=from_decimals,
            to_decimals=self.registry.resolve_token_decimals(chain, request.to_token),
            amount=str(amount),
        )

    async def _fetch_quote(
        self,
        request: SwapRequest,
        resolved: ResolvedSwap,
    ) -> dict[str, Any]:
        """Request a sell-side quote for the resolved swap."""
        quote = await self.aggregator.get_quote(
            QuoteParams(
                src_token=resolved.from_token,
                dest_token=resolved.to_token,
                amount=resolved.amount,
                user_address=request.from_address,
                src_decimals=resolved.from_decimals,
                dest_decimals=resolved.to_decimals,
                chain_id=resolved.chain_id,
                side=SwapSide.SELL,
                mode=request.mode,
            )
        )
        if not quote:
            raise QuoteUnavailableError(f"Failed to get quote from {self.aggregator.name}")
        return quote

    async def build_swap_transaction(self, request: SwapRequest) -> SwapResult:
        """Build the transactions for a swap.

        Args:
            request: Swap request

        Returns:
            SwapResult with approval (if any) and swap transactions, in
            signing order, plus the price route they were built from

        Raises:
            SwapError: On validation, resolution, quote or build failure
        """
        try:
            resolved = self._resolve(request)
            quote = await self._fetch_quote(request, resolved)

            if request.mode is SwapMode.MARKET:
                transactions, price_route = await self._build_market_swap(
                    request, resolved, quote
                )
            else:
                raise InvalidRequestError([f"Unsupported mode: {request.mode.value}"])

            return SwapResult(transactions=transactions, quote=price_route)

        except httpx.HTTPStatusError as e:
            error = unwrap_api_error(e)
            logger.error(f"Velora API error in build_swap_transaction: {e.response.status_code} - {error}")
            raise error from e
        except Exception as e:
            logger.error(f"Error in build_swap_transaction: {type(e).__name__}: {e}")
            raise

    async def _build_market_swap(
        self,
        request: SwapRequest,
        resolved: ResolvedSwap,
        quote: dict[str, Any],
    ) -> tuple[list[UnsignedTransaction], dict[str, Any]]:
        """Assemble approval + swap for a direct market swap."""
        price_route = extract_price_route(quote, request.mode)
        if not price_route or not price_route.get("destAmount"):
            raise QuoteUnavailableError(
                f"Invalid market quote received from {self.aggregator.name}"
            )

        transactions: list[UnsignedTransaction] = []

        spender = await self.aggregator.get_spender(resolved.chain_id)

        if not is_native_token(resolved.from_token):
            transactions.append(
                self.builder.build_approval(
                    chain_id=resolved.chain_id,
                    token_address=resolved.from_token,
                    spender=spender,
                    amount=int(resolved.amount),
                )
            )

        tx_params = await self.aggregator.build_tx(
            BuildTxParams(
                src_token=resolved.from_token,
                dest_token=resolved.to_token,
                src_amount=resolved.amount,
                slippage_bps=slippage_to_bps(self._slippage(request)),
                price_route=price_route,
                user_address=request.from_address,
                chain_id=resolved.chain_id,
            )
        )
        transactions.append(self.builder.build_swap(resolved.chain_id, tx_params))

        return transactions, price_route

    async def get_swap_quote(self, request: SwapRequest) -> dict[str, Any]:
        """Get a quote without building transactions (for estimation).

        Returns:
            The raw aggregator quote
        """
        try:
            resolved = self._resolve(request)
            quote = await self._fetch_quote(request, resolved)

            price_route = extract_price_route(quote, request.mode)
            if not price_route or not price_route.get("destAmount"):
                raise QuoteUnavailableError(
                    f"Invalid market quote received from {self.aggregator.name}"
                )
            return quote

        except httpx.HTTPStatusError as e:
            error = unwrap_api_error(e)
            logger.error(f"Velora API error in get_swap_quote: {e.response.status_code} - {error}")
            raise error from e
        except Exception as e:
            logger.error(f"Error in get_swap_quote: {type(e).__name__}: {e}")
            raise

    def validate_tokens(self, chain: str, from_token: str, to_token: str) -> bool:
        """Check that both tokens resolve to addresses on a chain."""
        try:
            self.registry.resolve_token_address(chain, from_token)
            self.registry.resolve_token_address(chain, to_token)
        except Exception as e:
            logger.debug(f"Token check failed for {from_token}/{to_token} on {chain}: {e}")
            return False
        return True

    async def close(self) -> None:
        """Close aggregator resources."""
        await self.aggregator.close()
