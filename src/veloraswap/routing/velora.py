"""Velora (formerly ParaSwap) DEX aggregator integration.

API docs: https://developers.velora.xyz/api/velora-api
"""

import logging
from typing import Any, Optional

import httpx

from veloraswap.config import get_settings
from veloraswap.errors import ExternalApiError
from veloraswap.routing.base import BuildTxParams, QuoteParams, SwapAggregator

logger = logging.getLogger(__name__)

VELORA_API = "https://api.velora.xyz"
DEFAULT_VERSION = "6.2"


def spender_contract_name(version: str) -> str:
    """Contract users approve for a Velora contracts version."""
    return "TokenTransferProxy" if version == "5" else "AugustusSwapper"


class VeloraClient(SwapAggregator):
    """Async client for the Velora REST API.

    Only prepares data: quotes, spender addresses and unsigned calldata.
    Non-2xx responses raise httpx.HTTPStatusError so callers can read the
    API's error body.
    """

    def __init__(
        self,
        api_url: str = VELORA_API,
        version: str = DEFAULT_VERSION,
        partner: Optional[str] = None,
        ignore_checks: bool = False,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Velora client.

        Args:
            api_url: API base URL
            version: Contracts version ("5" or "6.2")
            partner: Partner name sent with quotes and builds
            ignore_checks: Skip balance/allowance checks on build
            timeout: Request timeout in seconds
            http_client: Preconfigured client (tests, custom transports)
        """
        self.api_url = api_url.rstrip("/")
        self.version = version
        self.partner = partner
        self.ignore_checks = ignore_checks
        self.timeout = timeout
        self._http_client = http_client

    @property
    def name(self) -> str:
        return f"velora (v{self.version})"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._http_client

    async def get_quote(self, params: QuoteParams) -> Optional[dict[str, Any]]:
        """Get a price quote from Velora.

        Args:
            params: Quote parameters (amount in base units)

        Returns:
            Raw quote; for market mode the price route sits under "market"
        """
        query = {
            "srcToken": params.src_token,
            "destToken": params.dest_token,
            "amount": params.amount,
            "userAddress": params.user_address,
            "srcDecimals": params.src_decimals,
            "destDecimals": params.dest_decimals,
            "side": params.side.value,
            "mode": params.mode.value,
            "network": params.chain_id,
            "version": self.version,
        }
        if self.partner:
            query["partner"] = self.partner

        client = await self._get_client()
        logger.debug(
            f"Requesting Velora quote on chain {params.chain_id}: "
            f"{params.amount} {params.src_token} -> {params.dest_token}"
        )
        response = await client.get(f"{self.api_url}/quote", params=query)
        response.raise_for_status()

        data = response.json()
        return data or None

    async def get_spender(self, chain_id: int) -> str:
        """Get the address users must approve before swapping.

        Version 5 routes token transfers through TokenTransferProxy;
        later versions pull tokens from AugustusSwapper directly.
        """
        client = await self._get_client()
        response = await client.get(
            f"{self.api_url}/adapters/contracts",
            params={"network": chain_id, "version": self.version},
        )
        response.raise_for_status()

        contracts = response.json()
        key = spender_contract_name(self.version)
        spender = contracts.get(key)
        if not spender:
            raise ExternalApiError(
                f"Velora did not return a {key} address for chain {chain_id}",
                payload=contracts,
            )
        return spender

    async def build_tx(self, params: BuildTxParams) -> Optional[dict[str, Any]]:
        """Build swap calldata for a quoted price route.

        Returns:
            Transaction params (from, to, value, data, gasPrice, gas, chainId)
        """
        body: dict[str, Any] = {
            "srcToken": params.src_token,
            "destToken": params.dest_token,
            "srcAmount": params.src_amount,
            "slippage": params.slippage_bps,
            "priceRoute": params.price_route,
            "userAddress": params.user_address,
        }
        if self.partner:
            body["partner"] = self.partner

        client = await self._get_client()
        response = await client.post(
            f"{self.api_url}/transactions/{params.chain_id}",
            params={"ignoreChecks": str(self.ignore_checks).lower()},
            json=body,
        )
        response.raise_for_status()

        data = response.json()
        return data or None

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None


def create_velora_client(http_client: Optional[httpx.AsyncClient] = None) -> VeloraClient:
    """Create a Velora client from application settings."""
    settings = get_settings()
    return VeloraClient(
        api_url=settings.velora_api_url,
        version=settings.velora_api_version,
        partner=settings.velora_partner or None,
        ignore_checks=settings.velora_ignore_checks,
        timeout=settings.http_timeout,
        http_client=http_client,
    )
