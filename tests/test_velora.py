"""Tests for the Velora API client."""

import json

import httpx
import pytest

from conftest import DAI, PRICE_ROUTE, SPENDER, USDC, WALLET
from veloraswap.errors import ExternalApiError
from veloraswap.routing.base import BuildTxParams, QuoteParams
from veloraswap.routing.velora import VeloraClient, create_velora_client

API_URL = "https://velora.test"

CONTRACTS = {
    "AugustusSwapper": SPENDER,
    "TokenTransferProxy": "0x216B4B4Ba9F3e719726886d34a177484278Bfcae",
    "AugustusRFQ": "0xe92b586627ccA7a83dC919cc7127196d70f55a06",
}


def make_client(handler, **kwargs) -> VeloraClient:
    """Velora client whose HTTP traffic goes to a handler function."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return VeloraClient(api_url=API_URL, http_client=http_client, **kwargs)


def quote_params(**overrides) -> QuoteParams:
    fields = {
        "src_token": USDC,
        "dest_token": DAI,
        "amount": "1000000",
        "user_address": WALLET,
        "src_decimals": 6,
        "dest_decimals": 18,
        "chain_id": 1,
    }
    fields.update(overrides)
    return QuoteParams(**fields)


class TestGetQuote:
    """Tests for VeloraClient.get_quote."""

    @pytest.mark.asyncio
    async def test_query_parameters(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"market": PRICE_ROUTE})

        client = make_client(handler, partner="veloraswap")
        quote = await client.get_quote(quote_params(chain_id=8453))
        await client.close()

        assert quote == {"market": PRICE_ROUTE}
        assert seen["path"] == "/quote"
        assert seen["params"] == {
            "srcToken": USDC,
            "destToken": DAI,
            "amount": "1000000",
            "userAddress": WALLET,
            "srcDecimals": "6",
            "destDecimals": "18",
            "side": "SELL",
            "mode": "market",
            "network": "8453",
            "version": "6.2",
            "partner": "veloraswap",
        }

    @pytest.mark.asyncio
    async def test_no_partner(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"market": PRICE_ROUTE})

        client = make_client(handler)
        await client.get_quote(quote_params())

        assert "partner" not in seen["params"]

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self):
        client = make_client(lambda request: httpx.Response(200, json={}))

        assert await client.get_quote(quote_params()) is None

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = make_client(
            lambda request: httpx.Response(400, json={"error": "Token not found"})
        )

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await client.get_quote(quote_params())

        assert exc_info.value.response.json() == {"error": "Token not found"}


class TestGetSpender:
    """Tests for VeloraClient.get_spender."""

    @pytest.mark.asyncio
    async def test_augustus_for_v6(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=CONTRACTS)

        client = make_client(handler)

        assert await client.get_spender(42161) == SPENDER
        assert seen["path"] == "/adapters/contracts"
        assert seen["params"] == {"network": "42161", "version": "6.2"}

    @pytest.mark.asyncio
    async def test_token_transfer_proxy_for_v5(self):
        client = make_client(lambda request: httpx.Response(200, json=CONTRACTS), version="5")

        assert await client.get_spender(1) == CONTRACTS["TokenTransferProxy"]

    @pytest.mark.asyncio
    async def test_missing_spender(self):
        client = make_client(lambda request: httpx.Response(200, json={"AugustusRFQ": "0x1"}))

        with pytest.raises(ExternalApiError, match="AugustusSwapper"):
            await client.get_spender(1)


class TestBuildTx:
    """Tests for VeloraClient.build_tx."""

    @pytest.mark.asyncio
    async def test_request_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"to": SPENDER, "data": "0xabcdef", "value": "0"})

        client = make_client(handler, partner="veloraswap", ignore_checks=True)
        tx = await client.build_tx(
            BuildTxParams(
                src_token=USDC,
                dest_token=DAI,
                src_amount="1000000",
                slippage_bps=50,
                price_route=PRICE_ROUTE,
                user_address=WALLET,
                chain_id=10,
            )
        )

        assert tx == {"to": SPENDER, "data": "0xabcdef", "value": "0"}
        assert seen["method"] == "POST"
        assert seen["path"] == "/transactions/10"
        assert seen["params"] == {"ignoreChecks": "true"}
        assert seen["body"] == {
            "srcToken": USDC,
            "destToken": DAI,
            "srcAmount": "1000000",
            "slippage": 50,
            "priceRoute": PRICE_ROUTE,
            "userAddress": WALLET,
            "partner": "veloraswap",
        }

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = make_client(
            lambda request: httpx.Response(400, json={"error": "Price Timeout"})
        )

        with pytest.raises(httpx.HTTPStatusError):
            await client.build_tx(
                BuildTxParams(
                    src_token=USDC,
                    dest_token=DAI,
                    src_amount="1",
                    slippage_bps=50,
                    price_route={},
                    user_address=WALLET,
                    chain_id=1,
                )
            )


class TestClientFactory:
    """Tests for create_velora_client."""

    def test_uses_settings(self):
        client = create_velora_client()

        assert client.api_url == "https://velora.test"
        assert client.partner == "veloraswap-test"
        assert client.version == "6.2"
        assert client.name == "velora (v6.2)"

    @pytest.mark.asyncio
    async def test_close_releases_client(self):
        client = make_client(lambda request: httpx.Response(200, json=CONTRACTS))
        await client.get_spender(1)

        await client.close()

        assert client._http_client is None
