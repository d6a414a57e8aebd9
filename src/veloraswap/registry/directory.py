"""Token and chain directory.

Primary lookup tier of the registry. Holds the well-known mainnet tokens
per chain, keyed by directory chain name (ethereum, arbitrum, ...).
Lookups on a chain the directory does not cover raise
UnknownDirectoryChainError; a known chain without the token returns None.
"""

import logging
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Native coin placeholder as used by Velora and most aggregators
NATIVE_TOKEN = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

# Chain IDs
CHAIN_IDS: dict[str, int] = {
    "ethereum": 1,
    "arbitrum": 42161,
    "optimism": 10,
    "base": 8453,
    "polygon": 137,
    "avalanche": 43114,
    "sepolia": 11155111,
}

# Token address and decimals by chain (mainnet)
TOKENS: dict[str, dict[str, tuple[str, int]]] = {
    "ethereum": {
        "ETH": (NATIVE_TOKEN, 18),
        "WETH": ("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 18),
        "USDC": ("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6),
        "USDT": ("0xdAC17F958D2ee523a2206206994597C13D831ec7", 6),
        "DAI": ("0x6B175474E89094C44Da98b954EedeAC495271d0F", 18),
        "WBTC": ("0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", 8),
        "LINK": ("0x514910771AF9Ca656af840dff83E8264EcF986CA", 18),
        "UNI": ("0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984", 18),
        "AAVE": ("0x7Fc66500c84A76Ad7e9c93437bFc5Ac33E2DDaE9", 18),
        "LDO": ("0x5A98FcBEA516Cf06857215779Fd812CA3beF1B32", 18),
        "MKR": ("0x9f8F72aA9304c8B593d555F12eF6589cC3A579A2", 18),
        "CRV": ("0xD533a949740bb3306d119CC777fa900bA034cd52", 18),
        "PEPE": ("0x6982508145454Ce325dDbE47a25d4ec3d2311933", 18),
    },
    "arbitrum": {
        "ETH": (NATIVE_TOKEN, 18),
        "WETH": ("0x82aF49447D8a07e3bd95BD0d56f35241523fBab1", 18),
        "USDC": ("0xaf88d065e77c8cC2239327C5EDb3A432268e5831", 6),
        "USDC.E": ("0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8", 6),
        "USDT": ("0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", 6),
        "DAI": ("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", 18),
        "ARB": ("0x912CE59144191C1204E64559FE8253a0e49E6548", 18),
        "WBTC": ("0x2f2a2543B76A4166549F7aaB2e75Bef0aefC5B0f", 8),
    },
    "optimism": {
        "ETH": (NATIVE_TOKEN, 18),
        "WETH": ("0x4200000000000000000000000000000000000006", 18),
        "USDC": ("0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85", 6),
        "USDT": ("0x94b008aA00579c1307B0EF2c499aD98a8ce58e58", 6),
        "DAI": ("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", 18),
        "OP": ("0x4200000000000000000000000000000000000042", 18),
    },
    "base": {
        "ETH": (NATIVE_TOKEN, 18),
        "WETH": ("0x4200000000000000000000000000000000000006", 18),
        "USDC": ("0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913", 6),
        "DAI": ("0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb", 18),
        "CBETH": ("0x2Ae3F1Ec7F1F5012CFEab0185bfc7aa3cf0DEc22", 18),
    },
    "polygon": {
        "POL": (NATIVE_TOKEN, 18),
        "MATIC": (NATIVE_TOKEN, 18),
        "WMATIC": ("0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", 18),
        "USDC": ("0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359", 6),
        "USDT": ("0xc2132D05D31c914a87C6611C10748AEb04B58e8F", 6),
        "DAI": ("0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063", 18),
        "WETH": ("0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619", 18),
    },
    "avalanche": {
        "AVAX": (NATIVE_TOKEN, 18),
        "WAVAX": ("0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7", 18),
        "USDC": ("0xB97EF9Ef8734C71904D8002F8b6Bc66Dd9c48a6E", 6),
        "USDT": ("0x9702230A8Ea53601f5cD2dc00fDBc13d4dF4A8c7", 6),
        "DAI": ("0xd586E7F844cEa2F87f50152665BCbc2C279D8d70", 18),
        "WETH": ("0x49D5c2BdFfac6CE2BFdB6640F4F80f226bc10bAB", 18),
    },
    # Chain id is known, token list lives in the fallback tables
    "sepolia": {},
}


class UnknownDirectoryChainError(LookupError):
    """Raised when the directory does not cover a chain at all."""

    def __init__(self, chain: str):
        self.chain = chain
        super().__init__(f"Chain {chain} is not covered by the token directory")


class TokenDirectory:
    """Lookup of chain ids, token addresses and decimals.

    The default catalog is the bundled mainnet list above. Pass custom
    mappings to swap in a different catalog (tests, private deployments).
    """

    def __init__(
        self,
        chain_ids: Optional[Mapping[str, int]] = None,
        tokens: Optional[Mapping[str, Mapping[str, tuple[str, int]]]] = None,
    ):
        self._chain_ids = dict(chain_ids if chain_ids is not None else CHAIN_IDS)
        self._tokens = {
            chain: {symbol.upper(): entry for symbol, entry in entries.items()}
            for chain, entries in (tokens if tokens is not None else TOKENS).items()
        }

    def chain_id(self, chain: str) -> int:
        """Get the numeric chain id for a directory chain name."""
        try:
            return self._chain_ids[chain.lower()]
        except KeyError:
            raise UnknownDirectoryChainError(chain) from None

    def _chain_tokens(self, chain: str) -> Mapping[str, tuple[str, int]]:
        tokens = self._tokens.get(chain.lower())
        if tokens is None:
            raise UnknownDirectoryChainError(chain)
        return tokens

    def token_address(self, chain: str, symbol: str) -> Optional[str]:
        """Get a token contract address by symbol, or None if unlisted."""
        entry = self._chain_tokens(chain).get(symbol.upper())
        return entry[0] if entry else None

    def token_decimals(self, chain: str, symbol_or_address: str) -> Optional[int]:
        """Get token decimals by symbol or by contract address."""
        tokens = self._chain_tokens(chain)
        entry = tokens.get(symbol_or_address.upper())
        if entry:
            return entry[1]

        wanted = symbol_or_address.lower()
        for address, decimals in tokens.values():
            if address.lower() == wanted:
                return decimals
        return None

    @property
    def chains(self) -> list[str]:
        """Directory chain names with a known chain id."""
        return list(self._chain_ids.keys())
