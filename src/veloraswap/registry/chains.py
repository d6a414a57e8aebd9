"""Chain metadata for all networks supported by the swap builder.

Chains are keyed by their upper-case network name (ETHEREUM, BASE_SEPOLIA).
The token directory uses a different, lower-case naming scheme
(ethereum, base-sepolia); CHAIN_NAME_MAPPING translates between the two.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ChainInfo:
    """Numeric chain identifier plus human-readable name."""

    id: int
    name: str
    is_testnet: bool = False


# ======================
# Supported chains
# ======================

SUPPORTED_CHAINS: Mapping[str, ChainInfo] = MappingProxyType({
    "ETHEREUM": ChainInfo(id=1, name="Ethereum"),
    "ARBITRUM": ChainInfo(id=42161, name="Arbitrum One"),
    "OPTIMISM": ChainInfo(id=10, name="Optimism"),
    "BASE": ChainInfo(id=8453, name="Base"),
    "POLYGON": ChainInfo(id=137, name="Polygon"),
    "AVALANCHE": ChainInfo(id=43114, name="Avalanche"),
    "SEPOLIA": ChainInfo(id=11155111, name="Sepolia", is_testnet=True),
    "ARBITRUM_SEPOLIA": ChainInfo(id=421614, name="Arbitrum Sepolia", is_testnet=True),
    "BASE_SEPOLIA": ChainInfo(id=84532, name="Base Sepolia", is_testnet=True),
    "OPTIMISM_SEPOLIA": ChainInfo(id=11155420, name="Optimism Sepolia", is_testnet=True),
})

# Upper-case network name -> directory chain name
CHAIN_NAME_MAPPING: Mapping[str, str] = MappingProxyType({
    "ETHEREUM": "ethereum",
    "ARBITRUM": "arbitrum",
    "OPTIMISM": "optimism",
    "BASE": "base",
    "POLYGON": "polygon",
    "AVALANCHE": "avalanche",
    "SEPOLIA": "sepolia",
    "ARBITRUM_SEPOLIA": "arbitrum-sepolia",
    "BASE_SEPOLIA": "base-sepolia",
    "OPTIMISM_SEPOLIA": "optimism-sepolia",
})


def normalize_chain_name(
    chain_name: str,
    mapping: Mapping[str, str] = CHAIN_NAME_MAPPING,
) -> str:
    """Convert a network name to the directory's naming scheme.

    Names missing from the mapping fall back to their lower-case form.
    """
    return mapping.get(chain_name.upper(), chain_name.lower())
