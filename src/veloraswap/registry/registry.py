"""Chain/token registry.

Resolves network names to chain ids and (chain, symbol) pairs to
contract addresses and decimals. Every lookup goes through the token
directory first and the local tables second.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, Optional

from veloraswap.errors import UnsupportedChainError, UnsupportedTokenError
from veloraswap.registry.base import (
    AddressResolver,
    ChainedResolver,
    DirectoryResolver,
    TableResolver,
)
from veloraswap.registry.chains import (
    CHAIN_NAME_MAPPING,
    SUPPORTED_CHAINS,
    ChainInfo,
    normalize_chain_name,
)
from veloraswap.registry.directory import TokenDirectory
from veloraswap.registry.tokens import (
    FALLBACK_TOKEN_ADDRESSES,
    FALLBACK_TOKEN_DECIMALS,
    default_decimals,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryTables:
    """Static lookup tables injected into the registry."""

    chains: Mapping[str, ChainInfo] = field(default_factory=lambda: SUPPORTED_CHAINS)
    chain_name_mapping: Mapping[str, str] = field(default_factory=lambda: CHAIN_NAME_MAPPING)
    token_addresses: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: FALLBACK_TOKEN_ADDRESSES
    )
    token_decimals: Mapping[str, Mapping[str, int]] = field(
        default_factory=lambda: FALLBACK_TOKEN_DECIMALS
    )


class ChainTokenRegistry:
    """Two-tier registry of chains and tokens.

    Lookups are case-insensitive on both chain name and symbol and have
    no side effects.
    """

    def __init__(
        self,
        directory: Optional[TokenDirectory] = None,
        tables: Optional[RegistryTables] = None,
    ):
        self.directory = directory or TokenDirectory()
        self.tables = tables or RegistryTables()

        self._chain_ids = ChainedResolver(
            DirectoryResolver(self.directory.chain_id, key_func=self._directory_chain_key),
            TableResolver(
                {name: info.id for name, info in self.tables.chains.items()},
                key_func=lambda chain: (chain.upper(),),
                name="chains",
            ),
        )
        self._addresses = ChainedResolver(
            DirectoryResolver(self.directory.token_address, key_func=self._token_key),
            TableResolver(self.tables.token_addresses, key_func=self._token_key),
            AddressResolver(),
        )
        self._decimals = ChainedResolver(
            DirectoryResolver(self.directory.token_decimals, key_func=self._token_key),
            TableResolver(self.tables.token_decimals, key_func=self._token_key),
        )

    def normalize_chain(self, chain_name: str) -> str:
        """Convert a network name to the directory naming scheme."""
        return normalize_chain_name(chain_name, self.tables.chain_name_mapping)

    def _directory_chain_key(self, chain_name: str) -> tuple:
        return (self.normalize_chain(chain_name),)

    def _token_key(self, chain_name: str, symbol: str) -> tuple:
        return (self.normalize_chain(chain_name), symbol.upper())

    # ======================
    # Chains
    # ======================

    def is_supported_chain(self, chain_name: Optional[str]) -> bool:
        """Check the local chain table (no directory lookup)."""
        if not chain_name:
            return False
        return chain_name.upper() in self.tables.chains

    def get_chain(self, chain_name: str) -> Optional[ChainInfo]:
        """Get chain metadata by network name."""
        return self.tables.chains.get(chain_name.upper())

    def supported_chains(self) -> dict[str, ChainInfo]:
        """All chains in the local table, keyed by upper-case name."""
        return dict(self.tables.chains)

    def resolve_chain_id(self, chain_name: str) -> int:
        """Resolve a network name to its numeric chain id.

        Raises:
            UnsupportedChainError: If neither tier knows the chain
        """
        chain_id = self._chain_ids.resolve(chain_name)
        if chain_id is None:
            raise UnsupportedChainError(chain_name)
        return int(chain_id)

    # ======================
    # Tokens
    # ======================

    def resolve_token_address(self, chain_name: str, symbol: str) -> str:
        """Resolve a token symbol (or literal address) on a chain.

        Raises:
            UnsupportedTokenError: If no tier yields an address
        """
        address = self._addresses.resolve(chain_name, symbol)
        if not address:
            raise UnsupportedTokenError(symbol, chain_name)
        return address

    def resolve_token_decimals(self, chain_name: str, symbol: str) -> int:
        """Resolve token decimals, applying the default policy on a miss.

        Tokens unknown to both tiers get 6 decimals for USDC/USDT and 18
        for everything else.
        """
        decimals = self._decimals.resolve(chain_name, symbol)
        if decimals is None:
            decimals = default_decimals(symbol)
            logger.warning(
                f"No decimals known for {symbol} on {chain_name}, assuming {decimals}"
            )
        return int(decimals)


@lru_cache
def get_registry() -> ChainTokenRegistry:
    """Get the process-wide registry built from the bundled tables."""
    return ChainTokenRegistry()
