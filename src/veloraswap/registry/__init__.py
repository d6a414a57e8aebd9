"""Chain and token registry.

Tiers:
- Token directory: bundled mainnet token catalog
- Fallback tables: testnet tokens and local overrides
"""

from veloraswap.registry.base import (
    AddressResolver,
    ChainedResolver,
    DirectoryResolver,
    Resolver,
    TableResolver,
)
from veloraswap.registry.chains import SUPPORTED_CHAINS, ChainInfo, normalize_chain_name
from veloraswap.registry.directory import TokenDirectory, UnknownDirectoryChainError
from veloraswap.registry.registry import ChainTokenRegistry, RegistryTables, get_registry
from veloraswap.registry.tokens import is_address, is_native_token

__all__ = [
    "AddressResolver",
    "ChainedResolver",
    "ChainInfo",
    "ChainTokenRegistry",
    "DirectoryResolver",
    "RegistryTables",
    "Resolver",
    "SUPPORTED_CHAINS",
    "TableResolver",
    "TokenDirectory",
    "UnknownDirectoryChainError",
    "get_registry",
    "is_address",
    "is_native_token",
    "normalize_chain_name",
]
