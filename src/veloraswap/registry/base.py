"""Resolver interface for tiered registry lookups.

A resolver maps a key to a value, or returns None when it has no entry.
ChainedResolver tries several resolvers in order and moves on when one
returns None or raises.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from veloraswap.registry.tokens import is_address

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Resolver(ABC, Generic[T]):
    """Abstract lookup tier."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Tier name used in log messages."""
        pass

    @abstractmethod
    def resolve(self, *key: str) -> Optional[T]:
        """Resolve a key.

        Args:
            key: Lookup key parts, e.g. (chain,) or (chain, symbol)

        Returns:
            The resolved value, or None if this tier has no entry
        """
        pass


class DirectoryResolver(Resolver[T]):
    """Resolver backed by a directory lookup function.

    The key is passed through ``key_func`` first so each tier can apply
    its own naming scheme. The lookup may raise; ChainedResolver treats
    that as a miss.
    """

    def __init__(
        self,
        lookup: Callable[..., Optional[T]],
        key_func: Optional[Callable[..., tuple]] = None,
        name: str = "directory",
    ):
        self._lookup = lookup
        self._key_func = key_func
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def resolve(self, *key: str) -> Optional[T]:
        if self._key_func:
            key = self._key_func(*key)
        return self._lookup(*key)


class TableResolver(Resolver[T]):
    """Resolver over a static (possibly nested) mapping."""

    def __init__(
        self,
        table: Mapping[str, Any],
        key_func: Optional[Callable[..., tuple]] = None,
        name: str = "fallback",
    ):
        self._table = table
        self._key_func = key_func
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def resolve(self, *key: str) -> Optional[T]:
        if self._key_func:
            key = self._key_func(*key)

        node: Any = self._table
        for part in key:
            if not isinstance(node, Mapping):
                return None
            node = node.get(part)
            if node is None:
                return None
        return node


class AddressResolver(Resolver[str]):
    """Accepts a literal contract address as its own token address."""

    @property
    def name(self) -> str:
        return "address"

    def resolve(self, *key: str) -> Optional[str]:
        token = key[-1] if key else None
        return token if is_address(token) else None


class ChainedResolver(Resolver[T]):
    """Ordered fallback across several resolvers."""

    def __init__(self, *resolvers: Resolver[T]):
        self.resolvers: list[Resolver[T]] = list(resolvers)

    @property
    def name(self) -> str:
        return " -> ".join(r.name for r in self.resolvers)

    def resolve(self, *key: str) -> Optional[T]:
        for resolver in self.resolvers:
            try:
                value = resolver.resolve(*key)
            except Exception as e:
                logger.debug(f"{resolver.name} lookup failed for {key}: {type(e).__name__}: {e}")
                continue

            if value is not None:
                return value
            logger.debug(f"{resolver.name} has no entry for {key}")

        return None
