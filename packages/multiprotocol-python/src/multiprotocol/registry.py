"""Keyed per-chain container."""

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from .types import ChainMap, ChainName, UnknownChainError

V = TypeVar("V")
R = TypeVar("R")


class ChainRegistry(Generic[V]):
    """
    A map of chain name to a per-chain value.

    Iteration order follows insertion order, but callers should treat it as
    unordered.

    Example:
        >>> registry = ChainRegistry({"ethereum": 1, "solanamainnet": 2})
        >>> registry.get("ethereum")
        1
        >>> registry.map(lambda chain, value: value * 10)
        {'ethereum': 10, 'solanamainnet': 20}
    """

    def __init__(self, chain_map: ChainMap[V] | None = None) -> None:
        self._chain_map: ChainMap[V] = dict(chain_map or {})

    def get(self, chain: ChainName) -> V:
        """Get the value for a chain."""
        if chain not in self._chain_map:
            raise UnknownChainError(chain)
        return self._chain_map[chain]

    def try_get(self, chain: ChainName) -> V | None:
        """Get the value for a chain, or None if it is not registered."""
        return self._chain_map.get(chain)

    def set(self, chain: ChainName, value: V) -> None:
        """Add or replace the value for a chain."""
        self._chain_map[chain] = value

    def chains(self) -> list[ChainName]:
        """Get all registered chain names."""
        return list(self._chain_map)

    def known_chain(self, chain: ChainName) -> bool:
        """Check if a chain is registered."""
        return chain in self._chain_map

    def remote_chains(self, chain: ChainName) -> list[ChainName]:
        """Get every registered chain except the given one."""
        self.get(chain)
        return [name for name in self._chain_map if name != chain]

    def map(self, fn: Callable[[ChainName, V], R]) -> ChainMap[R]:
        """Apply a function to every entry and collect the results."""
        return {chain: fn(chain, value) for chain, value in self._chain_map.items()}

    def for_each(self, fn: Callable[[ChainName, V], None]) -> None:
        """Apply a function to every entry."""
        for chain, value in self._chain_map.items():
            fn(chain, value)

    def intersect(
        self, chains: Iterable[ChainName], throw: bool = False
    ) -> tuple[list[ChainName], "ChainRegistry[V]"]:
        """Restrict the registry to the given chains."""
        requested = list(chains)
        missing = [chain for chain in requested if chain not in self._chain_map]
        if throw and missing:
            raise UnknownChainError(
                missing[0], f"Unknown chains: {', '.join(missing)}"
            )

        intersection = [chain for chain in requested if chain in self._chain_map]
        return intersection, ChainRegistry(
            {chain: self._chain_map[chain] for chain in intersection}
        )

    def to_dict(self) -> ChainMap[V]:
        """Get a shallow copy of the underlying chain map."""
        return dict(self._chain_map)

    def __contains__(self, chain: object) -> bool:
        return chain in self._chain_map

    def __iter__(self) -> Iterator[ChainName]:
        return iter(self._chain_map)

    def __len__(self) -> int:
        return len(self._chain_map)
