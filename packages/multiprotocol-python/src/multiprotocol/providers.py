"""Multi-chain connectivity shared by every adapter."""

import logging
from typing import Iterable

import httpx

from .metadata import KNOWN_CHAINS, ChainMetadata
from .registry import ChainRegistry
from .rpc import JsonRpcClient
from .types import ChainMap, ChainName, InvalidMetadataError, ProtocolType

DEFAULT_LOGGER_NAME = "multiprotocol"


class MultiProtocolProvider:
    """
    Chain metadata plus network access for every registered chain.

    A single instance is created per application and handed to every adapter.
    RPC clients are created on first use and reused per chain; they share one
    HTTP connection pool.

    Example:
        >>> async with MultiProtocolProvider.from_known_chains(
        ...     ["ethereum", "solanamainnet"]
        ... ) as provider:
        ...     client = provider.get_rpc_client("ethereum")
        ...     block = await client.call("eth_blockNumber")
    """

    def __init__(
        self,
        metadata: ChainMap[ChainMetadata] | ChainRegistry[ChainMetadata],
        http_client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if isinstance(metadata, ChainRegistry):
            metadata = metadata.to_dict()
        self.metadata: ChainRegistry[ChainMetadata] = ChainRegistry(metadata)
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self._http = http_client
        self._owns_http = http_client is None
        self._rpc_clients: dict[ChainName, JsonRpcClient] = {}

    @classmethod
    def from_known_chains(
        cls,
        chains: Iterable[ChainName],
        http_client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> "MultiProtocolProvider":
        """Create a provider from the preset network configs."""
        _, registry = ChainRegistry(KNOWN_CHAINS).intersect(chains, throw=True)
        return cls(registry, http_client=http_client, logger=logger)

    # ============================================================================
    # Metadata
    # ============================================================================

    def get_chain_metadata(self, chain: ChainName) -> ChainMetadata:
        """Get metadata for a chain."""
        return self.metadata.get(chain)

    def try_get_chain_metadata(self, chain: ChainName) -> ChainMetadata | None:
        """Get metadata for a chain, or None if it is not registered."""
        return self.metadata.try_get(chain)

    def get_protocol(self, chain: ChainName) -> ProtocolType:
        """Get the protocol of a chain."""
        return self.get_chain_metadata(chain).protocol

    def get_chain_id(self, chain: ChainName) -> int | str:
        """Get the chain ID of a chain."""
        return self.get_chain_metadata(chain).chain_id

    def get_domain_id(self, chain: ChainName) -> int:
        """Get the domain ID of a chain."""
        domain_id = self.get_chain_metadata(chain).domain_id
        if domain_id is None:
            raise InvalidMetadataError(f"No domain ID for {chain}")
        return domain_id

    def get_chain_names(self) -> list[ChainName]:
        """Get all registered chain names."""
        return self.metadata.chains()

    def has_chain(self, chain: ChainName) -> bool:
        """Check if a chain is registered."""
        return self.metadata.known_chain(chain)

    def add_chain(self, metadata: ChainMetadata) -> None:
        """Register a chain, replacing any previous entry with that name."""
        self.metadata.set(metadata.name, metadata)
        self._rpc_clients.pop(metadata.name, None)
        self.logger.debug("Added chain %s (%s)", metadata.name, metadata.protocol)

    def intersect(
        self, chains: Iterable[ChainName], throw: bool = False
    ) -> tuple[list[ChainName], "MultiProtocolProvider"]:
        """Create a provider restricted to the given chains.

        The new provider shares this one's HTTP client (and does not close it)
        and its per-chain RPC clients, including their current endpoint.
        """
        intersection, registry = self.metadata.intersect(chains, throw=throw)
        scoped = MultiProtocolProvider(
            registry, http_client=self._get_http_client(), logger=self.logger
        )
        scoped._rpc_clients = self._rpc_clients
        return intersection, scoped

    # ============================================================================
    # Network access
    # ============================================================================

    def get_rpc_client(self, chain: ChainName) -> JsonRpcClient:
        """Get the JSON-RPC client for a chain."""
        client = self._rpc_clients.get(chain)
        if client is not None:
            return client

        metadata = self.get_chain_metadata(chain)
        if not metadata.rpc_urls:
            raise InvalidMetadataError(f"No RPC URLs for {chain}")

        client = JsonRpcClient(
            chain,
            metadata.rpc_urls,
            self._get_http_client(),
            self.logger.getChild("rpc"),
        )
        self._rpc_clients[chain] = client
        return client

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=30.0)
        return self._http

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None
            self._rpc_clients.clear()

    async def __aenter__(self) -> "MultiProtocolProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
