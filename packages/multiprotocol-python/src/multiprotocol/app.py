"""Protocol-agnostic application over many chains."""

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Mapping, TypeVar

from .adapters import AdapterFactory, AppAdapter
from .metadata import ChainMetadata
from .providers import MultiProtocolProvider
from .types import ChainMap, ChainName, ProtocolType, UnsupportedProtocolError

A = TypeVar("A", bound=AppAdapter)
Output = TypeVar("Output")


class MultiProtocolApp(Generic[A]):
    """
    An application whose functionality is implemented by a different adapter
    for each protocol family.

    The app maps protocol types to adapter factories; `adapter(chain)` looks up
    the chain's protocol and builds a fresh adapter from the shared provider.
    The provider's metadata MUST include every chain the app is used with.

    Example:
        >>> app = MultiProtocolApp(
        ...     provider,
        ...     {
        ...         ProtocolType.ETHEREUM: EvmRouterAdapter,
        ...         ProtocolType.SEALEVEL: SealevelRouterAdapter,
        ...     },
        ... )
        >>> routers = await app.adapter_map(
        ...     lambda chain, adapter: adapter.router_address(chain)
        ... )

    Subclasses may instead override `protocol_to_adapter`.
    """

    def __init__(
        self,
        multi_provider: MultiProtocolProvider,
        protocol_to_adapter: Mapping[ProtocolType, AdapterFactory[A]] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.multi_provider = multi_provider
        self.logger = logger or multi_provider.logger
        self._adapter_factories: dict[ProtocolType, AdapterFactory[A]] = dict(
            protocol_to_adapter or {}
        )

    def protocol_to_adapter(self, protocol: ProtocolType) -> AdapterFactory[A] | None:
        """Get the adapter factory for a protocol, if the app supports it."""
        return self._adapter_factories.get(protocol)

    def chains(self) -> list[ChainName]:
        """Get all chains the app can address."""
        return self.multi_provider.metadata.chains()

    def metadata(self, chain: ChainName) -> ChainMetadata:
        """Get metadata for a chain."""
        return self.multi_provider.metadata.get(chain)

    def adapter(self, chain: ChainName) -> A:
        """Build a new adapter for a chain."""
        metadata = self.metadata(chain)
        factory = self.protocol_to_adapter(metadata.protocol)
        if factory is None:
            raise UnsupportedProtocolError(metadata.protocol)

        adapter = factory(self.multi_provider)
        self.logger.debug(
            "Resolved %s adapter for %s: %s",
            metadata.protocol,
            chain,
            type(adapter).__name__,
        )
        return adapter

    def adapters(self) -> ChainMap[A]:
        """Build an adapter for every chain; fails if any chain is unsupported."""
        return self.multi_provider.metadata.map(lambda chain, _: self.adapter(chain))

    async def adapter_map(
        self, fn: Callable[[ChainName, A], Awaitable[Output]]
    ) -> ChainMap[Output]:
        """
        Run `fn(chain, adapter)` concurrently for every chain.

        Returns once all calls have finished. If any call fails, the remaining
        ones are cancelled and the first failure is raised unchanged.
        """
        adapters = self.adapters()
        tasks: dict[ChainName, asyncio.Task[Output]] = {}
        failure: BaseException | None = None

        try:
            async with asyncio.TaskGroup() as group:
                for chain, adapter in adapters.items():
                    tasks[chain] = group.create_task(
                        _run(fn, chain, adapter), name=f"adapter_map:{chain}"
                    )
        except BaseExceptionGroup as eg:
            failure = eg.exceptions[0]

        # Outside the handler: __cause__/__context__ stay as fn left them.
        if failure is not None:
            raise failure

        return {chain: task.result() for chain, task in tasks.items()}


async def _run(
    fn: Callable[[ChainName, A], Awaitable[Output]], chain: ChainName, adapter: A
) -> Output:
    return await fn(chain, adapter)
