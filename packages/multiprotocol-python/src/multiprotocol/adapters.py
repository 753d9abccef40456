"""
Adapter capability interface and per-protocol base types.

Adapters implement an app's functionality for one protocol family, e.g. an
EVM router adapter and a Sealevel router adapter expose the same methods but
talk to very different chains. Every adapter is built from the shared
`MultiProtocolProvider` alone.
"""

import logging
from typing import Callable, ClassVar, Protocol, Sequence, TypeVar, runtime_checkable

from solders.pubkey import Pubkey

from .pda import Seed, find_program_address
from .providers import MultiProtocolProvider
from .types import ProtocolType


@runtime_checkable
class AppAdapter(Protocol):
    """Minimal shape of an adapter usable with `MultiProtocolApp`."""

    protocol: ProtocolType
    multi_provider: MultiProtocolProvider
    logger: logging.Logger


A = TypeVar("A", bound=AppAdapter)

# Anything that builds an adapter from the provider: usually the class itself.
AdapterFactory = Callable[[MultiProtocolProvider], A]


class _ProviderBound:
    protocol: ClassVar[ProtocolType]

    def __init__(self, multi_provider: MultiProtocolProvider) -> None:
        self.multi_provider = multi_provider
        self.logger = multi_provider.logger.getChild(type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(protocol={self.protocol.value})"


class BaseEvmAdapter(_ProviderBound):
    """Base for adapters targeting EVM (account model) chains."""

    protocol: ClassVar[ProtocolType] = ProtocolType.ETHEREUM


class BaseSealevelAdapter(_ProviderBound):
    """Base for adapters targeting Sealevel (instruction/program model) chains."""

    protocol: ClassVar[ProtocolType] = ProtocolType.SEALEVEL

    @staticmethod
    def derive_pda(seeds: Sequence[Seed], program_id: str | Pubkey) -> Pubkey:
        """Derive the program-derived address for seeds under a program."""
        pda, _ = find_program_address(seeds, program_id)
        return pda
