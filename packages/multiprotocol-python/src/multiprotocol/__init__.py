"""
Multi-protocol SDK

One application-layer API over structurally different blockchain families
(EVM account-model chains, Sealevel program-model chains). Callers address
chains by name and get back an adapter for that chain's protocol.

Example:
    >>> from multiprotocol import MultiProtocolProvider, NativeTokenApp
    >>>
    >>> provider = MultiProtocolProvider.from_known_chains(
    ...     ["ethereum", "solanamainnet"]
    ... )
    >>> app = NativeTokenApp(provider)
    >>>
    >>> adapter = app.adapter("solanamainnet")
    >>> adapter.protocol
    <ProtocolType.SEALEVEL: 'sealevel'>
    >>> balances = await app.balances({"ethereum": "0x...", "solanamainnet": "..."})
"""

from .adapters import AdapterFactory, AppAdapter, BaseEvmAdapter, BaseSealevelAdapter
from .app import MultiProtocolApp
from .metadata import KNOWN_CHAINS, ChainMetadata, NativeToken, load_chain_metadata
from .native import (
    Balance,
    EvmNativeTokenAdapter,
    NativeTokenAdapter,
    NativeTokenApp,
    SealevelNativeTokenAdapter,
)
from .pda import create_program_address, find_program_address
from .providers import MultiProtocolProvider
from .registry import ChainRegistry
from .rpc import JsonRpcClient
from .types import (
    AddressDerivationError,
    ChainMap,
    ChainName,
    ErrorCode,
    InvalidMetadataError,
    MultiProtocolError,
    ProtocolType,
    RpcError,
    UnknownChainError,
    UnsupportedProtocolError,
)

__version__ = "0.1.0"
__all__ = [
    # App
    "MultiProtocolApp",
    # Adapters
    "AdapterFactory",
    "AppAdapter",
    "BaseEvmAdapter",
    "BaseSealevelAdapter",
    # Metadata & connectivity
    "ChainMetadata",
    "ChainRegistry",
    "NativeToken",
    "KNOWN_CHAINS",
    "load_chain_metadata",
    "MultiProtocolProvider",
    "JsonRpcClient",
    # Program-derived addresses
    "create_program_address",
    "find_program_address",
    # Native token app
    "Balance",
    "EvmNativeTokenAdapter",
    "NativeTokenAdapter",
    "NativeTokenApp",
    "SealevelNativeTokenAdapter",
    # Types
    "ChainMap",
    "ChainName",
    "ProtocolType",
    "ErrorCode",
    "MultiProtocolError",
    "UnknownChainError",
    "UnsupportedProtocolError",
    "AddressDerivationError",
    "InvalidMetadataError",
    "RpcError",
]
