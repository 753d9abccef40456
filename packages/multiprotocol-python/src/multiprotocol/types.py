"""Core type definitions for the multi-protocol SDK."""

from enum import Enum, IntEnum
from typing import TypeVar

T = TypeVar("T")

ChainName = str
ChainMap = dict[ChainName, T]


class ProtocolType(str, Enum):
    """Supported chain execution models."""

    ETHEREUM = "ethereum"  # Account model, EVM and compatibles
    SEALEVEL = "sealevel"  # Instruction/program model (Solana)
    COSMOS = "cosmos"

    def __str__(self) -> str:
        return self.value


class ErrorCode(IntEnum):
    """Error codes for SDK operations."""

    UNKNOWN_CHAIN = 1
    UNSUPPORTED_PROTOCOL = 2
    ADDRESS_DERIVATION = 3
    INVALID_METADATA = 4
    NETWORK_ERROR = 5
    UNKNOWN = 99


class MultiProtocolError(Exception):
    """Base exception for the multi-protocol SDK."""

    def __init__(self, code: ErrorCode, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.code = code
        self.cause = cause


class UnknownChainError(MultiProtocolError):
    """No entry is registered for a chain name."""

    def __init__(self, chain: ChainName, message: str | None = None):
        super().__init__(
            ErrorCode.UNKNOWN_CHAIN,
            message or f"No chain value found for {chain}",
        )
        self.chain = chain


class UnsupportedProtocolError(MultiProtocolError):
    """An app has no adapter for a chain's protocol."""

    def __init__(self, protocol: ProtocolType | str):
        super().__init__(
            ErrorCode.UNSUPPORTED_PROTOCOL,
            f"No adapter for protocol {protocol!s}",
        )
        self.protocol = protocol


class AddressDerivationError(MultiProtocolError):
    """A program-derived address could not be computed."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.ADDRESS_DERIVATION, message)


class InvalidMetadataError(MultiProtocolError):
    """Chain metadata is missing a required field."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.INVALID_METADATA, message)


class RpcError(MultiProtocolError):
    """Every RPC endpoint for a chain failed."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(ErrorCode.NETWORK_ERROR, message)
        self.errors = errors or []
