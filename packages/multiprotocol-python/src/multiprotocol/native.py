"""Native token balances across protocols."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from .adapters import AppAdapter, BaseEvmAdapter, BaseSealevelAdapter
from .app import MultiProtocolApp
from .metadata import ChainMetadata
from .providers import MultiProtocolProvider
from .types import ChainMap, ChainName, ProtocolType

_EVM_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")
_BASE58_ADDRESS = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")


@dataclass
class Balance:
    """Balance information."""

    raw: str  # Raw balance in smallest unit
    formatted: str  # Human-readable balance with decimals
    symbol: str  # Currency/token symbol
    decimals: int  # Number of decimals

    def is_zero(self) -> bool:
        """Check if balance is zero."""
        return self.raw == "0" or not self.raw


class NativeTokenAdapter(AppAdapter, Protocol):
    """Methods every native token adapter provides."""

    async def get_balance(self, chain: ChainName, address: str) -> Balance:
        """Get the native balance of an address."""
        ...

    def is_valid_address(self, address: str) -> bool:
        """Check if an address is well-formed for this protocol."""
        ...

    def get_explorer_address_url(self, chain: ChainName, address: str) -> str | None:
        """Get explorer URL for an address."""
        ...


def format_units(value: int, decimals: int, symbol: str) -> str:
    """Format an integer amount of base units, e.g. wei as ETH."""
    divisor = 10 ** decimals
    whole = value // divisor
    fraction = value % divisor

    if fraction == 0:
        return f"{whole} {symbol}"

    fraction_str = str(fraction).zfill(decimals)
    trimmed = fraction_str.rstrip("0")
    return f"{whole}.{trimmed} {symbol}"


def _explorer_url(metadata: ChainMetadata, path: str) -> str | None:
    if not metadata.explorer_url:
        return None
    # Keep query strings such as "?cluster=devnet" after the path.
    base, sep, query = metadata.explorer_url.partition("?")
    return f"{base.rstrip('/')}/{path}{sep}{query}"


def _balance(metadata: ChainMetadata, raw_value: int) -> Balance:
    token = metadata.native_token
    return Balance(
        raw=str(raw_value),
        formatted=format_units(raw_value, token.decimals, token.symbol),
        symbol=token.symbol,
        decimals=token.decimals,
    )


class EvmNativeTokenAdapter(BaseEvmAdapter):
    """Native token adapter for EVM chains."""

    async def get_balance(self, chain: ChainName, address: str) -> Balance:
        """Get balance for an address."""
        client = self.multi_provider.get_rpc_client(chain)
        result = await client.call("eth_getBalance", [address, "latest"])
        return _balance(self.multi_provider.get_chain_metadata(chain), int(result, 16))

    def is_valid_address(self, address: str) -> bool:
        """Check if an address is valid."""
        return bool(_EVM_ADDRESS.match(address))

    def get_explorer_address_url(self, chain: ChainName, address: str) -> str | None:
        """Get explorer URL for an address."""
        metadata = self.multi_provider.get_chain_metadata(chain)
        return _explorer_url(metadata, f"address/{address}")


class SealevelNativeTokenAdapter(BaseSealevelAdapter):
    """Native token adapter for Sealevel chains."""

    commitment = "confirmed"

    async def get_balance(self, chain: ChainName, address: str) -> Balance:
        """Get SOL balance for an address."""
        client = self.multi_provider.get_rpc_client(chain)
        result = await client.call(
            "getBalance",
            [address, {"commitment": self.commitment}],
        )
        return _balance(self.multi_provider.get_chain_metadata(chain), result["value"])

    def is_valid_address(self, address: str) -> bool:
        """Check if an address is valid (base58)."""
        return bool(_BASE58_ADDRESS.match(address))

    def get_explorer_address_url(self, chain: ChainName, address: str) -> str | None:
        """Get explorer URL for an address."""
        metadata = self.multi_provider.get_chain_metadata(chain)
        return _explorer_url(metadata, f"address/{address}")


class NativeTokenApp(MultiProtocolApp[NativeTokenAdapter]):
    """
    Native balances on any mix of EVM and Sealevel chains.

    Example:
        >>> app = NativeTokenApp(provider)
        >>> balances = await app.balances({
        ...     "ethereum": "0x...",
        ...     "solanamainnet": "...",
        ... })
        >>> balances["ethereum"].formatted
        '1.5 ETH'
    """

    def __init__(
        self,
        multi_provider: MultiProtocolProvider,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(
            multi_provider,
            {
                ProtocolType.ETHEREUM: EvmNativeTokenAdapter,
                ProtocolType.SEALEVEL: SealevelNativeTokenAdapter,
            },
            logger=logger,
        )

    async def balances(self, addresses: ChainMap[str]) -> ChainMap[Balance]:
        """Get the balance of one address per chain, queried concurrently."""
        _, provider = self.multi_provider.intersect(addresses, throw=True)
        scoped = NativeTokenApp(provider, logger=self.logger)

        async def get_balance(chain: ChainName, adapter: NativeTokenAdapter) -> Balance:
            return await adapter.get_balance(chain, addresses[chain])

        return await scoped.adapter_map(get_balance)
