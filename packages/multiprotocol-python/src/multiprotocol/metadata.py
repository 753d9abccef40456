"""Chain metadata and preset network configuration."""

from dataclasses import dataclass, field
from typing import Any, Mapping

from .types import ChainMap, InvalidMetadataError, ProtocolType


@dataclass(frozen=True)
class NativeToken:
    """Native currency of a chain."""

    symbol: str
    decimals: int = 18


_ETH = NativeToken("ETH")
_SOL = NativeToken("SOL", decimals=9)


def default_native_token(protocol: ProtocolType) -> NativeToken:
    """Get the usual native currency for a protocol."""
    if protocol == ProtocolType.SEALEVEL:
        return _SOL
    return _ETH


@dataclass
class ChainMetadata:
    """
    Static description of one chain.

    `addresses` maps contract (or program) names to their deployed address on
    this chain, e.g. {"mailbox": "0x..."} or {"mailbox": "<base58 program id>"}.
    When `native_token` is omitted it defaults to the protocol's native
    currency (SOL with 9 decimals on Sealevel, ETH with 18 elsewhere).
    """

    name: str
    protocol: ProtocolType
    chain_id: int | str
    rpc_urls: list[str] = field(default_factory=list)
    native_token: NativeToken | None = None
    domain_id: int | None = None
    explorer_url: str | None = None
    is_testnet: bool = False
    addresses: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.native_token is None:
            self.native_token = default_native_token(self.protocol)
        if self.domain_id is None and isinstance(self.chain_id, int):
            self.domain_id = self.chain_id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChainMetadata":
        """Build metadata from a plain mapping (e.g. parsed JSON)."""
        for key in ("name", "protocol"):
            if not data.get(key):
                raise InvalidMetadataError(f"Chain metadata is missing '{key}'")

        try:
            protocol = ProtocolType(data["protocol"])
        except ValueError as e:
            raise InvalidMetadataError(f"Unknown protocol: {data['protocol']}") from e

        default_token = default_native_token(protocol)
        token = data.get("native_token") or {}
        return cls(
            name=data["name"],
            protocol=protocol,
            chain_id=data.get("chain_id", data["name"]),
            rpc_urls=list(data.get("rpc_urls", [])),
            native_token=NativeToken(
                symbol=token.get("symbol", default_token.symbol),
                decimals=token.get("decimals", default_token.decimals),
            ),
            domain_id=data.get("domain_id"),
            explorer_url=data.get("explorer_url"),
            is_testnet=bool(data.get("is_testnet", False)),
            addresses=dict(data.get("addresses", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain mapping."""
        return {
            "name": self.name,
            "protocol": self.protocol.value,
            "chain_id": self.chain_id,
            "domain_id": self.domain_id,
            "rpc_urls": list(self.rpc_urls),
            "native_token": {
                "symbol": self.native_token.symbol,
                "decimals": self.native_token.decimals,
            },
            "explorer_url": self.explorer_url,
            "is_testnet": self.is_testnet,
            "addresses": dict(self.addresses),
        }


def load_chain_metadata(entries: Mapping[str, Mapping[str, Any]]) -> ChainMap[ChainMetadata]:
    """Build a chain map from config entries keyed by chain name."""
    chains: ChainMap[ChainMetadata] = {}
    for chain, entry in entries.items():
        chains[chain] = ChainMetadata.from_dict({"name": chain, **entry})
    return chains


# Pre-configured networks
KNOWN_CHAINS: ChainMap[ChainMetadata] = {
    "ethereum": ChainMetadata(
        name="ethereum",
        protocol=ProtocolType.ETHEREUM,
        chain_id=1,
        rpc_urls=["https://eth.llamarpc.com", "https://rpc.ankr.com/eth"],
        native_token=_ETH,
        explorer_url="https://etherscan.io",
    ),
    "sepolia": ChainMetadata(
        name="sepolia",
        protocol=ProtocolType.ETHEREUM,
        chain_id=11155111,
        rpc_urls=["https://sepolia.drpc.org", "https://rpc.ankr.com/eth_sepolia"],
        native_token=_ETH,
        explorer_url="https://sepolia.etherscan.io",
        is_testnet=True,
    ),
    "arbitrum": ChainMetadata(
        name="arbitrum",
        protocol=ProtocolType.ETHEREUM,
        chain_id=42161,
        rpc_urls=["https://arb1.arbitrum.io/rpc", "https://rpc.ankr.com/arbitrum"],
        native_token=_ETH,
        explorer_url="https://arbiscan.io",
    ),
    "optimism": ChainMetadata(
        name="optimism",
        protocol=ProtocolType.ETHEREUM,
        chain_id=10,
        rpc_urls=["https://mainnet.optimism.io", "https://rpc.ankr.com/optimism"],
        native_token=_ETH,
        explorer_url="https://optimistic.etherscan.io",
    ),
    "base": ChainMetadata(
        name="base",
        protocol=ProtocolType.ETHEREUM,
        chain_id=8453,
        rpc_urls=["https://mainnet.base.org", "https://base.llamarpc.com"],
        native_token=_ETH,
        explorer_url="https://basescan.org",
    ),
    "polygon": ChainMetadata(
        name="polygon",
        protocol=ProtocolType.ETHEREUM,
        chain_id=137,
        rpc_urls=["https://polygon-rpc.com", "https://rpc.ankr.com/polygon"],
        native_token=NativeToken("MATIC"),
        explorer_url="https://polygonscan.com",
    ),
    "solanamainnet": ChainMetadata(
        name="solanamainnet",
        protocol=ProtocolType.SEALEVEL,
        chain_id=1399811149,
        rpc_urls=["https://api.mainnet-beta.solana.com"],
        native_token=_SOL,
        explorer_url="https://explorer.solana.com",
    ),
    "solanadevnet": ChainMetadata(
        name="solanadevnet",
        protocol=ProtocolType.SEALEVEL,
        chain_id=1399811151,
        rpc_urls=["https://api.devnet.solana.com"],
        native_token=_SOL,
        explorer_url="https://explorer.solana.com?cluster=devnet",
        is_testnet=True,
    ),
    "solanatestnet": ChainMetadata(
        name="solanatestnet",
        protocol=ProtocolType.SEALEVEL,
        chain_id=1399811150,
        rpc_urls=["https://api.testnet.solana.com"],
        native_token=_SOL,
        explorer_url="https://explorer.solana.com?cluster=testnet",
        is_testnet=True,
    ),
}
