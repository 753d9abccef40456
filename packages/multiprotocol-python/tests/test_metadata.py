from __future__ import annotations

import pytest

from multiprotocol import (
    KNOWN_CHAINS,
    ChainMetadata,
    ErrorCode,
    InvalidMetadataError,
    NativeToken,
    ProtocolType,
    load_chain_metadata,
)


def test_from_dict() -> None:
    metadata = ChainMetadata.from_dict(
        {
            "name": "solanadevnet",
            "protocol": "sealevel",
            "chain_id": 1399811151,
            "rpc_urls": ["https://api.devnet.solana.com"],
            "native_token": {"symbol": "SOL", "decimals": 9},
            "addresses": {"mailbox": "E588QtVUvresuXq2KoNEwAmoifCzYGpRBdHByN9KQMbi"},
        }
    )

    assert metadata.protocol is ProtocolType.SEALEVEL
    assert metadata.native_token == NativeToken("SOL", 9)
    assert metadata.domain_id == 1399811151
    assert metadata.addresses["mailbox"] == "E588QtVUvresuXq2KoNEwAmoifCzYGpRBdHByN9KQMbi"
    assert ChainMetadata.from_dict(metadata.to_dict()) == metadata


def test_from_dict_defaults() -> None:
    metadata = ChainMetadata.from_dict({"name": "hub", "protocol": "cosmos"})

    assert metadata.chain_id == "hub"
    assert metadata.domain_id is None
    assert metadata.rpc_urls == []
    assert metadata.native_token == NativeToken("ETH", 18)


def test_native_token_defaults_by_protocol() -> None:
    sealevel = ChainMetadata(name="sol", protocol=ProtocolType.SEALEVEL, chain_id=1399811151)
    ethereum = ChainMetadata(name="eth", protocol=ProtocolType.ETHEREUM, chain_id=1)

    assert sealevel.native_token == NativeToken("SOL", 9)
    assert ethereum.native_token == NativeToken("ETH", 18)


def test_from_dict_sealevel_defaults_to_sol() -> None:
    chains = load_chain_metadata({"sol": {"protocol": "sealevel", "chain_id": 1399811151}})
    assert chains["sol"].native_token == NativeToken("SOL", 9)

    partial = ChainMetadata.from_dict(
        {"name": "sol", "protocol": "sealevel", "native_token": {"symbol": "wSOL"}}
    )
    assert partial.native_token == NativeToken("wSOL", 9)


def test_metadata_can_be_updated_in_place() -> None:
    metadata = ChainMetadata.from_dict({"name": "alpha", "protocol": "ethereum", "chain_id": 31337})

    metadata.addresses["router"] = "0x" + "cd" * 20
    metadata.rpc_urls = ["https://rpc.alpha.test/"]

    assert metadata.to_dict()["addresses"] == {"router": "0x" + "cd" * 20}
    assert metadata.to_dict()["rpc_urls"] == ["https://rpc.alpha.test/"]


def test_explicit_domain_id_is_kept() -> None:
    metadata = ChainMetadata(name="x", protocol=ProtocolType.ETHEREUM, chain_id=1, domain_id=77)
    assert metadata.domain_id == 77


@pytest.mark.parametrize("missing", ["name", "protocol"])
def test_from_dict_requires_name_and_protocol(missing: str) -> None:
    data = {"name": "ethereum", "protocol": "ethereum"}
    del data[missing]

    with pytest.raises(InvalidMetadataError, match=missing) as err:
        ChainMetadata.from_dict(data)
    assert err.value.code == ErrorCode.INVALID_METADATA


def test_from_dict_rejects_unknown_protocol() -> None:
    with pytest.raises(InvalidMetadataError, match="Unknown protocol: bitcoin"):
        ChainMetadata.from_dict({"name": "btc", "protocol": "bitcoin"})


def test_load_chain_metadata_uses_keys_as_names() -> None:
    chains = load_chain_metadata(
        {
            "alpha": {"protocol": "ethereum", "chain_id": 31337},
            "beta": {"protocol": "sealevel", "chain_id": 1399811151},
        }
    )

    assert list(chains) == ["alpha", "beta"]
    assert chains["alpha"].name == "alpha"
    assert chains["beta"].protocol is ProtocolType.SEALEVEL


def test_known_chains() -> None:
    assert KNOWN_CHAINS["ethereum"].protocol is ProtocolType.ETHEREUM
    assert KNOWN_CHAINS["solanamainnet"].protocol is ProtocolType.SEALEVEL
    assert KNOWN_CHAINS["solanamainnet"].native_token.decimals == 9
    for name, metadata in KNOWN_CHAINS.items():
        assert metadata.name == name
        assert metadata.rpc_urls


def test_protocol_type_str() -> None:
    assert str(ProtocolType.SEALEVEL) == "sealevel"
    assert ProtocolType("ethereum") is ProtocolType.ETHEREUM
