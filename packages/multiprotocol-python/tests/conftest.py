"""
Pytest configuration for multiprotocol tests.
"""
from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from multiprotocol import ChainMetadata, MultiProtocolProvider, NativeToken, ProtocolType

EVM_URL = "https://rpc.alpha.test/"
EVM_BACKUP_URL = "https://backup.alpha.test/"
SOL_URL = "https://rpc.beta.test/"


class RpcStub:
    """
    Callable for httpx.MockTransport that answers JSON-RPC by (url, method).

    `results` are wrapped in a JSON-RPC envelope; `raw` bodies are sent as-is.
    """

    def __init__(self) -> None:
        self.results: dict[tuple[str, str], Any] = {}
        self.raw: dict[tuple[str, str], Any] = {}
        self.down: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        url = str(request.url)
        method = payload["method"]
        self.calls.append((url, method))

        if url in self.down:
            return httpx.Response(503, text="unavailable")

        if (url, method) in self.raw:
            return httpx.Response(200, json=self.raw[(url, method)])

        if (url, method) not in self.results:
            return httpx.Response(
                200,
                json={
                    "jsonrpc": "2.0",
                    "id": payload["id"],
                    "error": {"code": -32601, "message": "Method not found"},
                },
            )

        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": payload["id"], "result": self.results[(url, method)]},
        )


@pytest.fixture
def chain_metadata() -> dict[str, ChainMetadata]:
    """One EVM chain with two endpoints and one Sealevel chain."""
    return {
        "alpha": ChainMetadata(
            name="alpha",
            protocol=ProtocolType.ETHEREUM,
            chain_id=31337,
            rpc_urls=[EVM_URL, EVM_BACKUP_URL],
            explorer_url="https://explorer.alpha.test",
            addresses={"mailbox": "0x" + "ab" * 20},
        ),
        "beta": ChainMetadata(
            name="beta",
            protocol=ProtocolType.SEALEVEL,
            chain_id=1399811151,
            rpc_urls=[SOL_URL],
            native_token=NativeToken("SOL", decimals=9),
            explorer_url="https://explorer.beta.test?cluster=devnet",
            addresses={"mailbox": "E588QtVUvresuXq2KoNEwAmoifCzYGpRBdHByN9KQMbi"},
        ),
    }


@pytest.fixture
def rpc_stub() -> RpcStub:
    return RpcStub()


@pytest.fixture
def http_client(rpc_stub) -> httpx.AsyncClient:
    """HTTP client whose requests are answered by rpc_stub; never hits the network."""
    return httpx.AsyncClient(transport=httpx.MockTransport(rpc_stub))


@pytest.fixture
def provider(chain_metadata, http_client) -> MultiProtocolProvider:
    return MultiProtocolProvider(chain_metadata, http_client=http_client)
