"""JSON-RPC transport with endpoint failover."""

import logging
from typing import Any

import httpx

from .types import RpcError


class JsonRpcClient:
    """
    JSON-RPC 2.0 client for one chain.

    Requests go to the current endpoint; on failure the client moves on to the
    next URL in `rpc_urls` and remembers it for later calls. One pass is made
    over the endpoint list before giving up.
    """

    def __init__(
        self,
        chain: str,
        rpc_urls: list[str],
        http_client: httpx.AsyncClient,
        logger: logging.Logger,
    ) -> None:
        if not rpc_urls:
            raise ValueError(f"No RPC URLs for {chain}")
        self.chain = chain
        self._rpc_urls = list(rpc_urls)
        self._http = http_client
        self._logger = logger
        self._current_rpc_index = 0
        self._request_id = 0

    @property
    def current_url(self) -> str:
        """Get the endpoint the next request will use."""
        return self._rpc_urls[self._current_rpc_index]

    async def call(self, method: str, params: list[Any] | None = None) -> Any:
        """Make an RPC call with failover."""
        errors: list[str] = []

        for _ in range(len(self._rpc_urls)):
            rpc_url = self.current_url
            self._request_id += 1

            try:
                response = await self._http.post(
                    rpc_url,
                    json={
                        "jsonrpc": "2.0",
                        "method": method,
                        "params": params or [],
                        "id": self._request_id,
                    },
                )
                response.raise_for_status()
                data = response.json()

                if not isinstance(data, dict):
                    raise ValueError(f"Malformed RPC response: {data!r}")

                if "error" in data:
                    error = data["error"]
                    if isinstance(error, dict):
                        raise ValueError(error.get("message", "RPC error"))
                    raise ValueError(str(error))

                return data["result"]

            except (httpx.HTTPError, ValueError, KeyError) as e:
                errors.append(f"{rpc_url}: {e}")
                self._logger.warning(
                    "RPC %s failed on %s (%s): %s", method, self.chain, rpc_url, e
                )
                self._current_rpc_index = (
                    self._current_rpc_index + 1
                ) % len(self._rpc_urls)

        raise RpcError(
            f"All RPC endpoints failed for {self.chain}: {', '.join(errors)}",
            errors,
        )
