from __future__ import annotations

"""
Async HTTP JSON-RPC 2.0 client (httpx).

- One shared `httpx.AsyncClient`, opened lazily and closed explicitly.
- Single attempt per request: no retries, no backoff. Timeouts are enforced by
  httpx using `timeout`.
- JSON-RPC error objects, transport failures and malformed responses all raise
  `RpcError` so callers deal with one shape.

Example:
    async with AsyncRpcClient("http://127.0.0.1:8545") as rpc:
        chain_id = await rpc.request("eth_chainId")
"""

import json
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Union

import httpx

from ..errors import JsonRpcCode, RpcError, from_jsonrpc_error
from ..version import default_user_agent

JSON = Union[dict, list, str, int, float, bool, None]
Params = Union[Sequence[Any], Mapping[str, Any], None]


@dataclass
class AsyncRpcClient:
    """Asynchronous JSON-RPC 2.0 client over HTTP."""

    url: str
    timeout: float = 30.0
    headers: Optional[Mapping[str, str]] = None
    _id_counter: Iterator[int] = field(default_factory=lambda: count(start=1))
    _client: Optional[httpx.AsyncClient] = field(init=False, default=None)

    # --- lifecycle -------------------------------------------------------

    def _merged_headers(self) -> Dict[str, str]:
        merged: Dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": default_user_agent(),
        }
        if self.headers:
            merged.update(dict(self.headers))
        return merged

    async def start(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, headers=self._merged_headers())

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncRpcClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.close()

    # --- public API ------------------------------------------------------

    async def request(self, method: str, params: Params = None, *, id: Optional[Union[int, str]] = None) -> JSON:
        """Perform a single JSON-RPC request and return `result` or raise RpcError."""
        payload = self._make_payload(method, params, id)
        return await self._send_once(method, payload)

    # --- internals -------------------------------------------------------

    def _make_payload(self, method: str, params: Params, id: Optional[Union[int, str]] = None) -> Dict[str, Any]:
        if id is None:
            id = next(self._id_counter)
        if params is None:
            params = []
        elif isinstance(params, Mapping):
            params = dict(params)
        elif isinstance(params, Sequence) and not isinstance(params, (str, bytes, bytearray)):
            params = list(params)
        else:
            # Coerce single param into positional list
            params = [params]  # type: ignore[list-item]
        return {"jsonrpc": "2.0", "id": id, "method": method, "params": params}

    async def _send_once(self, method: str, payload: Dict[str, Any]) -> JSON:
        if self._client is None:
            await self.start()
        assert self._client is not None  # for type-checkers

        body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        try:
            r = await self._client.post(self.url, content=body)
        except httpx.HTTPError as e:
            raise RpcError(
                method=method,
                code=JsonRpcCode.TRANSPORT_ERROR,
                message="Network error",
                data=str(e),
                request_id=payload.get("id"),
            ) from e

        try:
            resp = r.json()
        except ValueError as e:
            raise RpcError(
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                message="Non-JSON response from RPC",
                data=f"HTTP {r.status_code}: {r.text[:256]}",
                request_id=payload.get("id"),
                http_status=r.status_code,
            ) from e

        if not isinstance(resp, dict):
            raise RpcError(
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                message="Invalid JSON-RPC response type",
                data=type(resp).__name__,
                http_status=r.status_code,
            )
        if resp.get("error") is not None:
            raise from_jsonrpc_error(
                resp["error"] if isinstance(resp["error"], dict) else {"message": str(resp["error"])},
                method=method,
                request_id=resp.get("id"),
                http_status=r.status_code,
            )
        if "result" not in resp:
            raise RpcError(
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                message="Malformed JSON-RPC response",
                data=resp,
                http_status=r.status_code,
            )
        return resp["result"]


__all__ = ["AsyncRpcClient", "JSON", "Params"]
