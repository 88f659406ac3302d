"""Deployed contract code as disassembler input, fetched over JSON-RPC."""

from __future__ import annotations

import functools
from typing import Any

import requests

BLOCK_TAGS = ("latest", "earliest", "pending", "safe", "finalized")
TIMEOUT_SECONDS = 10


class RPCError(Exception):
    """Raised when an RPC call fails."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.code = code


def block_id(value: str) -> str:
    """Normalize a block tag, decimal block number or 0x quantity.

    Raises ValueError for anything else.
    """
    value = value.strip().lower()
    if value in BLOCK_TAGS:
        return value
    number = int(value, 16) if value.startswith("0x") else int(value, 10)
    if number < 0:
        raise ValueError(f"block number must be non-negative, got {number}")
    return hex(number)


def _call(rpc_url: str, method: str, params: list[str]) -> Any:
    payload = {"jsonrpc": "2.0", "method": method, "params": params, "id": 1}

    try:
        resp = requests.post(rpc_url, json=payload, timeout=TIMEOUT_SECONDS)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise RPCError(f"{method} request failed: {e}") from e

    try:
        data = resp.json()
    except ValueError as e:
        raise RPCError(f"{method} returned invalid JSON: {e}") from e

    if "error" in data:
        err = data["error"]
        raise RPCError(
            f"{method} error: {err.get('message', 'unknown')}",
            code=err.get("code"),
        )
    return data.get("result")


@functools.lru_cache(maxsize=256)
def get_code(address: str, rpc_url: str, block: str = "latest") -> str:
    """Return the code deployed at `address` as bare hex, ready to decode.

    The 0x prefix of the JSON-RPC quantity is removed, so an account
    without code (an EOA) yields "".
    """
    result = _call(rpc_url, "eth_getCode", [address, block])
    if not isinstance(result, str) or not result.startswith("0x"):
        raise RPCError(f"eth_getCode returned malformed result: {result!r}")
    return result[2:]


def clear_cache() -> None:
    get_code.cache_clear()
