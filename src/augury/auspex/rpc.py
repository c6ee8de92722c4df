"""
Minimal JSON-RPC client used to ask a node which chain it serves.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

# Default RPC endpoint (Ethereum Sepolia)
DEFAULT_RPC_URL = "https://ethereum-sepolia-rpc.publicnode.com"
DEFAULT_TIMEOUT = 30


class RpcError(RuntimeError):
    pass


def get_rpc_url() -> str:
    """Get the RPC URL from environment or default."""
    return os.environ.get("AUGURY_RPC_URL", DEFAULT_RPC_URL)


def rpc_call(
    method: str,
    params: list,
    rpc_url: Optional[str] = None,
    http_client: Optional[httpx.Client] = None,
) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_chainId")
        params: RPC parameters
        rpc_url: RPC endpoint URL
        http_client: Client to reuse; a short-lived one is opened otherwise

    Returns:
        Result field from the RPC response

    Raises:
        RpcError: If the node answers with an error member
        httpx.HTTPError: On transport failure or non-2xx status
    """
    url = rpc_url or get_rpc_url()
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }
    logger.debug("JSON-RPC %s -> %s", method, url)

    if http_client is not None:
        response = http_client.post(url, json=payload)
        response.raise_for_status()
        data = response.json()
    else:
        with httpx.Client(timeout=DEFAULT_TIMEOUT) as client:
            response = client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()

    if "error" in data:
        raise RpcError(f"RPC error: {data['error']}")

    return data.get("result")


def get_chain_id(rpc_url: Optional[str] = None, http_client: Optional[httpx.Client] = None) -> int:
    result = rpc_call("eth_chainId", [], rpc_url=rpc_url, http_client=http_client)
    return int(result, 16)
