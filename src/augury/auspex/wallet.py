"""
Wallet collaborator for simulations.

A simulation needs two answers from the wallet: who is sending, and on
which chain. Keys are read from PRIVATE_KEY, falling back to
~/.augury/.env.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Protocol

import httpx
from eth_account import Account
from eth_account.signers.local import LocalAccount

from ..config import AUGURY_ENV, load_env
from ..networks import Network
from .rpc import get_chain_id, get_rpc_url


class WalletProvider(Protocol):
    def get_address(self) -> str:
        ...

    def get_network(self) -> Network:
        ...


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Load private key from .env file or environment.

    Args:
        env_path: Path to .env file (default: ~/.augury/.env)

    Returns:
        0x-prefixed hex private key

    Raises:
        ValueError: If PRIVATE_KEY is not set anywhere
    """
    load_env(env_path)

    private_key = os.environ.get("PRIVATE_KEY")
    if not private_key:
        raise ValueError(f"PRIVATE_KEY not found. Set it in the environment or in {env_path or AUGURY_ENV}")

    # Ensure 0x prefix
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key


def get_account(private_key: Optional[str] = None) -> LocalAccount:
    if private_key is None:
        private_key = load_private_key()
    return Account.from_key(private_key)


class LocalWalletProvider:
    """
    WalletProvider backed by a local key and a JSON-RPC endpoint.

    The address comes from the key, which is loaded on first use; the
    network is asked of the node on every call, so a node switch is
    picked up without a new provider.
    """

    def __init__(
        self,
        private_key: Optional[str] = None,
        rpc_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._private_key = private_key
        self._account: Optional[LocalAccount] = None
        self.rpc_url = rpc_url or get_rpc_url()
        self._http_client = http_client

    def get_address(self) -> str:
        if self._account is None:
            self._account = get_account(self._private_key)
        return self._account.address

    def get_network(self) -> Network:
        chain_id = get_chain_id(rpc_url=self.rpc_url, http_client=self._http_client)
        return Network(chain_id=chain_id, network_id=str(chain_id))


class StaticWalletProvider:
    """WalletProvider with a fixed address and chain, for dry runs without a node."""

    def __init__(self, address: str, chain_id: int) -> None:
        self.address = address
        self.chain_id = chain_id

    def get_address(self) -> str:
        return self.address

    def get_network(self) -> Network:
        return Network(chain_id=self.chain_id, network_id=str(self.chain_id))
