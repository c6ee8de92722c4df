"""Tests for the local wallet collaborator and JSON-RPC helper."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from eth_account import Account

from augury.auspex.rpc import RpcError, get_chain_id, rpc_call
from augury.auspex.wallet import LocalWalletProvider, StaticWalletProvider, load_private_key

PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"


def _rpc_client(result=None, error=None) -> tuple[httpx.Client, list[dict]]:
    calls: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        calls.append(payload)
        body = {"jsonrpc": "2.0", "id": payload["id"]}
        if error is not None:
            body["error"] = error
        else:
            body["result"] = result
        return httpx.Response(200, json=body)

    return httpx.Client(transport=httpx.MockTransport(handler)), calls


class TestRpc:
    def test_chain_id(self) -> None:
        client, calls = _rpc_client(result="0xaa36a7")
        assert get_chain_id(rpc_url="http://node", http_client=client) == 11155111
        assert calls[0]["method"] == "eth_chainId"
        assert calls[0]["params"] == []

    def test_rpc_error(self) -> None:
        client, _ = _rpc_client(error={"code": -32601, "message": "method not found"})
        with pytest.raises(RpcError, match="method not found"):
            rpc_call("eth_chainId", [], rpc_url="http://node", http_client=client)

    def test_http_status_error(self) -> None:
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(502)))
        with pytest.raises(httpx.HTTPStatusError):
            rpc_call("eth_chainId", [], rpc_url="http://node", http_client=client)


class TestLocalWalletProvider:
    def test_address_from_key(self) -> None:
        client, _ = _rpc_client(result="0x1")
        wallet = LocalWalletProvider(private_key=PRIVATE_KEY, rpc_url="http://node", http_client=client)
        assert wallet.get_address() == Account.from_key(PRIVATE_KEY).address

    def test_key_loaded_only_for_address(self, tmp_path: Path) -> None:
        client, _ = _rpc_client(result="0xaa36a7")
        with patch("augury.config.AUGURY_ENV", tmp_path / ".env"):
            with patch.dict(os.environ, {}, clear=True):
                wallet = LocalWalletProvider(rpc_url="http://node", http_client=client)
                assert wallet.get_network().chain_id == 11155111
                with pytest.raises(ValueError, match="PRIVATE_KEY not found"):
                    wallet.get_address()

    def test_network_from_node(self) -> None:
        client, _ = _rpc_client(result="0x89")
        wallet = LocalWalletProvider(private_key=PRIVATE_KEY, rpc_url="http://node", http_client=client)
        network = wallet.get_network()
        assert network.chain_id == 137
        assert network.network_id == "137"


class TestLoadPrivateKey:
    def test_adds_prefix(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"PRIVATE_KEY": PRIVATE_KEY[2:]}):
            assert load_private_key(tmp_path / ".env") == PRIVATE_KEY

    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text(f"PRIVATE_KEY={PRIVATE_KEY}\n", encoding="utf-8")
        with patch.dict(os.environ, {}, clear=True):
            assert load_private_key(env_path) == PRIVATE_KEY

    def test_missing(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="PRIVATE_KEY not found"):
                load_private_key(tmp_path / ".env")


def test_static_wallet() -> None:
    wallet = StaticWalletProvider("0x" + "11" * 20, 10)
    assert wallet.get_address() == "0x" + "11" * 20
    assert wallet.get_network().chain_id == 10
