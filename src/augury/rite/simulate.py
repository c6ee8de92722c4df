"""
Rite Simulate - Preview a transaction before it is broadcast.

Builds a transaction intent from the options, resolves sender and
network from the local wallet (or from --from/--chain-id), and prints
the Tenderly simulation report.
"""

from __future__ import annotations

import json
import os
import sys
from typing import Optional

import click

from ..auspex.wallet import LocalWalletProvider, StaticWalletProvider, WalletProvider, get_account
from ..config import DEFAULT_API_URL, ENV_API_URL, ConfigError, ProviderConfig
from ..omen.provider import TenderlySimulationProvider
from ..omen.render import is_error_report


@click.command()
@click.option("--to", "to", required=True, help="Destination address")
@click.option("--value", default=None, help="Native token amount in wei")
@click.option("--data", default=None, help="Hex calldata")
@click.option("--from", "from_address", default=None, help="Sender address (default: wallet)")
@click.option("--gas", default=None, type=int, help="Gas limit")
@click.option("--gas-price", default=None, help="Gas price in wei")
@click.option("--function", "signature", default=None, help="Function signature, e.g. 'transfer(address,uint256)'")
@click.option("--args", "args_json", default="[]", help="Function args as JSON array")
@click.option("--chain-id", default=None, type=int, help="Chain id (skips the RPC lookup)")
@click.option("--rpc-url", envvar="AUGURY_RPC_URL", default=None, help="JSON-RPC URL used to read the chain id")
@click.option("--slug", envvar="TENDERLY_ACCOUNT_SLUG", default=None, help="Tenderly account slug")
@click.option("--project", envvar="TENDERLY_PROJECT_ID", default=None, help="Tenderly project id")
@click.option("--access-key", envvar="TENDERLY_ACCESS_KEY", default=None, help="Tenderly access key")
def simulate(
    to: str,
    value: Optional[str],
    data: Optional[str],
    from_address: Optional[str],
    gas: Optional[int],
    gas_price: Optional[str],
    signature: Optional[str],
    args_json: str,
    chain_id: Optional[int],
    rpc_url: Optional[str],
    slug: Optional[str],
    project: Optional[str],
    access_key: Optional[str],
) -> None:
    """
    Simulate a transaction with Tenderly.

    Nothing is signed or broadcast.
    """
    if signature and data:
        click.secho("ERROR: --data and --function are mutually exclusive", fg="red")
        sys.exit(1)

    try:
        config = _resolve_config(slug, project, access_key)
    except ConfigError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    try:
        wallet = _resolve_wallet(from_address, chain_id, rpc_url)
    except (ValueError, FileNotFoundError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    provider = TenderlySimulationProvider(config)

    if signature:
        try:
            args = json.loads(args_json)
            if not isinstance(args, list):
                raise ValueError("Args must be a JSON array")
        except (json.JSONDecodeError, ValueError) as exc:
            click.secho(f"ERROR: Invalid args: {exc}", fg="red")
            sys.exit(1)
        report = provider.simulate_contract_call(
            wallet,
            to=to,
            signature=signature,
            args=args,
            value=value,
            from_address=from_address,
            gas=gas,
            gas_price=gas_price,
        )
    else:
        fields = {
            "to": to,
            "value": value,
            "data": data,
            "from": from_address,
            "gas": gas,
            "gasPrice": gas_price,
        }
        report = provider.simulate_transaction(
            wallet, {key: item for key, item in fields.items() if item is not None}
        )

    if is_error_report(report):
        click.secho(report, fg="red")
        sys.exit(1)
    click.echo(report)


def _resolve_config(slug: Optional[str], project: Optional[str], access_key: Optional[str]) -> ProviderConfig:
    # flags and TENDERLY_* variables (including ~/.augury/.env) arrive through click envvars
    return ProviderConfig(
        slug=slug or "",
        access_key=access_key or "",
        project_id=project or "",
        api_url=os.environ.get(ENV_API_URL) or DEFAULT_API_URL,
    )


def _resolve_wallet(
    from_address: Optional[str], chain_id: Optional[int], rpc_url: Optional[str]
) -> WalletProvider:
    if chain_id is not None:
        address = from_address or get_account().address
        return StaticWalletProvider(address, chain_id)
    return LocalWalletProvider(rpc_url=rpc_url)
