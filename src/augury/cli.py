"""
Augury CLI

Preview on-chain transactions through the Tenderly simulation API
before they are signed or broadcast.

Commands:
  simulate  - Simulate a transaction and print the report
  encode    - Encode a function call into calldata
  networks  - List networks the simulation action supports
  whoami    - Show current wallet address
  info      - Show configuration status
"""

from __future__ import annotations

import logging
import os
import sys

import click

from .auspex.wallet import get_account
from .config import (
    ENV_ACCESS_KEY,
    ENV_API_URL,
    ENV_PROJECT_ID,
    ENV_SLUG,
    DEFAULT_API_URL,
    load_env,
    mask_secret,
)
from .networks import SUPPORTED_CHAIN_IDS, network_name


# ============ Constants ============

VERSION = "0.3.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◇ ─────────────────────────────── ◇", fg="magenta")
    click.echo()
    click.echo(border)
    click.echo(
        click.style("        A U G U R Y", fg="bright_white", bold=True)
        + click.style(f"   v{VERSION}", dim=True)
    )
    click.secho("     ─── transaction foresight ───", fg="magenta")
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="augury")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Augury — simulate transactions before you send them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Subcommand envvar options are read after this runs
    load_env()

    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .rite.simulate import simulate
from .rite.encode import encode

cli.add_command(simulate)
cli.add_command(encode)


@cli.command()
def networks() -> None:
    """List networks supported by the simulation action."""
    for chain_id in sorted(SUPPORTED_CHAIN_IDS):
        click.echo(f"  {chain_id:>9}  {network_name(chain_id)}")


@cli.command()
def whoami() -> None:
    """Show current wallet identity."""
    try:
        address = get_account().address
        click.echo(f"Address: {address}")
    except ValueError:
        click.echo("No wallet found.")
        click.echo("Set PRIVATE_KEY in the environment or in ~/.augury/.env.")
        sys.exit(1)


@cli.command()
def info() -> None:
    """Show configuration status."""
    _print_banner()

    click.secho("  Tenderly ───────────────────────────", fg="magenta")
    for label, var in (("Account:", ENV_SLUG), ("Project:", ENV_PROJECT_ID)):
        value = os.environ.get(var)
        click.echo(
            click.style(f"  {label:<12} ", dim=True)
            + (click.style(value, fg="bright_white") if value else click.style("not set", fg="yellow"))
        )

    access_key = os.environ.get(ENV_ACCESS_KEY)
    click.echo(
        click.style("  Access key:  ", dim=True)
        + (click.style(mask_secret(access_key), fg="bright_white") if access_key else click.style("not set", fg="yellow"))
    )
    click.echo(click.style("  API:         ", dim=True) + (os.environ.get(ENV_API_URL) or DEFAULT_API_URL))
    click.echo()

    click.secho("  Wallet ─────────────────────────────", fg="magenta")
    try:
        address = get_account().address
        click.echo(click.style("  Address:     ", dim=True) + click.style(address, fg="bright_white"))
    except ValueError:
        click.echo(click.style("  Address:     ", dim=True) + click.style("not configured", fg="yellow"))
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """Augury CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: old Python or non-tty
    cli()


if __name__ == "__main__":
    main()
