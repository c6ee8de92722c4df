"""
Rite Encode - Print calldata for a function call.
"""

from __future__ import annotations

import json
import sys

import click

from ..glyph.encoder import EncodingError, canonical_signature, encode as encode_call, function_selector


@click.command()
@click.argument("signature")
@click.option("--args", "args_json", default="[]", help="Function args as JSON array")
@click.option("--prefix/--no-prefix", default=False, help="Prepend 0x to the output")
@click.option("--selector", "selector_only", is_flag=True, help="Only print the 4-byte selector")
def encode(signature: str, args_json: str, prefix: bool, selector_only: bool) -> None:
    """Encode SIGNATURE with --args into calldata hex."""
    try:
        if selector_only:
            click.echo(f"{canonical_signature(signature)}  {function_selector(signature)}")
            return

        args = json.loads(args_json)
        if not isinstance(args, list):
            raise ValueError("Args must be a JSON array")
        calldata = encode_call(signature, args)
    except EncodingError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    except (json.JSONDecodeError, ValueError) as exc:
        click.secho(f"ERROR: Invalid args: {exc}", fg="red")
        sys.exit(1)

    click.echo(("0x" if prefix else "") + calldata)
