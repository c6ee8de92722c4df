"""
Call Encoder - Turn a human-readable function signature into calldata.

    encode("transfer(address,uint256)", ["0x...", 10**18])

The signature is parsed into a typed descriptor, the 4-byte selector is
taken from Keccak-256 of the canonical signature, and the arguments are
ABI-packed with eth-abi. The result is hex without the 0x prefix.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from eth_abi import encode as abi_encode
from eth_abi import is_encodable_type
from eth_abi.exceptions import EncodingError as AbiEncodingError
from eth_hash.auto import keccak


class EncodingError(ValueError):
    pass


class MalformedSignature(EncodingError):
    pass


class EncodingMismatch(EncodingError):
    pass


_IDENT = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_ELEMENTARY = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_ARRAY_SUFFIX = re.compile(r"(?:\[\d*\])*")

_TYPE_ALIASES = {
    "uint": "uint256",
    "int": "int256",
    "byte": "bytes1",
    "fixed": "fixed128x18",
    "ufixed": "ufixed128x18",
}

# Ignored after a parameter type
_PARAM_MODIFIERS = {"memory", "calldata", "storage", "indexed", "payable"}

# Ignored after the parameter list
_FUNCTION_MODIFIERS = {"external", "public", "view", "pure", "payable", "nonpayable"}


@dataclass(frozen=True)
class FunctionDescriptor:
    name: str
    inputs: tuple[str, ...]

    @property
    def signature(self) -> str:
        """Canonical signature, e.g. transfer(address,uint256)."""
        return f"{self.name}({','.join(self.inputs)})"

    @property
    def selector(self) -> bytes:
        # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
        return keccak(self.signature.encode("utf-8"))[:4]


# ============ Parsing ============


def parse_signature(signature: str) -> FunctionDescriptor:
    """
    Parse `name(type1, type2, ...)` into a FunctionDescriptor.

    Parameter names, data locations, mutability modifiers and a
    `returns (...)` clause are accepted and dropped.

    Raises:
        MalformedSignature: If the declaration cannot be parsed or names
                            a type eth-abi does not know
    """
    if not isinstance(signature, str) or not signature.strip():
        raise MalformedSignature("Function signature is empty")

    declaration = f"function {signature.strip()}"
    return _parse_declaration(declaration, signature)


def canonical_signature(signature: str) -> str:
    return parse_signature(signature).signature


def function_selector(signature: str) -> str:
    """Return the 0x-prefixed 4-byte selector for a signature."""
    return "0x" + parse_signature(signature).selector.hex()


def _parse_declaration(declaration: str, original: str) -> FunctionDescriptor:
    rest = declaration[len("function "):].lstrip()

    match = _IDENT.match(rest)
    if not match:
        raise MalformedSignature(f"Failed to parse ABI for function: {original}")
    name = match.group(0)
    rest = rest[match.end():].lstrip()

    if not rest.startswith("("):
        raise MalformedSignature(f"Failed to parse ABI for function: {original}")
    close = _matching_paren(rest, 0, original)

    _check_trailer(rest[close + 1:].strip(), original)

    inputs = _parse_components(rest[1:close], original)
    return FunctionDescriptor(name=name, inputs=inputs)


def _parse_components(source: str, original: str) -> tuple[str, ...]:
    if not source.strip():
        return ()
    return tuple(_parse_param(piece, original) for piece in _split_top_level(source, original))


def _parse_param(piece: str, original: str) -> str:
    text = piece.strip()
    if text.startswith("tuple("):
        text = text[len("tuple"):]

    if text.startswith("("):
        close = _matching_paren(text, 0, original)
        inner = _parse_components(text[1:close], original)
        base = "(" + ",".join(inner) + ")"
        rest = text[close + 1:]
    else:
        match = _ELEMENTARY.match(text)
        if not match:
            raise MalformedSignature(f"Invalid parameter '{piece.strip()}' in: {original}")
        base = _TYPE_ALIASES.get(match.group(0), match.group(0))
        rest = text[match.end():]

    suffix = _ARRAY_SUFFIX.match(rest).group(0)
    rest = rest[len(suffix):]

    words = rest.split()
    if words and words[0] in _PARAM_MODIFIERS:
        words = words[1:]
    if len(words) > 1 or (words and not _IDENT.fullmatch(words[0])):
        raise MalformedSignature(f"Invalid parameter '{piece.strip()}' in: {original}")

    type_str = base + suffix
    if not base.startswith("(") and not _is_known_type(type_str):
        raise MalformedSignature(f"Unknown ABI type '{type_str}' in: {original}")
    return type_str


def _is_known_type(type_str: str) -> bool:
    try:
        return bool(is_encodable_type(type_str))
    except Exception:
        return False


def _check_trailer(trailer: str, original: str) -> None:
    while trailer:
        if trailer.startswith("returns"):
            outputs = trailer[len("returns"):].lstrip()
            if not outputs.startswith("("):
                raise MalformedSignature(f"Invalid returns clause in: {original}")
            close = _matching_paren(outputs, 0, original)
            _parse_components(outputs[1:close], original)
            trailer = outputs[close + 1:].strip()
            continue

        word, _, trailer = trailer.partition(" ")
        if word not in _FUNCTION_MODIFIERS:
            raise MalformedSignature(f"Unexpected '{word}' in: {original}")
        trailer = trailer.strip()


def _matching_paren(text: str, start: int, original: str) -> int:
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    raise MalformedSignature(f"Unbalanced parentheses in: {original}")


def _split_top_level(source: str, original: str) -> list[str]:
    pieces: list[str] = []
    depth = 0
    current = ""
    for char in source:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "," and depth == 0:
            pieces.append(current)
            current = ""
        else:
            current += char
    pieces.append(current)

    if any(not piece.strip() for piece in pieces):
        raise MalformedSignature(f"Empty parameter in: {original}")
    return pieces


# ============ Encoding ============


def encode(signature: str, args: Optional[Sequence[Any]] = None) -> str:
    """
    ABI-encode a function call.

    Args:
        signature: Function declaration without the `function` keyword,
                   e.g. "transfer(address to, uint256 amount)"
        args: Arguments in declared order

    Returns:
        Hex encoded calldata (selector + packed args), no 0x prefix

    Raises:
        MalformedSignature: If the signature cannot be parsed
        EncodingMismatch: If args do not match the declared parameters
    """
    descriptor = parse_signature(signature)
    values = list(args) if args is not None else []

    if len(values) != len(descriptor.inputs):
        raise EncodingMismatch(
            f"{descriptor.signature} expects {len(descriptor.inputs)} "
            f"argument(s), got {len(values)}"
        )

    values = [_coerce_bytes(typ, value) for typ, value in zip(descriptor.inputs, values)]

    if descriptor.inputs:
        try:
            encoded_args = abi_encode(list(descriptor.inputs), values)
        except (AbiEncodingError, TypeError, ValueError, OverflowError) as exc:
            raise EncodingMismatch(
                f"Cannot encode arguments for {descriptor.signature}: {exc}"
            ) from exc
    else:
        encoded_args = b""

    return descriptor.selector.hex() + encoded_args.hex()


def _coerce_bytes(type_str: str, value: Any) -> Any:
    """Accept hex strings for bytes/bytesN parameters (and arrays of them)."""
    if type_str.startswith("("):
        return value

    if type_str.endswith("]"):
        element_type = type_str[: type_str.rindex("[")]
        if isinstance(value, (list, tuple)):
            return [_coerce_bytes(element_type, item) for item in value]
        return value

    if type_str.startswith("bytes") and isinstance(value, str):
        hex_part = value[2:] if value.lower().startswith("0x") else value
        try:
            return bytes.fromhex(hex_part)
        except ValueError as exc:
            raise EncodingMismatch(f"Invalid hex for {type_str}: {value!r}") from exc
    return value
