"""
Glyph - Contract call encoding for Augury.

Turns human-readable function signatures plus arguments into the
calldata a contract-call transaction carries in its data field.

Uses eth-abi for argument packing and eth-hash for the selector.
"""

from .encoder import (
    EncodingError,
    EncodingMismatch,
    FunctionDescriptor,
    MalformedSignature,
    canonical_signature,
    encode,
    function_selector,
    parse_signature,
)

__all__ = [
    "EncodingError",
    "EncodingMismatch",
    "FunctionDescriptor",
    "MalformedSignature",
    "canonical_signature",
    "encode",
    "function_selector",
    "parse_signature",
]
