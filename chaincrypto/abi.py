"""
Static contract ABI encoding on top of eth-abi.

Only head-only types are allowed, so encode_static(...) of n values is
always 32 * n bytes and matches Solidity's abi.encode for the same types.
eth-abi's own exceptions are surfaced as ValueError.
"""
from __future__ import annotations

from typing import Any, Sequence

from eth_abi import encode
from eth_abi.exceptions import ABITypeError, EncodingError, ParseError
from eth_abi.grammar import normalize, parse

def _check_static(typ: str) -> str:
    try:
        parsed = parse(normalize(typ))
        parsed.validate()
    except (ABITypeError, ParseError) as e:
        raise ValueError(f"Invalid ABI type {typ!r}: {e}") from e
    if parsed.is_dynamic:
        raise ValueError(f"Dynamic ABI type not supported: {typ!r}")
    return parsed.to_type_str()

def encode_static(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """Equivalent of abi.encode(...) restricted to static types."""
    if len(types) != len(values):
        raise ValueError(f"Got {len(types)} types but {len(values)} values")
    normalized = [_check_static(t) for t in types]
    try:
        return encode(normalized, list(values))
    except EncodingError as e:
        raise ValueError(str(e)) from e
