from typing import Union

from eth_utils import decode_hex, encode_hex

def hex_encode(data: bytes) -> str:
    """Encode bytes as a 0x-prefixed lower-case hex string."""
    return encode_hex(data)

def hex_decode(s: Union[str, bytes]) -> bytes:
    if isinstance(s, bytes):
        s = s.decode("ascii")
    if not isinstance(s, str):
        raise ValueError(f"Expected a hex string, got {type(s).__name__}")
    try:
        return decode_hex(s.strip())
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid hex string: {e}") from e
