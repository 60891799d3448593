from typing import Union

from eth_utils import encode_hex
from eth_utils import is_checksum_address as _is_checksum_address
from eth_utils import to_checksum_address as _to_checksum_address

from chaincrypto.encoding import hex_decode

ADDRESS_LEN = 20

def parse_address(value: Union[str, bytes]) -> bytes:
    """
    Return the 20 raw bytes of an account address.
    Accepts raw bytes or hex with or without 0x, any letter case.
    The checksum is not enforced; the ABI encoder is handed raw bytes.
    """
    raw = value if isinstance(value, bytes) else hex_decode(value)
    if len(raw) != ADDRESS_LEN:
        raise ValueError(f"Address must be {ADDRESS_LEN} bytes, got {len(raw)}")
    return raw

def to_checksum_address(value: Union[str, bytes]) -> str:
    """EIP-55 mixed-case rendering."""
    return _to_checksum_address(encode_hex(parse_address(value)))

def is_checksum_address(value: str) -> bool:
    return _is_checksum_address(value)
