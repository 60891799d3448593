from __future__ import annotations

import hmac
import logging
import os
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union

from chaincrypto.abi import encode_static
from chaincrypto.address import parse_address
from chaincrypto.encoding import hex_decode, hex_encode
from chaincrypto.hashing import keccak256

logger = logging.getLogger(__name__)

NONCE_LEN = 32

# Must match the reveal function's abi.encode(msg.sender, choice, nonce)
COMMIT_TYPES = ("address", "uint8", "bytes32")

class Choice(IntEnum):
    HEADS = 0
    TAILS = 1

class EntropyUnavailableError(RuntimeError):
    """The OS could not supply a full nonce. Fatal: nothing may be emitted."""

@dataclass(frozen=True)
class Commitment:
    commit_hash: bytes
    account_id: bytes
    choice: int
    nonce: bytes = field(repr=False)  # secret until reveal

def new_nonce(n: int = NONCE_LEN) -> bytes:
    try:
        nonce = os.urandom(n)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailableError(f"Could not read {n} random bytes: {e}") from e
    if len(nonce) != n:
        raise EntropyUnavailableError(f"Entropy source returned {len(nonce)} of {n} bytes")
    return nonce

def encode_commitment(account_id: Union[str, bytes], choice: int, nonce: bytes) -> bytes:
    """abi.encode(address, uint8, bytes32): three 32-byte slots, 96 bytes."""
    # eth-abi would right-pad a short bytes32 value
    if not isinstance(nonce, (bytes, bytearray)) or len(nonce) != NONCE_LEN:
        raise ValueError(f"Nonce must be {NONCE_LEN} bytes")
    return encode_static(COMMIT_TYPES, [parse_address(account_id), choice, nonce])

def commit_hash(account_id: Union[str, bytes], choice: int, nonce: bytes) -> bytes:
    encoded = encode_commitment(account_id, choice, nonce)
    logger.debug("hashing %d-byte commitment encoding", len(encoded))
    return keccak256(encoded)

def make_commitment(
    account_id: Union[str, bytes],
    choice: int,
    nonce: Optional[bytes] = None,
) -> Commitment:
    """
    Build a commitment for (account_id, choice).
    A fresh nonce is drawn unless one is passed in; passing one is only
    meant for reproducing known digests.
    """
    address = parse_address(account_id)
    # validate before touching the entropy source
    encode_static(("uint8",), [choice])
    if nonce is None:
        nonce = new_nonce()
    return Commitment(
        commit_hash=commit_hash(address, choice, nonce),
        account_id=address,
        choice=int(choice),
        nonce=nonce,
    )

def verify_reveal(
    expected_hash: Union[str, bytes],
    account_id: Union[str, bytes],
    choice: int,
    nonce: Union[str, bytes],
) -> bool:
    """
    Recompute the digest the contract will compute on reveal.
    A malformed expected hash is simply not a match.
    """
    if isinstance(nonce, str):
        nonce = hex_decode(nonce)
    try:
        expected = expected_hash if isinstance(expected_hash, bytes) else hex_decode(expected_hash)
    except ValueError:
        return False
    actual = commit_hash(account_id, choice, nonce)
    return hmac.compare_digest(actual, expected)

def format_commitment(c: Commitment) -> str:
    return (
        f"commit-hash = {hex_encode(c.commit_hash)}\n"
        f"choice={c.choice}\n"
        f"nonce = {hex_encode(c.nonce)}"
    )
