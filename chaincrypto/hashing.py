from Crypto.Hash import keccak

def keccak256(data: bytes) -> bytes:
    """
    Original Keccak-256 (0x01 padding), the hash the EVM calls keccak256.
    NOT hashlib.sha3_256: NIST SHA3 pads differently and yields other digests.
    """
    h = keccak.new(digest_bits=256)
    h.update(data)
    return h.digest()
