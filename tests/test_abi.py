import pytest

from chaincrypto.abi import encode_static

ACCOUNT = "0xD3776b414F5Ec37a1dd2FDD49BBb502b60A516E3"

def test_encode_static_layout():
    nonce = b"\x11" * 32
    raw = bytes.fromhex(ACCOUNT[2:])
    out = encode_static(["address", "uint8", "bytes32"], [raw, 1, nonce])
    assert len(out) == 96
    assert out[0:32] == bytes(12) + raw
    assert out[32:64] == bytes(31) + b"\x01"
    assert out[64:96] == nonce

def test_encode_static_plain_uint_is_256_bits():
    assert encode_static(["uint"], [1 << 255]) == b"\x80" + bytes(31)

@pytest.mark.parametrize("value", [256, -1, 1.9, True, "1"])
def test_uint8_rejects_bad_values(value):
    with pytest.raises(ValueError):
        encode_static(["uint8"], [value])

@pytest.mark.parametrize("typ", ["string", "bytes", "uint8[]", "uint7", "notatype"])
def test_encode_static_rejects_dynamic_or_invalid_types(typ):
    with pytest.raises(ValueError):
        encode_static([typ], [b""])

def test_encode_static_count_mismatch():
    with pytest.raises(ValueError):
        encode_static(["address", "uint8"], [ACCOUNT])
