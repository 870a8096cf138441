import numpy as np
import pytest

from FF1_LS80.GeneralAlgr import BitsToBytes, BytesToBits, hexToBytes, bytesToHex


def test_bits_to_bytes_msb_first():
    bits = np.array([1, 0, 0, 0, 0, 0, 0, 1, 1], dtype=np.uint8)

    assert bytes(BitsToBytes(bits)) == b"\x81\x80"


def test_bytes_to_bits_takes_requested_length():
    B = np.frombuffer(b"\x81\xff", dtype=np.uint8)

    assert list(BytesToBits(B, 9)) == [1, 0, 0, 0, 0, 0, 0, 1, 1]
    with pytest.raises(ValueError):
        BytesToBits(B, 17)


def test_hex_helpers():
    assert hexToBytes("0102030405060708090A0B0C13") == bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 0x13])
    assert hexToBytes("ff") == b"\xff"
    assert bytesToHex(b"\x0a\xbc\x57") == "0ABC57"
    assert bytesToHex(b"") == ""

    with pytest.raises(ValueError):
        hexToBytes("ABC")
    with pytest.raises(ValueError):
        hexToBytes("GG")
