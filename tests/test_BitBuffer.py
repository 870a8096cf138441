import numpy as np
import pytest

from FF1_LS80 import FixedBitBuffer


def test_to_bytes_keeps_leading_zero_bytes(bit_backend):
    zeros = FixedBitBuffer.Zeros(80)
    ones = FixedBitBuffer.FromBytes(b"\xff" * 10)

    assert zeros.ToBytes() == b"\x00" * 10
    assert len(zeros.ToBytes()) == len(ones.ToBytes()) == 10


def test_partial_byte_is_padded_in_low_order_bits(bit_backend):
    buf = FixedBitBuffer.FromBytes(b"\xff\xff", 12)

    assert len(buf) == 12
    assert buf.ToBytes() == b"\xff\xf0"


def test_from_bytes_round_trip(bit_backend):
    data = bytes(range(1, 14))
    buf = FixedBitBuffer.FromBytes(data)

    assert len(buf) == 104
    assert buf.ToBytes() == data
    assert FixedBitBuffer.FromBytes(buf.ToBytes(), len(buf)) == buf


def test_from_bytes_rejects_wrong_size(bit_backend):
    with pytest.raises(ValueError):
        FixedBitBuffer.FromBytes(b"\x00\x00\x00", 12)


def test_bits_are_msb_first(bit_backend):
    buf = FixedBitBuffer.FromBytes(b"\xa5")

    assert list(buf.bits) == [1, 0, 1, 0, 0, 1, 0, 1]
    assert buf.Slice(0, 4).ToBytes() == b"\xa0"
    assert buf.Slice(4, 8).ToBytes() == b"\x50"


def test_slice_across_byte_boundary(bit_backend):
    buf = FixedBitBuffer.FromBytes(b"\x0f\xf0")

    middle = buf.Slice(4, 12)
    assert len(middle) == 8
    assert middle.ToBytes() == b"\xff"


def test_slice_never_trims_zero_bits():
    buf = FixedBitBuffer.FromBytes(b"\x00\x00\x01")

    assert len(buf.Slice(0, 16)) == 16
    assert buf.Slice(0, 16).ToBytes() == b"\x00\x00"
    assert buf.Slice(16, 16).ToBytes() == b""


def test_slice_out_of_range():
    buf = FixedBitBuffer.Zeros(16)

    with pytest.raises(IndexError):
        buf.Slice(0, 17)
    with pytest.raises(IndexError):
        buf.Slice(9, 8)


def test_xor_and_concat():
    a = FixedBitBuffer.FromBytes(b"\xf0\x0f")
    b = FixedBitBuffer.FromBytes(b"\xff\xff")

    assert a.Xor(b).ToBytes() == b"\x0f\xf0"
    assert a.Xor(a) == FixedBitBuffer.Zeros(16)
    # operands are left untouched
    assert a.ToBytes() == b"\xf0\x0f"

    joined = a.Slice(0, 4).Concat(b.Slice(0, 12))
    assert len(joined) == 16
    assert joined.ToBytes() == b"\xff\xff"


def test_xor_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        FixedBitBuffer.Zeros(8).Xor(FixedBitBuffer.Zeros(16))


def test_rejects_non_bits():
    with pytest.raises(ValueError):
        FixedBitBuffer(np.array([0, 1, 2], dtype=np.uint8))


def test_bits_view_is_read_only():
    buf = FixedBitBuffer.Zeros(8)

    with pytest.raises(ValueError):
        buf.bits[0] = 1
    assert buf == FixedBitBuffer.Zeros(8)


def test_hex_and_equality():
    buf = FixedBitBuffer.FromBytes(b"\x0a\xbc")

    assert buf.hex() == "0ABC"
    assert buf == FixedBitBuffer.FromBytes(b"\x0a\xbc")
    assert buf != FixedBitBuffer.FromBytes(b"\x0a\xbc\x00", 16 + 1)
