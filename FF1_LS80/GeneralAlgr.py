from .GLOBAL import *
from numba import jit
import numpy as np


@jit(nopython=True, cache=True)
def BitsToBytes(b: np.ndarray) -> np.ndarray:
    """
    Converts a bit array into a byte array using big-endian (MSB-first) bit packing.
    A trailing partial byte is zero-padded in its low-order bits.

    Args:
        b: A uint8 array of bits (0s or 1s) of any length.

    Returns:
        A uint8 array of exactly ceil(len(b) / 8) bytes.
    """
    num_bytes = (len(b) + 7) // 8
    byte_list = np.zeros(num_bytes, dtype=np.uint8)

    for i in range(len(b)):
        if b[i]:
            byte_list[i // 8] |= np.uint8(1 << (7 - (i % 8)))

    # Numba can't return `bytes`, the caller converts
    return byte_list


@jit(nopython=True, cache=True)
def BytesToBits(B: np.ndarray, length: int) -> np.ndarray:
    """
    Converts a byte array into a bit array using big-endian (MSB-first) bit unpacking.

    Args:
        B: A uint8 array holding exactly ceil(length / 8) bytes.
        length: The number of bits to unpack.

    Returns:
        A uint8 array of `length` bits.

    Raises:
        ValueError: If the byte array size does not match the bit length.
    """
    if len(B) != (length + 7) // 8:
        raise ValueError("Input byte array size does not match the bit length.")

    bit_list = np.zeros(length, dtype=np.uint8)
    for i in range(length):
        bit_list[i] = (B[i // 8] >> (7 - (i % 8))) & 1

    return bit_list


def PackBits(bits: np.ndarray) -> bytes:
    """Bit array -> bytes, through the configured backend."""
    if BIT_BACKEND == NUMBA_BITS:
        return bytes(BitsToBytes(bits))
    elif BIT_BACKEND == NUMPY_BITS:
        return np.packbits(bits, bitorder="big").tobytes()
    else:
        raise Exception("Please choose bit packing backend")


def UnpackBits(data: bytes, length: int) -> np.ndarray:
    """bytes -> bit array of `length` bits, through the configured backend."""
    B = np.frombuffer(bytes(data), dtype=np.uint8)
    if BIT_BACKEND == NUMBA_BITS:
        return BytesToBits(B, length)
    elif BIT_BACKEND == NUMPY_BITS:
        if len(B) != (length + 7) // 8:
            raise ValueError("Input byte array size does not match the bit length.")
        return np.unpackbits(B, count=length, bitorder="big")
    else:
        raise Exception("Please choose bit packing backend")


def split(n: int) -> int:
    """
    split(n) function required by FFX.
    n - 80 unbalances the network while keeping the remainder byte-aligned.
    """
    return n - SPLIT_OFFSET


def rnds(n: int) -> int:
    """
    rnds(n) function required by FFX: ceil(4n / split(n)).
    The Addendum's fixed round count is not used.
    """
    return -(-4 * n // split(n))


def hexToBytes(s: str) -> bytes:
    """
    Parses a hexadecimal string into bytes.

    Raises:
        ValueError: If the string has an odd length or a non-hex digit.
    """
    return bytes.fromhex(s)


def bytesToHex(b: bytes) -> str:
    """Renders bytes as upper-case hexadecimal."""
    return bytes(b).hex().upper()
