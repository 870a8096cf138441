import numpy as np
from .GeneralAlgr import PackBits, UnpackBits


class FixedBitBuffer:
    """
    A sequence of exactly L bits, L fixed at construction.

    Bit 0 is the most significant bit of the first byte. Conversion to bytes
    always yields ceil(L / 8) bytes whatever the value, so leading zero bits
    are never trimmed.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: np.ndarray):
        bits = np.asarray(bits, dtype=np.uint8)
        if bits.ndim != 1:
            raise ValueError("Bit array must be one-dimensional.")
        if np.any(bits > 1):
            raise ValueError("Bit array may only hold 0s and 1s.")
        self._bits = bits.copy()

    @classmethod
    def Zeros(cls, length: int) -> "FixedBitBuffer":
        if length < 0:
            raise ValueError("Bit length must not be negative.")
        return cls(np.zeros(length, dtype=np.uint8))

    @classmethod
    def FromBytes(cls, data: bytes, length: int = None) -> "FixedBitBuffer":
        """
        Inverse of ToBytes().

        Args:
            data: Exactly ceil(length / 8) bytes, MSB-first.
            length: Bit length; defaults to 8 * len(data).

        Raises:
            ValueError: If the byte count does not match the bit length.
        """
        if length is None:
            length = 8 * len(data)
        if length < 0:
            raise ValueError("Bit length must not be negative.")
        return cls(UnpackBits(data, length))

    def ToBytes(self) -> bytes:
        return PackBits(self._bits)

    def Slice(self, lo: int, hi: int) -> "FixedBitBuffer":
        """Bits [lo, hi) as a new buffer of hi - lo bits."""
        if not (0 <= lo <= hi <= len(self)):
            raise IndexError(f"Bit range [{lo}, {hi}) outside buffer of {len(self)} bits.")
        return FixedBitBuffer(self._bits[lo:hi])

    def Xor(self, other: "FixedBitBuffer") -> "FixedBitBuffer":
        if len(self) != len(other):
            raise ValueError(f"XOR of unequal lengths ({len(self)} vs {len(other)}).")
        return FixedBitBuffer(np.bitwise_xor(self._bits, other._bits))

    def Concat(self, other: "FixedBitBuffer") -> "FixedBitBuffer":
        return FixedBitBuffer(np.concatenate((self._bits, other._bits)))

    @property
    def bits(self) -> np.ndarray:
        """Read-only view of the underlying bit array."""
        view = self._bits.view()
        view.flags.writeable = False
        return view

    def hex(self) -> str:
        return self.ToBytes().hex().upper()

    def __len__(self):
        return len(self._bits)

    def __eq__(self, other):
        if not isinstance(other, FixedBitBuffer):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._bits, other._bits))

    def __hash__(self):
        return hash((len(self), self.ToBytes()))

    def __repr__(self):
        return f"FixedBitBuffer({len(self)} bits, 0x{self.hex()})"
