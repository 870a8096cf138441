import logging
from Crypto.Cipher import AES
from Crypto.Util.Padding import pad
from Crypto.Util.strxor import strxor
from .BitBuffer import FixedBitBuffer
from .Errors import CipherBackendFailure

LOGGER = logging.getLogger(__name__)


class RoundMask:
    """
    The FFX round function F built on AES-128 in CBC mode.

    AES is always run in the forward (encrypt) direction: it only builds a
    pseudorandom mask, for Decrypt() as well as Encrypt().
    """

    def __init__(self, key: bytes):
        self._key = bytes(key)

    def _cipher(self, mode, **kwargs):
        try:
            return AES.new(self._key, mode, **kwargs)
        except (ValueError, TypeError) as e:
            LOGGER.error("AES rejected its parameters: %s", e)
            raise CipherBackendFailure(f"AES rejected its parameters: {e}") from e

    def Mask(self, tweak: bytes, B: FixedBitBuffer, m: int) -> FixedBitBuffer:
        """
        F(n, T, i, B): derives an m-bit mask from the half B under the tweak T.

        Args:
            tweak: One AES block, used as the CBC initialization vector.
            B: The half that feeds the round function.
            m: The mask length in bits, split(n).

        Returns:
            The leading m bits of the AES-CBC output as a FixedBitBuffer.

        Raises:
            CipherBackendFailure: If AES rejects the key or the tweak.
        """
        # Step 1: PKCS#7 pad B to whole AES blocks
        padded = pad(B.ToBytes(), AES.block_size)

        # Step 2: Encrypt under the fixed key with the tweak as IV
        Y = self._cipher(AES.MODE_CBC, iv=bytes(tweak)).encrypt(padded)

        # Step 3: Extend Y when the mask is longer than the CBC output, as in SP 800-38G FF1
        # S = Y || CIPH(R xor [1]) || CIPH(R xor [2]) || ...
        needed = (m + 7) // 8
        if needed > len(Y):
            R = Y[-AES.block_size:]
            ecb = self._cipher(AES.MODE_ECB)
            S = bytearray(Y)
            j = 1
            while len(S) < needed:
                S += ecb.encrypt(strxor(R, j.to_bytes(AES.block_size, "big")))
                j += 1
            Y = bytes(S)

        # Step 4: Select the relevant bits from the factor
        return FixedBitBuffer.FromBytes(Y).Slice(0, m)
