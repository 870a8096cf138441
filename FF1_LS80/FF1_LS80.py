import logging
import string
from .GLOBAL import *
from . import FF1_LS80_internal
from .BitBuffer import FixedBitBuffer
from .CryptoFunc import RoundMask
from .Errors import InvalidKeyMaterial, InvalidTweak, RegisterResult
from .GeneralAlgr import hexToBytes, bytesToHex
from .Parameters import ParameterSet
from .Registry import LengthRegistry

LOGGER = logging.getLogger(__name__)


class FF1LS80:
    """
    FF1 with a custom 80-bit split() and Feistel method Left, for binary
    messages such as ADS-B extended squitters.

    The key is fixed at construction. registerLength() must be called for every
    message size before Encrypt() or Decrypt() sees it.
    """

    hexToBytes = staticmethod(hexToBytes)
    bytesToHex = staticmethod(bytesToHex)

    def __init__(self, keyStr: str):
        """
        Args:
            keyStr: An AES-128 key as 32 hexadecimal digits.

        Raises:
            InvalidKeyMaterial: If keyStr is not exactly 32 hex digits.
        """
        if (not isinstance(keyStr, str) or len(keyStr) != KEY_HEX_DIGITS
                or any(c not in string.hexdigits for c in keyStr)):
            raise InvalidKeyMaterial(f"Key must be {KEY_HEX_DIGITS} hexadecimal digits.")

        self.radix = RADIX
        self.method = METHOD
        self.addition = ADDITION
        self._F = RoundMask(hexToBytes(keyStr))
        self._lengths = LengthRegistry()

    def registerLength(self, n: int) -> RegisterResult:
        """
        Prepares the engine to accept messages of n bits.

        Returns:
            REGISTERED, ALREADY_REGISTERED (advisory) or INVALID_LENGTH.
        """
        return self._lengths.Register(n)

    def validLengths(self) -> tuple:
        """Registered message sizes in registration order."""
        return self._lengths.Lengths()

    def parametersFor(self, n: int) -> ParameterSet:
        """
        Raises:
            UnregisteredLength: If n was never registered.
        """
        return self._lengths.EnsureRegistered(n)

    def _prepare(self, Tweak, message):
        if isinstance(message, FixedBitBuffer):
            X = message
        else:
            X = FixedBitBuffer.FromBytes(bytes(message))

        # Every n must be known in advance
        params = self._lengths.EnsureRegistered(len(X))

        if len(Tweak) != BLOCK_BYTES:
            LOGGER.error("Tweak has %d bytes, expected %d.", len(Tweak), BLOCK_BYTES)
            raise InvalidTweak(f"Tweak must be {BLOCK_BYTES} bytes, got {len(Tweak)}.")

        LOGGER.debug("n=%d split=%d rounds=%d", params.n, params.imbalance, params.rounds)
        return params, X

    def Encrypt(self, Tweak: bytes, Xi):
        """
        Args:
            Tweak: 16 bytes derived from public, per-message context.
            Xi: The plaintext, bytes of a registered size or a FixedBitBuffer.

        Returns:
            The ciphertext, in the same form and size as Xi.

        Raises:
            UnregisteredLength: If the message size was never registered.
            InvalidTweak: If the tweak is not 16 bytes.
            CipherBackendFailure: If AES rejects its parameters.
        """
        params, X = self._prepare(Tweak, Xi)
        Y = FF1_LS80_internal.Encrypt_internal(self._F, params, bytes(Tweak), X)
        return Y if isinstance(Xi, FixedBitBuffer) else Y.ToBytes()

    def Decrypt(self, Tweak: bytes, Yi):
        """
        Inverse of Encrypt() under the same tweak. A different tweak yields an
        unrelated message, not an error: the scheme has no integrity check.

        Raises:
            UnregisteredLength: If the message size was never registered.
            InvalidTweak: If the tweak is not 16 bytes.
            CipherBackendFailure: If AES rejects its parameters.
        """
        params, Y = self._prepare(Tweak, Yi)
        X = FF1_LS80_internal.Decrypt_internal(self._F, params, bytes(Tweak), Y)
        return X if isinstance(Yi, FixedBitBuffer) else X.ToBytes()
