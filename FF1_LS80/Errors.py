from enum import IntEnum


class RegisterResult(IntEnum):
    """
    Outcome of registering a message length.
    Values double as numeric status codes.
    """
    REGISTERED          = 0
    ALREADY_REGISTERED  = 1     # advisory, nothing changed
    INVALID_LENGTH      = 2


class FF1Error(Exception):
    """Base class for every error raised by this package."""


class InvalidKeyMaterial(FF1Error, ValueError):
    """The key is not exactly 32 hexadecimal digits."""


class InvalidMessageLength(FF1Error, ValueError):
    """n is not a multiple of 8 or is below the 88-bit floor."""

    def __init__(self, n):
        super().__init__(f"Message size ({n}) is not valid.")
        self.n = n


class UnregisteredLength(FF1Error, ValueError):
    """Encrypt()/Decrypt() was handed a message size that was never registered."""

    def __init__(self, n):
        super().__init__(f"Unanticipated message size ({n}).")
        self.n = n


class InvalidTweak(FF1Error, ValueError):
    """The tweak is not exactly one cipher block long."""


class CipherBackendFailure(FF1Error, RuntimeError):
    """The block cipher rejected its parameters. Not retried."""
