"""
FF1-L-S80: unbalanced Feistel format-preserving encryption for binary messages
"""

from .FF1_LS80 import FF1LS80
from .BitBuffer import FixedBitBuffer
from .Parameters import ParameterSet
from .Errors import (
    RegisterResult,
    FF1Error,
    InvalidKeyMaterial,
    InvalidMessageLength,
    UnregisteredLength,
    InvalidTweak,
    CipherBackendFailure,
)
from .GeneralAlgr import hexToBytes, bytesToHex

__all__ = [
    "FF1LS80",
    "FixedBitBuffer",
    "ParameterSet",
    "RegisterResult",
    "FF1Error",
    "InvalidKeyMaterial",
    "InvalidMessageLength",
    "UnregisteredLength",
    "InvalidTweak",
    "CipherBackendFailure",
    "hexToBytes",
    "bytesToHex",
]
