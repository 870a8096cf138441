from dataclasses import dataclass
from .GLOBAL import *
from .GeneralAlgr import split, rnds
from .Errors import InvalidMessageLength


def IsValidLength(n: int) -> bool:
    """n must be a multiple of 8 and at least 88, so both halves are whole, non-empty bytes."""
    return isinstance(n, int) and n % BYTE_BITS == 0 and n >= MIN_MESSAGE_BITS


@dataclass(frozen=True)
class ParameterSet:
    """
    The FF1 parameters dependent on the message size n.

    imbalance   split(n), the length of the half that is transformed each round
    remainder   n - split(n), the half that feeds the round function
    rounds      rnds(n)
    """
    n: int
    imbalance: int
    remainder: int
    rounds: int

    @classmethod
    def For(cls, n: int) -> "ParameterSet":
        if not IsValidLength(n):
            raise InvalidMessageLength(n)
        imbalance = split(n)
        return cls(n=n, imbalance=imbalance, remainder=n - imbalance, rounds=rnds(n))
