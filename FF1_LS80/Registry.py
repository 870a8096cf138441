import logging
import threading
from .Parameters import ParameterSet, IsValidLength
from .Errors import RegisterResult, UnregisteredLength

LOGGER = logging.getLogger(__name__)


class LengthRegistry:
    """
    The message sizes an engine has been prepared for, in registration order.
    Grows only through Register(); each entry carries its precomputed ParameterSet.
    """

    def __init__(self):
        self._params = {}
        self._lock = threading.Lock()

    def Register(self, n: int) -> RegisterResult:
        with self._lock:
            if n in self._params:
                LOGGER.warning("Message size (%s) is already added.", n)
                return RegisterResult.ALREADY_REGISTERED
            if not IsValidLength(n):
                LOGGER.error("Message size (%s) is not valid.", n)
                return RegisterResult.INVALID_LENGTH
            self._params[n] = ParameterSet.For(n)
            return RegisterResult.REGISTERED

    def EnsureRegistered(self, n: int) -> ParameterSet:
        """
        Returns the ParameterSet of a registered n.

        Raises:
            UnregisteredLength: If n was never registered.
        """
        with self._lock:
            params = self._params.get(n)
        if params is None:
            LOGGER.error("Unanticipated message size (%s).", n)
            raise UnregisteredLength(n)
        return params

    def Lengths(self) -> tuple:
        with self._lock:
            return tuple(self._params)

    def __contains__(self, n):
        with self._lock:
            return n in self._params

    def __len__(self):
        with self._lock:
            return len(self._params)
