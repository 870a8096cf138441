import pytest

from FF1_LS80 import FF1LS80, GeneralAlgr, GLOBAL

KEY_HEX = "0102030405060708090A0B0C0D0E0F16"


@pytest.fixture(params=[GLOBAL.NUMBA_BITS, GLOBAL.NUMPY_BITS], ids=["numba", "numpy"])
def bit_backend(request, monkeypatch):
    monkeypatch.setattr(GeneralAlgr, "BIT_BACKEND", request.param)
    return request.param


@pytest.fixture
def engine():
    return FF1LS80(KEY_HEX)
