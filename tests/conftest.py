import pytest

from VECtools import VectorBase


@pytest.fixture(autouse=True, params=[True, False], ids=["numba", "numpy"])
def use_numba(request, monkeypatch):
    """Run every test once against the Numba kernels and once against NumPy."""
    monkeypatch.setattr(VectorBase, "use_numba", request.param)
    return request.param
