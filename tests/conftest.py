import pytest

from gol_visualizer.models import GridState, SparseState


@pytest.fixture
def empty_grid():
    return GridState(10, 10)


@pytest.fixture
def empty_sparse():
    return SparseState()


@pytest.fixture(params=["bounded", "sparse"])
def board(request):
    """An empty 20x20 grid or an empty sparse board."""
    if request.param == "bounded":
        return GridState(20, 20)
    return SparseState()
