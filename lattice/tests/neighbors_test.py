import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from coord.VectorInt import VectorInt


def as_tuples(vectors):
    return [tuple(v) for v in vectors]


def test_2d_order():
    assert as_tuples(VectorInt((0, 0)).get_neighbors()) == [
        (-1, 0), (1, 0),
        (0, -1), (-1, -1), (1, -1),
        (0, 1), (-1, 1), (1, 1),
    ]


def test_1d():
    assert as_tuples(VectorInt((5,)).get_neighbors()) == [(4,), (6,)]


def test_3d_axis_blocks():
    n = VectorInt((10, 20, 30)).get_neighbors()

    # First 8 follow the 2D order on the unchanged third axis
    assert as_tuples(n[:8]) == [(x + 10, y + 20, 30) for x, y in [
        (-1, 0), (1, 0), (0, -1), (-1, -1), (1, -1), (0, 1), (-1, 1), (1, 1)]]

    # Then every earlier entry (self included) moved -1 on z, then +1 on z
    assert n[8] == VectorInt((10, 20, 29))
    assert n[17] == VectorInt((10, 20, 31))
    assert n[16] == VectorInt((11, 21, 29))
    assert n[25] == VectorInt((11, 21, 31))


@pytest.mark.parametrize("origin", [
    VectorInt((0,)),
    VectorInt((3, -4)),
    VectorInt((1, 1, 1)),
    VectorInt((0, -2, 5, 7)),
])
def test_neighbor_set(origin):
    n = origin.get_neighbors()
    assert len(n) == 3 ** origin.dimension - 1
    assert len(set(n)) == len(n)
    assert origin not in n
    for p in n:
        assert p.dimension == origin.dimension
        assert origin.chebyshev_distance(p) == 1


def test_zero_dimension_has_no_neighbors():
    assert VectorInt(()).get_neighbors() == []
