import math

import numpy as np
import pytest

from gridpath.geometry import (
    manhattan, octile, euclidean, zero, heuristic, edge_cost,
    resolve_heuristic, as_position, path_length
)


def test_manhattan():
    assert manhattan((0, 0), (2, 3)) == 5.0
    assert isinstance(manhattan((0, 0), (1, 1)), float)


def test_default_heuristic_is_manhattan():
    assert heuristic is manhattan


def test_octile():
    assert octile((0, 0), (3, 0)) == 3.0
    assert octile((0, 0), (2, 2)) == pytest.approx(2 * math.sqrt(2))
    assert octile((0, 0), (3, 1)) == pytest.approx(2 + math.sqrt(2))


def test_euclidean_and_zero():
    assert euclidean((0, 0), (3, 4)) == 5.0
    assert zero((0, 0), (9, 9)) == 0.0


def test_edge_cost_uses_world_positions():
    a = np.array([0.0, 0.0, 0.0])
    b = np.array([10.0, 0.0, 10.0])
    assert edge_cost(a, b) == pytest.approx(math.sqrt(200))
    # Height differences count too
    c = np.array([10.0, 5.0, 0.0])
    assert edge_cost(a, c) == pytest.approx(math.sqrt(125))


def test_resolve_heuristic_by_name_and_callable():
    assert resolve_heuristic("octile") is octile

    def custom(a, b):
        return 7.0

    assert resolve_heuristic(custom) is custom


def test_resolve_heuristic_scale():
    scaled = resolve_heuristic("manhattan", scale=2.5)
    assert scaled((0, 0), (1, 1)) == 5.0


def test_resolve_heuristic_unknown_name():
    with pytest.raises(ValueError):
        resolve_heuristic("chebyshev")


def test_as_position():
    position = as_position((1, 2, 3))
    assert position.dtype == np.float64
    assert position.shape == (3,)
    with pytest.raises(ValueError):
        as_position([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        as_position([])


def test_path_length():
    points = np.array([[0, 0, 0], [3, 0, 4], [3, 0, 10]], dtype=float)
    assert path_length(points) == pytest.approx(11.0)
    assert path_length(points[:1]) == 0.0
