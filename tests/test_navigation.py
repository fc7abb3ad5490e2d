import numpy as np
import pytest

from gridpath import (
    build_grid, find_path, refresh_walkability,
    occupancy_oracle, clearance_oracle, combine_oracles, NavigationConfig
)


def test_occupancy_oracle_marks_occupied_cells(grid3):
    occupancy = np.zeros((3, 3))
    occupancy[1, 1] = 1
    assert refresh_walkability(grid3, occupancy_oracle(occupancy)) == 1
    assert not grid3[1, 1].walkable


def test_occupancy_oracle_outside_array_is_blocked(grid10):
    oracle = occupancy_oracle(np.zeros((5, 5)))
    assert oracle(grid10[4, 4])
    assert not oracle(grid10[5, 0])


def test_occupancy_oracle_custom_free_value(grid3):
    occupancy = np.ones((3, 3))
    occupancy[0, 0] = 0
    oracle = occupancy_oracle(occupancy, NavigationConfig(free_value=1))
    assert not oracle(grid3[0, 0])
    assert oracle(grid3[2, 2])


def test_occupancy_oracle_rejects_non_2d():
    with pytest.raises(ValueError):
        occupancy_oracle(np.zeros((2, 2, 2)))


def test_occupancy_routing(grid10):
    occupancy = np.zeros((10, 10))
    occupancy[5, :9] = 1
    result = find_path(grid10, (0, 0), (9, 0), is_walkable=occupancy_oracle(occupancy))
    assert result.found
    assert (5, 9) in result.path


def test_clearance_oracle_blocks_nodes_near_obstacles(grid3):
    obstacles = np.array([[10.0, 0.5, 10.0]])
    oracle = clearance_oracle(obstacles)
    assert not oracle(grid3[1, 1])
    assert oracle(grid3[0, 0])


def test_clearance_oracle_radius(grid3):
    obstacles = np.array([[15.0, 0.0, 10.0]])
    assert clearance_oracle(obstacles)(grid3[1, 1])
    assert not clearance_oracle(obstacles, NavigationConfig(clearance_radius=6.0))(grid3[1, 1])


def test_clearance_oracle_without_obstacles(grid3):
    oracle = clearance_oracle(np.empty((0, 3)))
    assert all(oracle(node) for node in grid3)


def test_clearance_oracle_rejects_flat_points():
    with pytest.raises(ValueError):
        clearance_oracle(np.array([1.0, 2.0, 3.0]))


def test_clearance_routing_around_obstacle(grid3):
    result = find_path(grid3, (0, 0), (2, 2), is_walkable=clearance_oracle([[10.0, 0.0, 10.0]]))
    assert result.found
    assert (1, 1) not in result.path


def test_combine_oracles(grid3):
    occupancy = np.zeros((3, 3))
    occupancy[0, 2] = 1
    oracle = combine_oracles(occupancy_oracle(occupancy), clearance_oracle([[20.0, 0.0, 0.0]]))
    assert refresh_walkability(grid3, oracle) == 2
    assert not grid3[0, 2].walkable
    assert not grid3[2, 0].walkable
