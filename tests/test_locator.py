import numpy as np
import pytest

from pointkernels import KDTreePointLocator, PointSet


@pytest.fixture
def axis_points():
    # origin plus points at distance 0.5, 1.0 and 2.0 along +x
    X = np.array([
        [0.0, 0.0, 0.0],
        [0.5, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [2.0, 0.0, 0.0],
    ])
    return PointSet(X)


def test_radius_query_is_inclusive(axis_points):
    loc = KDTreePointLocator(axis_points)
    idx = loc.find_points_within_radius(1.0, np.zeros(3))
    assert idx.dtype == np.intp
    assert idx.tolist() == [0, 1, 2]


def test_radius_query_builds_tree_lazily(axis_points):
    loc = KDTreePointLocator(axis_points)
    assert loc.tree is None
    loc.find_points_within_radius(0.1, [2.0, 0.0, 0.0])
    assert loc.tree is not None


def test_radius_query_empty(axis_points):
    loc = KDTreePointLocator(axis_points)
    idx = loc.find_points_within_radius(0.1, [10.0, 10.0, 10.0])
    assert idx.shape == (0,)


def test_radius_query_rejects_negative_radius(axis_points):
    with pytest.raises(ValueError):
        KDTreePointLocator(axis_points).find_points_within_radius(-1.0, np.zeros(3))


def test_empty_point_set():
    loc = KDTreePointLocator(PointSet(np.empty((0, 3))))
    assert loc.find_points_within_radius(1.0, np.zeros(3)).size == 0
    assert loc.find_closest_n_points(3, np.zeros(3)).size == 0


def test_closest_n_points_sorted(axis_points):
    loc = KDTreePointLocator(axis_points)
    loc.build_locator()
    assert loc.find_closest_n_points(2, [1.9, 0.0, 0.0]).tolist() == [3, 2]
    assert loc.find_closest_n_points(1, [0.1, 0.0, 0.0]).tolist() == [0]
    # more than available
    assert len(loc.find_closest_n_points(10, np.zeros(3))) == 4
