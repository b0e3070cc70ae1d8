"""
Spatial point locator backed by SciPy's cKDTree.

Radius queries are inclusive: a point at distance exactly `radius` from the
query is returned (scipy's `query_ball_point` convention).
"""

import logging
from typing import Optional

import numpy as np
from scipy.spatial import cKDTree
from typing_extensions import Protocol

from ._kernel_utils import EMPTY_IDS, _as_point
from .point_data import PointSet

logger = logging.getLogger(__name__)


class PointLocator(Protocol):
    """Anything able to answer radius queries over a point set."""

    def find_points_within_radius(self, radius: float, x: np.ndarray) -> np.ndarray:
        ...


class KDTreePointLocator:
    """
    Radius / closest-N queries over a PointSet.

    The KD-tree is built lazily on the first query, or explicitly via `build_locator()`.
    """

    def __init__(self, points: PointSet, leafsize: int = 16):
        self.points = points
        self.leafsize = leafsize
        self.tree: Optional[cKDTree] = None

    def build_locator(self) -> None:
        """Build a KD-tree for neighbor queries."""
        self.tree = cKDTree(self.points.P, leafsize=self.leafsize)
        logger.debug("Built KD-tree over %d points", self.points.number_of_points)

    def find_points_within_radius(self, radius: float, x: np.ndarray) -> np.ndarray:
        """
        Ids of all points with |p - x| <= radius, sorted ascending.

        Returns
        -------
        idx : np.ndarray, shape (k,), dtype intp
            May be empty.
        """
        if radius < 0:
            raise ValueError("radius must be non-negative")
        if self.points.number_of_points == 0:
            return EMPTY_IDS.copy()
        if self.tree is None:
            self.build_locator()
        idx = self.tree.query_ball_point(_as_point(x), r=radius, return_sorted=True)
        return np.asarray(idx, dtype=np.intp)

    def find_closest_n_points(self, n: int, x: np.ndarray) -> np.ndarray:
        """
        Ids of the `n` closest points to x, nearest first.
        """
        N = self.points.number_of_points
        if n <= 0 or N == 0:
            return EMPTY_IDS.copy()
        if self.tree is None:
            self.build_locator()
        _, idx = self.tree.query(_as_point(x), k=min(n, N))
        # Normalize shape and dtype
        if np.isscalar(idx):
            idx = np.array([int(idx)], dtype=np.intp)
        else:
            idx = np.asarray(idx, dtype=np.intp)
        return idx
