"""
Linear (box) kernel: every neighbor in the radius gets weight 1/n.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ._kernel_utils import EMPTY_IDS, EMPTY_WEIGHTS, IdsLike, _as_ids, _as_point
from .kernel import InterpolationKernel
from .locator import PointLocator
from .point_data import PointData, PointSet


@dataclass
class LinearParams:
    radius: float = 1.0

    def validate(self) -> None:
        if not self.radius > 0:
            raise ValueError("radius must be > 0")


class LinearKernel(InterpolationKernel):
    """Plain average of the radius neighborhood. Positions are not read, so there is no exact-hit rule."""

    def __init__(self, params: Optional[LinearParams] = None):
        super().__init__()
        self.params = params if params is not None else LinearParams()
        self.params.validate()

    def initialize(self, locator: PointLocator, points: PointSet, point_data: Optional[PointData] = None) -> None:
        self.params.validate()
        super().initialize(locator, points, point_data)

    def compute_basis(self, x: np.ndarray) -> np.ndarray:
        self._check_initialized()
        return self.locator.find_points_within_radius(self.params.radius, _as_point(x))

    def compute_weights(self, x: np.ndarray, ids: IdsLike) -> Tuple[np.ndarray, np.ndarray]:
        self._check_initialized()
        idx = _as_ids(ids)
        if idx.size == 0:
            return EMPTY_IDS.copy(), EMPTY_WEIGHTS.copy()
        return idx.copy(), np.full(len(idx), 1.0 / len(idx), dtype=np.float64)
