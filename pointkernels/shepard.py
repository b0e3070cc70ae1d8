"""
Shepard (inverse distance) kernel: w_i = 1 / r_i^p.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ._kernel_utils import (
    EMPTY_IDS,
    EMPTY_WEIGHTS,
    IdsLike,
    _as_ids,
    _as_point,
    _exact_hit,
    _normalize_weights,
    _single_hit,
    _squared_offsets,
)
from .kernel import InterpolationKernel
from .locator import PointLocator
from .point_data import PointData, PointSet


@dataclass
class ShepardParams:
    """
    Attributes
    ----------
    radius : float
        Neighborhood search radius (> 0).
    power_parameter : float
        Exponent p of the inverse distance (> 0). p = 2 avoids the square root.
    """
    radius: float = 1.0
    power_parameter: float = 2.0

    def validate(self) -> None:
        if not self.radius > 0:
            raise ValueError("radius must be > 0")
        if not self.power_parameter > 0:
            raise ValueError("power_parameter must be > 0")


class ShepardKernel(InterpolationKernel):
    """Inverse distance weighting over a radius neighborhood."""

    def __init__(self, params: Optional[ShepardParams] = None):
        super().__init__()
        self.params = params if params is not None else ShepardParams()
        self.params.validate()

    def initialize(self, locator: PointLocator, points: PointSet, point_data: Optional[PointData] = None) -> None:
        self.params.validate()
        super().initialize(locator, points, point_data)

    def compute_basis(self, x: np.ndarray) -> np.ndarray:
        self._check_initialized()
        return self.locator.find_points_within_radius(self.params.radius, _as_point(x))

    def compute_weights(self, x: np.ndarray, ids: IdsLike) -> Tuple[np.ndarray, np.ndarray]:
        self._check_initialized()
        p = _as_point(x)
        idx = _as_ids(ids)
        if idx.size == 0:
            return EMPTY_IDS.copy(), EMPTY_WEIGHTS.copy()

        _, r2 = _squared_offsets(p, self.points.get_points(idx))
        hit = _exact_hit(r2)
        if hit is not None:
            return _single_hit(idx, hit)

        if self.params.power_parameter == 2.0:
            w = 1.0 / r2
        else:
            w = 1.0 / np.power(r2, 0.5 * self.params.power_parameter)
        return idx.copy(), _normalize_weights(p, idx, w)
