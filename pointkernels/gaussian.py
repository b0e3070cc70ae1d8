"""
Isotropic Gaussian kernel: w_i = exp(-f2 * r_i^2), f2 = (sharpness / radius)^2.
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
class GaussianParams:
    """
    Attributes
    ----------
    radius : float
        Neighborhood search radius (> 0).
    sharpness : float
        Falloff steepness (>= 0).
    """
    radius: float = 1.0
    sharpness: float = 2.0

    def validate(self) -> None:
        if not self.radius > 0:
            raise ValueError("radius must be > 0")
        if not self.sharpness >= 0:
            raise ValueError("sharpness must be >= 0")


class GaussianKernel(InterpolationKernel):
    """Spherical Gaussian falloff over a radius neighborhood."""

    def __init__(self, params: Optional[GaussianParams] = None):
        super().__init__()
        self.params = params if params is not None else GaussianParams()
        self.params.validate()
        self._update_coefficients()

    def _update_coefficients(self) -> None:
        f = self.params.sharpness / self.params.radius
        self.f2 = f * f

    def initialize(self, locator: PointLocator, points: PointSet, point_data: Optional[PointData] = None) -> None:
        self.params.validate()
        super().initialize(locator, points, point_data)
        self._update_coefficients()

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

        w = np.exp(-self.f2 * r2)
        return idx.copy(), _normalize_weights(p, idx, w)
