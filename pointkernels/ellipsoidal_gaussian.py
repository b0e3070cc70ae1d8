"""
Ellipsoidal Gaussian interpolation kernel for 3D point clouds.

Each neighbor y_i of a query point x contributes

    w_i = s_i * exp(-f2 * (rxy2 / e2 + z2))

where z2 is the squared offset x - y_i projected on the neighbor's normal,
rxy2 the squared remainder in the tangent plane, f2 = (sharpness / radius)^2
and e2 = eccentricity^2. With eccentricity > 1 the influence region is an
ellipsoid elongated in the tangent plane, so values blend along a surface
rather than across it.

Public API:
  - EllipsoidalGaussianParams: kernel configuration.
  - EllipsoidalGaussianKernel: call `initialize(locator, points, point_data)`,
    then `compute_basis(x)` and `compute_weights(x, ids)` per query point.

Notes
-----
- An exact hit (x equal to a source position) collapses the result to that
  single point with weight 1.
- f2 and e2 are cached by `initialize()`. Editing `params` afterwards has no
  effect until the kernel is initialized again.
"""

import logging
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
from .point_data import AttributeArray, PointData, PointSet

logger = logging.getLogger(__name__)


@dataclass
class EllipsoidalGaussianParams:
    """
    Parameters controlling the ellipsoidal Gaussian kernel.

    Attributes
    ----------
    radius : float
        Neighborhood search radius; also scales the falloff (must be > 0).
    sharpness : float
        Falloff steepness; larger -> weights decay faster (>= 0).
    eccentricity : float
        Tangent-plane to normal-axis scaling (> 0). 1.0 gives a sphere.
    use_normals : bool
        Read per-point normals from `normals_array_name` if available.
    use_scalars : bool
        Scale each weight by the point's value in `scalars_array_name`.
    normals_array_name : str
        Name of the 3-component normals array.
    scalars_array_name : str
        Name of the 1-component scalars array.
    """
    radius: float = 1.0
    sharpness: float = 2.0
    eccentricity: float = 2.0
    use_normals: bool = True
    use_scalars: bool = False
    normals_array_name: str = "Normals"
    scalars_array_name: str = "Scalars"

    def validate(self) -> None:
        if not self.radius > 0:
            raise ValueError("radius must be > 0")
        if not self.sharpness >= 0:
            raise ValueError("sharpness must be >= 0")
        if not self.eccentricity > 0:
            raise ValueError("eccentricity must be > 0")


class EllipsoidalGaussianKernel(InterpolationKernel):
    """
    Anisotropic Gaussian weights over a radius neighborhood (NumPy + SciPy locator).

    Usage
    -----
    >>> kernel = EllipsoidalGaussianKernel(EllipsoidalGaussianParams(radius=0.5, eccentricity=3.0))
    >>> kernel.initialize(KDTreePointLocator(points), points, point_data)
    >>> ids = kernel.compute_basis(x)
    >>> ids, w = kernel.compute_weights(x, ids)
    """

    def __init__(self, params: Optional[EllipsoidalGaussianParams] = None):
        super().__init__()
        self.params = params if params is not None else EllipsoidalGaussianParams()
        self.normals: Optional[AttributeArray] = None
        self.scalars: Optional[AttributeArray] = None
        self.params.validate()
        self._update_coefficients()

    def _update_coefficients(self) -> None:
        """Cache f2 = (sharpness/radius)^2 and e2 = eccentricity^2."""
        f = self.params.sharpness / self.params.radius
        self.f2 = f * f
        self.e2 = self.params.eccentricity * self.params.eccentricity

    # --------- Binding ---------

    def initialize(self, locator: PointLocator, points: PointSet, point_data: Optional[PointData] = None) -> None:
        """
        Bind data, select the normals / scalars arrays and refresh f2, e2.

        Arrays that are disabled, missing or of the wrong shape are left unbound,
        which gives isotropic (no normals) or unscaled (no scalars) weights.
        """
        self.params.validate()
        super().initialize(locator, points, point_data)

        p = self.params
        self.scalars = self._lookup_array(p.scalars_array_name, p.use_scalars, 1)
        self.normals = self._lookup_array(p.normals_array_name, p.use_normals, 3)
        self._update_coefficients()
        logger.debug(
            "Ellipsoidal kernel: f2=%g e2=%g normals=%s scalars=%s",
            self.f2, self.e2, self.normals is not None, self.scalars is not None,
        )

    def _lookup_array(self, name: str, enabled: bool, n_components: int) -> Optional[AttributeArray]:
        if not enabled:
            return None
        arr = self.point_data.get_array(name)
        if arr is None:
            logger.debug("No point data array named %r; ignoring it", name)
            return None
        if arr.number_of_components != n_components:
            logger.warning(
                "Array %r has %d components (expected %d); ignoring it",
                name, arr.number_of_components, n_components,
            )
            return None
        if arr.number_of_tuples != self.points.number_of_points:
            raise ValueError(
                f"array {name!r} has {arr.number_of_tuples} tuples for "
                f"{self.points.number_of_points} points"
            )
        return arr

    def free_structures(self) -> None:
        super().free_structures()
        self.normals = None
        self.scalars = None

    # --------- Neighbors ---------

    def compute_basis(self, x: np.ndarray) -> np.ndarray:
        """
        Ids of all source points within `params.radius` of x (may be empty).
        """
        self._check_initialized()
        return self.locator.find_points_within_radius(self.params.radius, _as_point(x))

    # --------- Weights ---------

    def _normal_offsets(self, V: np.ndarray, idx: np.ndarray) -> np.ndarray:
        """
        Squared projection of each offset onto its neighbor's normal (0 without normals).
        """
        if self.normals is None:
            return np.zeros(len(V), dtype=np.float64)
        n = self.normals.get_tuples(idx)
        mag = np.linalg.norm(n, axis=1)
        mag[mag == 0.0] = 1.0
        z = np.einsum("ij,ij->i", V, n) / mag
        return z * z

    def _scale_factors(self, idx: np.ndarray) -> np.ndarray:
        if self.scalars is None:
            return np.ones(len(idx), dtype=np.float64)
        return self.scalars.get_tuples(idx)[:, 0]

    def compute_weights(self, x: np.ndarray, ids: IdsLike) -> Tuple[np.ndarray, np.ndarray]:
        """
        Normalized ellipsoidal Gaussian weights for neighbors `ids` of x.

        Parameters
        ----------
        x : np.ndarray, shape (3,)
            Query point.
        ids : sequence of int
            Neighbor ids, usually from `compute_basis(x)`.

        Returns
        -------
        ids : np.ndarray, shape (k,)
            The input ids, or the single coincident id on an exact hit.
        w : np.ndarray, shape (k,)
            Weights summing to 1 (empty for an empty neighborhood).

        Raises
        ------
        ZeroWeightSumError
            If the neighborhood is non-empty but its weights sum to zero.
        """
        self._check_initialized()
        p = _as_point(x)
        idx = _as_ids(ids)
        if idx.size == 0:
            return EMPTY_IDS.copy(), EMPTY_WEIGHTS.copy()

        V, r2 = _squared_offsets(p, self.points.get_points(idx))
        hit = _exact_hit(r2)
        if hit is not None:
            return _single_hit(idx, hit)

        z2 = self._normal_offsets(V, idx)
        rxy2 = np.maximum(r2 - z2, 0.0)
        s = self._scale_factors(idx)

        w = s * np.exp(-self.f2 * (rxy2 / self.e2 + z2))
        return idx.copy(), _normalize_weights(p, idx, w)
