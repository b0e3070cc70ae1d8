"""
Ellipsoidal Gaussian kernel evaluated with PyTorch (CPU or CUDA).

Neighbor search stays on the CPU locator; positions, normals and scalars are
copied to the device once in `initialize()` and the weight formula runs there.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import torch

from ._kernel_utils import EMPTY_IDS, EMPTY_WEIGHTS, IdsLike, _as_ids, _as_point, _single_hit
from ._kernel_utils_torch import _ellipsoidal_gaussian, _normal_offsets, _squared_offsets
from .ellipsoidal_gaussian import EllipsoidalGaussianKernel, EllipsoidalGaussianParams
from .errors import ZeroWeightSumError
from .locator import PointLocator
from .point_data import PointData, PointSet

logger = logging.getLogger(__name__)


@dataclass
class EllipsoidalGaussianParamsGPU(EllipsoidalGaussianParams):
    """
    Parameters for the PyTorch ellipsoidal Gaussian kernel.

    Attributes
    ----------
    device : Optional[str]
        Device to run on ("cpu" or "cuda"). None picks CUDA when available.
    dtype : torch.dtype
        Floating point type for the weight computation.
    """
    device: Optional[str] = None
    dtype: torch.dtype = torch.float64


class EllipsoidalGaussianKernelGPU(EllipsoidalGaussianKernel):
    """
    Same weights as `EllipsoidalGaussianKernel`, computed with torch tensors.
    """

    def __init__(self, params: Optional[EllipsoidalGaussianParamsGPU] = None):
        super().__init__(params if params is not None else EllipsoidalGaussianParamsGPU())
        device = self.params.device
        if device is None:
            device = "cuda" if torch.cuda.is_available() else "cpu"
        elif device == "cuda" and not torch.cuda.is_available():
            logger.warning("CUDA requested but not available; falling back to CPU")
            device = "cpu"
        self.device = device
        self.dtype = self.params.dtype
        self._P: Optional[torch.Tensor] = None
        self._N: Optional[torch.Tensor] = None
        self._S: Optional[torch.Tensor] = None

    def _to_device(self, A: np.ndarray) -> torch.Tensor:
        # copy: PointSet positions are read-only views
        return torch.from_numpy(np.array(A, dtype=np.float64)).to(self.device, dtype=self.dtype)

    def initialize(self, locator: PointLocator, points: PointSet, point_data: Optional[PointData] = None) -> None:
        super().initialize(locator, points, point_data)
        self._P = self._to_device(points.P)
        self._N = self._to_device(self.normals.values) if self.normals is not None else None
        self._S = self._to_device(self.scalars.values[:, 0]) if self.scalars is not None else None
        logger.debug("Copied %d points to %s", points.number_of_points, self.device)

    def free_structures(self) -> None:
        super().free_structures()
        self._P = None
        self._N = None
        self._S = None

    @torch.no_grad()
    def compute_weights(self, x: np.ndarray, ids: IdsLike) -> Tuple[np.ndarray, np.ndarray]:
        """
        Normalized ellipsoidal Gaussian weights for neighbors `ids` of x.

        See `EllipsoidalGaussianKernel.compute_weights`; results are returned as NumPy arrays.
        """
        self._check_initialized()
        p = _as_point(x)
        idx = _as_ids(ids)
        if idx.size == 0:
            return EMPTY_IDS.copy(), EMPTY_WEIGHTS.copy()

        it = torch.from_numpy(idx).to(self.device, dtype=torch.long)
        V, r2 = _squared_offsets(self._to_device(p), self._P[it])

        hits = torch.nonzero(r2 == 0).flatten()
        if hits.numel() > 0:
            return _single_hit(idx, int(hits[0]))

        n = self._N[it] if self._N is not None else None
        s = self._S[it] if self._S is not None else None
        w = _ellipsoidal_gaussian(r2, _normal_offsets(V, n), s, self.f2, self.e2)

        total = float(w.sum())
        if total == 0.0 or not np.isfinite(total):
            raise ZeroWeightSumError(p, idx, total)
        w = (w / total).cpu().numpy().astype(np.float64)
        return idx.copy(), w
