import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ._kernel_utils import IdsLike
from .errors import KernelNotInitializedError
from .locator import PointLocator
from .point_data import PointData, PointSet

logger = logging.getLogger(__name__)


class InterpolationKernel(ABC):
    """
    Weighting kernel for scattered-data interpolation on point clouds.

    A kernel answers two questions for a query point x:
    which source points contribute (`compute_basis`) and how much
    each of them contributes (`compute_weights`).
    """

    def __init__(self):
        self.locator: Optional[PointLocator] = None
        self.points: Optional[PointSet] = None
        self.point_data: Optional[PointData] = None

    @property
    def requires_initialization(self) -> bool:
        """True until `initialize()` has bound a locator and point set."""
        return self.locator is None or self.points is None

    def initialize(self, locator: PointLocator, points: PointSet, point_data: Optional[PointData] = None) -> None:
        """
        Bind the locator, source points and attribute arrays.

        Calling again releases the previous bindings first.
        """
        self.free_structures()
        self.locator = locator
        self.points = points
        self.point_data = point_data if point_data is not None else PointData()
        logger.debug("%s bound to %d points", type(self).__name__, points.number_of_points)

    def free_structures(self) -> None:
        """Release all bindings. Safe to call repeatedly."""
        self.locator = None
        self.points = None
        self.point_data = None

    def _check_initialized(self) -> None:
        if self.requires_initialization:
            raise KernelNotInitializedError(f"{type(self).__name__}.initialize() must be called first")

    @abstractmethod
    def compute_basis(self, x: np.ndarray) -> np.ndarray:
        """
        Candidate neighbor ids for query point x.
        """
        pass

    @abstractmethod
    def compute_weights(self, x: np.ndarray, ids: IdsLike) -> Tuple[np.ndarray, np.ndarray]:
        """
        Normalized weights for neighbors `ids` of x; returns (ids', weights) of equal length.
        """
        pass

    def interpolate_weights(self, x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Run `compute_basis` then `compute_weights` for a single query point."""
        return self.compute_weights(x, self.compute_basis(x))

    def __del__(self):
        try:
            self.free_structures()
        except AttributeError:
            # partially constructed
            pass
