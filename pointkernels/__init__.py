"""
pointkernels - interpolation weighting kernels for 3D point clouds.

Example:
    >>> from pointkernels import (
    ...     EllipsoidalGaussianKernel, EllipsoidalGaussianParams,
    ...     KDTreePointLocator, PointData, PointSet,
    ... )
    >>> points = PointSet(xyz)
    >>> kernel = EllipsoidalGaussianKernel(EllipsoidalGaussianParams(radius=0.1))
    >>> kernel.initialize(KDTreePointLocator(points), points, PointData({"Normals": normals}))
    >>> ids, w = kernel.interpolate_weights(x)
"""

import logging

from .ellipsoidal_gaussian import EllipsoidalGaussianKernel, EllipsoidalGaussianParams
from .ellipsoidal_gaussian_gpu import EllipsoidalGaussianKernelGPU, EllipsoidalGaussianParamsGPU
from .errors import KernelError, KernelNotInitializedError, UnknownKernelError, ZeroWeightSumError
from .gaussian import GaussianKernel, GaussianParams
from .kernel import InterpolationKernel
from .linear import LinearKernel, LinearParams
from .locator import KDTreePointLocator, PointLocator
from .logging_config import setup_logging
from .point_data import AttributeArray, PointData, PointSet
from .registry import available_kernels, make_kernel
from .shepard import ShepardKernel, ShepardParams

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "InterpolationKernel",
    "EllipsoidalGaussianKernel",
    "EllipsoidalGaussianParams",
    "EllipsoidalGaussianKernelGPU",
    "EllipsoidalGaussianParamsGPU",
    "GaussianKernel",
    "GaussianParams",
    "ShepardKernel",
    "ShepardParams",
    "LinearKernel",
    "LinearParams",
    "KDTreePointLocator",
    "PointLocator",
    "PointSet",
    "PointData",
    "AttributeArray",
    "KernelError",
    "KernelNotInitializedError",
    "UnknownKernelError",
    "ZeroWeightSumError",
    "make_kernel",
    "available_kernels",
    "setup_logging",
]
