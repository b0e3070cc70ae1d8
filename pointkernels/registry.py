"""
Kernel selection by name.

>>> kernel = make_kernel("ellipsoidal_gaussian", radius=0.2, eccentricity=4.0)
"""

from typing import Callable, Dict, List, Tuple, Type

from .ellipsoidal_gaussian import EllipsoidalGaussianKernel, EllipsoidalGaussianParams
from .ellipsoidal_gaussian_gpu import EllipsoidalGaussianKernelGPU, EllipsoidalGaussianParamsGPU
from .errors import UnknownKernelError
from .gaussian import GaussianKernel, GaussianParams
from .kernel import InterpolationKernel
from .linear import LinearKernel, LinearParams
from .shepard import ShepardKernel, ShepardParams

_KERNELS: Dict[str, Tuple[Type[InterpolationKernel], Callable]] = {
    "ellipsoidal_gaussian": (EllipsoidalGaussianKernel, EllipsoidalGaussianParams),
    "ellipsoidal_gaussian_gpu": (EllipsoidalGaussianKernelGPU, EllipsoidalGaussianParamsGPU),
    "gaussian": (GaussianKernel, GaussianParams),
    "shepard": (ShepardKernel, ShepardParams),
    "linear": (LinearKernel, LinearParams),
}


def available_kernels() -> List[str]:
    return sorted(_KERNELS)


def make_kernel(name: str, **params) -> InterpolationKernel:
    """
    Build the kernel registered as `name` with the given parameters.

    Raises
    ------
    UnknownKernelError
        If `name` is not registered.
    TypeError
        If a parameter is not accepted by that kernel.
    """
    try:
        kernel_cls, params_cls = _KERNELS[name]
    except KeyError:
        raise UnknownKernelError(
            f"unknown kernel {name!r}; choose one of {', '.join(available_kernels())}"
        ) from None
    return kernel_cls(params_cls(**params))
