"""
Exceptions raised by the interpolation kernels.
"""

from typing import Optional

import numpy as np


class KernelError(Exception):
    """Base class for kernel errors."""


class KernelNotInitializedError(KernelError):
    """A kernel was queried before `initialize()` bound its data."""


class UnknownKernelError(KernelError, KeyError):
    """No kernel is registered under the requested name."""


class ZeroWeightSumError(KernelError, ArithmeticError):
    """
    Raised when a non-empty neighborhood produces weights that cannot be normalized.

    Attributes
    ----------
    x : np.ndarray, shape (3,)
        Query point.
    ids : np.ndarray
        Neighbor ids that were weighted.
    total : float
        The offending weight sum (0, inf or nan).
    """

    def __init__(self, x: np.ndarray, ids: np.ndarray, total: float, message: Optional[str] = None):
        self.x = np.asarray(x, dtype=np.float64)
        self.ids = np.asarray(ids)
        self.total = float(total)
        if message is None:
            message = (
                f"cannot normalize {len(self.ids)} weights at x={self.x.tolist()}: "
                f"sum of weights is {self.total}"
            )
        super().__init__(message)
