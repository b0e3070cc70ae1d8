"""
Low-level PyTorch utilities for the interpolation kernels.

These functions mirror the NumPy helpers in `_kernel_utils` and are used by
the GPU kernel variants.
"""

from typing import Optional, Tuple

import torch


def _squared_offsets(x: torch.Tensor, Y: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Offsets x - y_i, shape (k,3), and squared distances, shape (k,).
    """
    V = x.unsqueeze(0) - Y
    r2 = (V * V).sum(dim=-1)
    return V, r2


def _normal_offsets(V: torch.Tensor, n: Optional[torch.Tensor]) -> torch.Tensor:
    """
    Squared projection of V on the normals n (zero-length normals count as unit length).

    Without normals every projection is zero.
    """
    if n is None:
        return torch.zeros(V.shape[0], device=V.device, dtype=V.dtype)
    mag = torch.linalg.norm(n, dim=-1)
    mag = torch.where(mag == 0, torch.ones_like(mag), mag)
    z = (V * n).sum(dim=-1) / mag
    return z * z


def _ellipsoidal_gaussian(
    r2: torch.Tensor,
    z2: torch.Tensor,
    s: Optional[torch.Tensor],
    f2: float,
    e2: float,
) -> torch.Tensor:
    """
    Unnormalized weights s * exp(-f2 * (rxy2/e2 + z2)).
    """
    rxy2 = torch.clamp_min(r2 - z2, 0.0)
    w = torch.exp(-f2 * (rxy2 / e2 + z2))
    if s is not None:
        w = s * w
    return w
