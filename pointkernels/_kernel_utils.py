"""
Low-level utilities shared by the interpolation kernels.

This module provides:
- A type alias for neighbor lists.
- Query point / id list coercion.
- The exact-hit test and weight normalization used by every kernel.

These functions are intended as internal helpers for kernel implementations.
"""

from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .errors import ZeroWeightSumError

# ----------------------------- Types -----------------------------

# Anything that can be turned into an id list
IdsLike = Union[Sequence[int], np.ndarray]

EMPTY_IDS = np.empty(0, dtype=np.intp)
EMPTY_WEIGHTS = np.empty(0, dtype=np.float64)


# ----------------------------- Low-level helpers -----------------------------

def _as_point(x) -> np.ndarray:
    """
    Coerce a query point to a float64 array of shape (3,).
    """
    p = np.asarray(x, dtype=np.float64).reshape(-1)
    if p.shape != (3,):
        raise ValueError("query point must have exactly 3 coordinates")
    return p


def _as_ids(ids: IdsLike) -> np.ndarray:
    """
    Coerce a neighbor list to a 1D intp array (scalars become length-1 arrays).
    """
    idx = np.asarray(ids, dtype=np.intp)
    if idx.ndim == 0:
        idx = idx.reshape(1)
    return idx.reshape(-1)


def _squared_offsets(x: np.ndarray, Y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Offsets from neighbors to the query point and their squared lengths.

    Parameters
    ----------
    x : np.ndarray, shape (3,)
        Query point.
    Y : np.ndarray, shape (n, 3)
        Neighbor positions.

    Returns
    -------
    V : np.ndarray, shape (n, 3)
        Offsets x - y_i.
    r2 : np.ndarray, shape (n,)
        Squared distances.
    """
    V = x - Y
    r2 = np.einsum("ij,ij->i", V, V)
    return V, r2


def _exact_hit(r2: np.ndarray) -> Optional[int]:
    """
    Position of the first neighbor coinciding with the query point, or None.
    """
    hits = np.flatnonzero(r2 == 0.0)
    if hits.size == 0:
        return None
    return int(hits[0])


def _single_hit(ids: np.ndarray, k: int) -> Tuple[np.ndarray, np.ndarray]:
    """Collapse a neighborhood to the k-th neighbor with weight 1."""
    return ids[k:k + 1].copy(), np.ones(1, dtype=np.float64)


def _normalize_weights(x: np.ndarray, ids: np.ndarray, w: np.ndarray) -> np.ndarray:
    """
    Scale weights to sum to one.

    Raises
    ------
    ZeroWeightSumError
        If the sum is zero or not finite for a non-empty neighborhood.
    """
    if w.size == 0:
        return w
    total = float(w.sum())
    if total == 0.0 or not np.isfinite(total):
        raise ZeroWeightSumError(x, ids, total)
    return w / total
