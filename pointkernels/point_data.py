"""
In-memory point storage consumed by the interpolation kernels.

- PointSet: (N, 3) source positions addressed by integer id.
- AttributeArray: a named per-point array with one or more components.
- PointData: a store of attribute arrays looked up by name.

The kernels only read from these objects; a bound array stays alive for as
long as a kernel holds a reference to it.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Union

import numpy as np


class PointSet:
    """
    Read-only 3D point positions.

    Parameters
    ----------
    points : np.ndarray, shape (N, 3)
        Source point coordinates.
    """

    def __init__(self, points: np.ndarray):
        P = np.asarray(points, dtype=np.float64)
        if P.ndim != 2 or P.shape[1] != 3:
            raise ValueError("points must be (N,3)")
        # read-only view; the caller's array keeps its flags
        self.P = P.view()
        self.P.setflags(write=False)

    @property
    def number_of_points(self) -> int:
        return len(self.P)

    def __len__(self) -> int:
        return len(self.P)

    def get_point(self, i: int) -> np.ndarray:
        """Position of point `i`, shape (3,)."""
        return self.P[i]

    def get_points(self, idx: Union[Sequence[int], np.ndarray]) -> np.ndarray:
        """Positions of points `idx`, shape (k, 3)."""
        return self.P[np.asarray(idx, dtype=np.intp)]


class AttributeArray:
    """
    Named per-point data, stored as an (N, C) float64 array.

    A 1D input is treated as a single-component array.
    """

    def __init__(self, name: str, values: np.ndarray):
        A = np.asarray(values, dtype=np.float64)
        if A.ndim == 1:
            A = A[:, None]
        if A.ndim != 2:
            raise ValueError("attribute values must be (N,) or (N,C)")
        self.name = name
        self.values = A

    def __repr__(self) -> str:
        return f"AttributeArray(name={self.name!r}, shape={self.values.shape})"

    @property
    def number_of_components(self) -> int:
        return self.values.shape[1]

    @property
    def number_of_tuples(self) -> int:
        return self.values.shape[0]

    def get_tuple(self, i: int) -> np.ndarray:
        """Components of tuple `i`, shape (C,)."""
        return self.values[i]

    def get_tuples(self, idx: Union[Sequence[int], np.ndarray]) -> np.ndarray:
        """Components of tuples `idx`, shape (k, C)."""
        return self.values[np.asarray(idx, dtype=np.intp)]


class PointData:
    """
    Attribute arrays keyed by name.

    >>> pd = PointData()
    >>> pd.add_array("Normals", normals)
    >>> pd.get_array("Normals").number_of_components
    3
    """

    def __init__(self, arrays: Optional[Dict[str, np.ndarray]] = None):
        self._arrays: Dict[str, AttributeArray] = {}
        for name, values in (arrays or {}).items():
            self.add_array(name, values)

    def add_array(self, name: str, values: Union[np.ndarray, AttributeArray]) -> AttributeArray:
        """Add (or replace) an array under `name` and return it."""
        arr = values if isinstance(values, AttributeArray) else AttributeArray(name, values)
        self._arrays[name] = arr
        return arr

    def remove_array(self, name: str) -> None:
        self._arrays.pop(name, None)

    def get_array(self, name: str) -> Optional[AttributeArray]:
        """Array stored under `name`, or None."""
        return self._arrays.get(name)

    @property
    def array_names(self) -> List[str]:
        return list(self._arrays)

    def __contains__(self, name: str) -> bool:
        return name in self._arrays

    def __iter__(self) -> Iterator[AttributeArray]:
        return iter(self._arrays.values())

    def __len__(self) -> int:
        return len(self._arrays)
