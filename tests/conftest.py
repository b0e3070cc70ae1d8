import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from pointkernels import (
    EllipsoidalGaussianKernel,
    EllipsoidalGaussianParams,
    KDTreePointLocator,
    PointData,
    PointSet,
)


@pytest.fixture
def rng():
    return np.random.default_rng(7)


@pytest.fixture
def cloud(rng):
    """Random cloud with unit-ish normals and positive scalars."""
    X = rng.uniform(-1.0, 1.0, size=(200, 3))
    normals = rng.normal(size=(200, 3))
    scalars = rng.uniform(0.5, 2.0, size=200)
    return X, normals, scalars


def bind(kernel, X, arrays=None):
    """Initialize `kernel` on positions X and named arrays; returns the kernel."""
    points = PointSet(X)
    kernel.initialize(KDTreePointLocator(points), points, PointData(arrays or {}))
    return kernel


@pytest.fixture
def make_ellipsoidal():
    def _make(X, arrays=None, **params):
        return bind(EllipsoidalGaussianKernel(EllipsoidalGaussianParams(**params)), X, arrays)
    return _make
