import numpy as np
import pytest

from pointkernels import (
    GaussianKernel,
    GaussianParams,
    KernelNotInitializedError,
    LinearKernel,
    LinearParams,
    ShepardKernel,
    ShepardParams,
    ZeroWeightSumError,
)

from conftest import bind

X = np.array([
    [0.0, 0.0, 0.0],
    [0.3, 0.0, 0.0],
    [0.0, 0.5, 0.0],
    [0.0, 0.0, 2.0],
])
QUERY = np.array([0.1, 0.0, 0.0])


def test_gaussian_weights():
    kernel = bind(GaussianKernel(GaussianParams(radius=1.0, sharpness=2.0)), X)
    ids, w = kernel.interpolate_weights(QUERY)
    assert ids.tolist() == [0, 1, 2]
    r2 = np.sum((X[ids] - QUERY) ** 2, axis=1)
    u = np.exp(-4.0 * r2)
    np.testing.assert_allclose(w, u / u.sum())


def test_gaussian_stale_coefficients():
    kernel = bind(GaussianKernel(), X)
    kernel.params.sharpness = 1.0
    assert kernel.f2 == pytest.approx(4.0)
    bind(kernel, X)
    assert kernel.f2 == pytest.approx(1.0)


@pytest.mark.parametrize("power", [1.0, 2.0, 3.0])
def test_shepard_weights(power):
    kernel = bind(ShepardKernel(ShepardParams(radius=1.0, power_parameter=power)), X)
    ids, w = kernel.interpolate_weights(QUERY)
    r = np.linalg.norm(X[ids] - QUERY, axis=1)
    u = 1.0 / r ** power
    np.testing.assert_allclose(w, u / u.sum())
    assert w[0] > w[1] > w[2]


def test_linear_weights():
    kernel = bind(LinearKernel(LinearParams(radius=1.0)), X)
    ids, w = kernel.interpolate_weights(QUERY)
    assert ids.tolist() == [0, 1, 2]
    np.testing.assert_allclose(w, [1 / 3, 1 / 3, 1 / 3])


@pytest.mark.parametrize("kernel_cls", [GaussianKernel, ShepardKernel])
def test_exact_hit(kernel_cls):
    kernel = bind(kernel_cls(), X)
    ids, w = kernel.interpolate_weights(X[1])
    assert ids.tolist() == [1]
    assert w.tolist() == [1.0]


def test_linear_has_no_exact_hit_rule():
    kernel = bind(LinearKernel(), X)
    ids, w = kernel.interpolate_weights(X[1])
    assert len(ids) == 3


@pytest.mark.parametrize("kernel_cls", [GaussianKernel, ShepardKernel, LinearKernel])
def test_empty_and_uninitialized(kernel_cls):
    kernel = kernel_cls()
    with pytest.raises(KernelNotInitializedError):
        kernel.compute_basis(QUERY)
    bind(kernel, X)
    ids, w = kernel.interpolate_weights([50.0, 50.0, 50.0])
    assert ids.size == 0 and w.size == 0


def test_gaussian_underflow_raises():
    kernel = bind(GaussianKernel(GaussianParams(radius=1.0, sharpness=1000.0)), X)
    with pytest.raises(ZeroWeightSumError):
        kernel.compute_weights(QUERY, [2])


@pytest.mark.parametrize("params", [
    GaussianParams(radius=0.0),
    GaussianParams(sharpness=-1.0),
    ShepardParams(power_parameter=0.0),
    LinearParams(radius=-1.0),
])
def test_invalid_params(params):
    kernel_cls = {GaussianParams: GaussianKernel, ShepardParams: ShepardKernel, LinearParams: LinearKernel}[type(params)]
    with pytest.raises(ValueError):
        kernel_cls(params)
