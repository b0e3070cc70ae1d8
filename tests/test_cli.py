import logging

import matplotlib.pyplot as plt
import numpy as np
import pytest

import cli_kernel
import visualization
from pointkernels import setup_logging
from shapes import create_noisy_plane, create_two_sheets


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("pointkernels")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


def test_create_two_sheets():
    X, normals, scalars = create_two_sheets(N=101, gap=0.2, random_seed=1)
    assert X.shape == (101, 3) and normals.shape == (101, 3)
    top = X[:, 2] > 0
    assert top.sum() == 50
    np.testing.assert_allclose(X[top, 2], 0.1)
    np.testing.assert_allclose(X[~top, 2], -0.1)
    np.testing.assert_array_equal(normals[top, 2], 1.0)
    np.testing.assert_array_equal(normals[~top, 2], -1.0)
    np.testing.assert_array_equal(scalars, top.astype(float))


def test_create_noisy_plane_is_seeded():
    X1, n1 = create_noisy_plane(N=50, random_seed=3)
    X2, _ = create_noisy_plane(N=50, random_seed=3)
    np.testing.assert_array_equal(X1, X2)
    assert np.all(np.abs(X1[:, :2]) <= 0.5)
    np.testing.assert_array_equal(n1, np.tile([0.0, 0.0, 1.0], (50, 1)))


def test_plots_return_figures():
    X, _, _ = create_two_sheets(N=40)
    fig = visualization.plot_weights(X, np.array([0, 1]), np.array([0.25, 0.75]), np.zeros(3), show=False)
    assert fig is not None
    r = np.linspace(0.0, 1.0, 10)
    fig2 = visualization.plot_falloff(r, np.exp(-r * r), np.exp(-4 * r * r), show=False)
    assert len(fig2.axes[0].lines) == 2
    plt.close("all")


def test_cli_default_run(capsys):
    assert cli_kernel.main(["--N", "2000"]) == 0
    out = capsys.readouterr().out
    assert "[info] ellipsoidal_gaussian:" in out
    assert "interpolated Temperature" in out


@pytest.mark.parametrize("kernel", ["gaussian", "shepard", "linear", "ellipsoidal_gaussian_gpu"])
def test_cli_other_kernels(kernel, capsys):
    assert cli_kernel.main(["--N", "2000", "--kernel", kernel, "--device", "cpu"]) == 0
    assert f"[info] {kernel}:" in capsys.readouterr().out


def test_cli_exact_hit(capsys):
    X, _, _ = create_two_sheets(N=500, random_seed=9)
    args = ["--N", "500", "--seed", "9", "--query", *map(str, X[0])]
    assert cli_kernel.main(args) == 0
    assert "1 neighbors" in capsys.readouterr().out


def test_cli_empty_neighborhood(capsys):
    assert cli_kernel.main(["--N", "200", "--query", "5", "5", "5"]) == 1
    assert "no source points" in capsys.readouterr().out


def test_cli_plot(monkeypatch):
    monkeypatch.setattr(plt, "show", lambda: None)
    assert cli_kernel.main(["--N", "1000", "--plot"]) == 0
    plt.close("all")


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "kernel.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    assert logger.name == "pointkernels"
    assert len(logger.handlers) == 2
    logging.getLogger("pointkernels.test").debug("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    for h in logger.handlers:
        h.close()
