from typing import Optional

import matplotlib.pyplot as plt
import numpy as np


def plot_weights(X: np.ndarray, ids: np.ndarray, w: np.ndarray, x: np.ndarray, title: str = "Kernel weights", show: bool = True):
    """
    Scatter the point cloud and color the weighted neighbors of x by their weight.

    Returns the matplotlib figure.
    """
    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_subplot(111, projection='3d')
    ax.scatter(X[:, 0], X[:, 1], X[:, 2], s=1, c="lightgray")
    if len(ids):
        sc = ax.scatter(X[ids, 0], X[ids, 1], X[ids, 2], s=6, c=w, cmap="viridis")
        fig.colorbar(sc, ax=ax, shrink=0.6, label="weight")
    ax.scatter([x[0]], [x[1]], [x[2]], s=40, c="red", marker="x")
    ax.set_title(title)
    ax.set_xlabel("X"); ax.set_ylabel("Y"); ax.set_zlabel("Z")
    if show:
        plt.show()
    return fig


def plot_falloff(r: np.ndarray, w_plane: np.ndarray, w_normal: Optional[np.ndarray] = None, show: bool = True):
    """
    Unnormalized weight vs distance, in the tangent plane and along the normal.
    """
    fig = plt.figure(figsize=(6, 4))
    plt.plot(r, w_plane, '-', label="tangent plane")
    if w_normal is not None:
        plt.plot(r, w_normal, '--', label="normal axis")
    plt.title("Ellipsoidal Gaussian falloff")
    plt.xlabel("distance"); plt.ylabel("weight")
    plt.legend()
    plt.grid(True, linestyle="--", linewidth=0.5)
    if show:
        plt.show()
    return fig
