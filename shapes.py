from typing import Tuple
import numpy as np


def create_noisy_plane(N=1000, size=1.0, noise_z_scale=0.01, random_seed=123) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample a square patch of the z=0 plane with vertical noise.

    Parameters:
    - N: Number of points to sample.
    - size: Side length of the square patch, centered at the origin.
    - noise_z_scale: Standard deviation of the noise added to the z-values.
    - random_seed: Seed for the random number generator.

    Returns:
    - X: (N,3) points.
    - normals: (N,3) unit normals (all +z).
    """
    rng = np.random.default_rng(random_seed)
    xy = rng.uniform(-0.5 * size, 0.5 * size, size=(N, 2))
    z = rng.normal(scale=noise_z_scale, size=N)
    X = np.column_stack([xy, z])
    normals = np.tile([0.0, 0.0, 1.0], (N, 1))
    return X, normals


def create_two_sheets(N=2000, size=1.0, gap=0.05, random_seed=123) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Two parallel sheets z = +gap/2 and z = -gap/2, e.g. both faces of a thin plate.

    Parameters:
    - N: Total number of points (split evenly between the sheets).
    - size: Side length of each square sheet.
    - gap: Distance between the sheets.
    - random_seed: Seed for the random number generator.

    Returns:
    - X: (N,3) points.
    - normals: (N,3) outward normals (+z on the top sheet, -z on the bottom one).
    - scalars: (N,) value per point (1 on the top sheet, 0 on the bottom one).
    """
    rng = np.random.default_rng(random_seed)
    n_top = N // 2
    n_bottom = N - n_top
    xy = rng.uniform(-0.5 * size, 0.5 * size, size=(N, 2))
    z = np.concatenate([np.full(n_top, 0.5 * gap), np.full(n_bottom, -0.5 * gap)])
    X = np.column_stack([xy, z])

    normals = np.zeros((N, 3))
    normals[:n_top, 2] = 1.0
    normals[n_top:, 2] = -1.0
    scalars = np.concatenate([np.ones(n_top), np.zeros(n_bottom)])
    return X, normals, scalars
