# cli_kernel.py
from __future__ import annotations
import argparse, logging, time
import numpy as np

from shapes import create_two_sheets
from pointkernels import (
    KDTreePointLocator,
    PointData,
    PointSet,
    ZeroWeightSumError,
    available_kernels,
    make_kernel,
    setup_logging,
)


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Kernel weights for a query point between two thin sheets",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Shape params
    p.add_argument("--N", type=int, default=4_000, help="number of points")
    p.add_argument("--size", type=float, default=1.0, help="sheet side length")
    p.add_argument("--gap", type=float, default=0.05, help="distance between the sheets")
    p.add_argument("--seed", type=int, default=123, help="random seed")

    # Kernel params
    k = p.add_argument_group("kernel")
    k.add_argument("--kernel", choices=available_kernels(), default="ellipsoidal_gaussian")
    k.add_argument("--radius", type=float, default=0.1, help="search radius")
    k.add_argument("--sharpness", type=float, default=2.0, help="falloff sharpness")
    k.add_argument("--eccentricity", type=float, default=4.0, help="tangent/normal scaling")
    k.add_argument("--no-normals", action="store_true", help="ignore the Normals array")
    k.add_argument("--device", choices=["auto", "cpu", "cuda"], default="auto",
                   help="device for the *_gpu kernel")

    # Query
    q = p.add_argument_group("query")
    q.add_argument("--query", type=float, nargs=3, default=None, metavar=("X", "Y", "Z"),
                   help="query point (default: just above the top sheet)")

    # IO / viz
    io = p.add_argument_group("IO")
    io.add_argument("--plot", action="store_true", help="plot weights with matplotlib")
    io.add_argument("--verbose", action="store_true", help="debug logging")
    io.add_argument("--log-file", type=str, default=None, help="also write logs to this file")
    return p.parse_args(argv)


def _kernel_params(args) -> dict:
    if args.kernel in ("ellipsoidal_gaussian", "ellipsoidal_gaussian_gpu"):
        params = dict(
            radius=args.radius,
            sharpness=args.sharpness,
            eccentricity=args.eccentricity,
            use_normals=not args.no_normals,
        )
        if args.kernel.endswith("_gpu"):
            params["device"] = None if args.device == "auto" else args.device
        return params
    if args.kernel == "gaussian":
        return dict(radius=args.radius, sharpness=args.sharpness)
    return dict(radius=args.radius)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    # --- two sheets; "Temperature" is the field we blend (1 on top, 0 below)
    X, normals, temperature = create_two_sheets(N=args.N, size=args.size, gap=args.gap, random_seed=args.seed)
    points = PointSet(X)
    point_data = PointData({"Normals": normals, "Temperature": temperature})
    locator = KDTreePointLocator(points)
    locator.build_locator()

    kernel = make_kernel(args.kernel, **_kernel_params(args))
    kernel.initialize(locator, points, point_data)

    x = np.array(args.query if args.query is not None else [0.0, 0.0, 0.3 * args.gap])
    nearest = locator.find_closest_n_points(1, x)
    if len(nearest):
        print(f"[info] nearest source point: id={nearest[0]} at {X[nearest[0]].round(4).tolist()}")

    # --- weights
    t0 = time.time()
    ids = kernel.compute_basis(x)
    try:
        ids, w = kernel.compute_weights(x, ids)
    except ZeroWeightSumError as e:
        print(f"[warn] {e}")
        return 1
    t1 = time.time()
    print(f"[info] {args.kernel}: {len(ids)} neighbors in {t1 - t0:.4f} s")

    if len(ids) == 0:
        print("[warn] no source points within radius; nothing to interpolate")
        return 1

    top = X[ids, 2] > 0
    print(f"[info] weight on top sheet: {w[top].sum():.4f} | bottom sheet: {w[~top].sum():.4f}")
    print(f"[info] interpolated Temperature: {float(w @ temperature[ids]):.4f}")

    if args.plot:
        from visualization import plot_falloff, plot_weights

        plot_weights(X, ids, w, x, title=f"{args.kernel} weights")
        if hasattr(kernel, "e2"):
            r = np.linspace(0.0, args.radius, 100)
            plot_falloff(r, np.exp(-kernel.f2 * r * r / kernel.e2), np.exp(-kernel.f2 * r * r))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
