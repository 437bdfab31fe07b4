"""Command-line interface for the convex hull demo and benchmark."""
import argparse
import logging
import sys

import numpy as np

from convex_hull_2d import config
from convex_hull_2d.akl_toussaint import akl_toussaint
from convex_hull_2d.benchmark import format_statistics, run_benchmark, timer
from convex_hull_2d.bruteforce import bruteforce_hull
from convex_hull_2d.exceptions import HullError
from convex_hull_2d.hull import init_hull
from convex_hull_2d.logging_config import setup_logging
from convex_hull_2d.points import create_points, randomize_points
from convex_hull_2d.quickhull import quickhull

logger = logging.getLogger(__name__)

HULL_ALGORITHMS = {
    "bruteforce": bruteforce_hull,
    "quickhull": quickhull,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the convex hull of random 2D points with bruteforce or quickhull"
    )
    parser.add_argument(
        "-n",
        "--num-points",
        type=int,
        default=config.DEFAULT_NUM_POINTS,
        help=f"Number of points to use (default: {config.DEFAULT_NUM_POINTS}, "
             f"clamped to [{config.MIN_CLI_POINTS}, {config.MAX_CLI_POINTS}])",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(HULL_ALGORITHMS),
        default="quickhull",
        help="Hull algorithm for the demo run (default: quickhull)",
    )
    parser.add_argument(
        "--akl-toussaint",
        default=False,
        action="store_true",
        help="Filter the points with the Akl-Toussaint heuristic first",
    )
    parser.add_argument(
        "-b",
        "--benchmark",
        default=False,
        action="store_true",
        help="Benchmark all algorithms instead of a single demo run",
    )
    parser.add_argument(
        "--seconds",
        type=float,
        default=None,
        help=f"Benchmark duration in seconds (default: {config.BENCHMARK_SECONDS:g})",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Benchmark a fixed number of rounds instead of a duration",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random points",
    )
    parser.add_argument(
        "-p",
        "--plot",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Plot the hull; save to PATH if given, otherwise show a window",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        default=False,
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def clamp_num_points(n: int) -> int:
    return max(config.MIN_CLI_POINTS, min(config.MAX_CLI_POINTS, n))


def run_demo(num_points, algorithm, use_akl_toussaint=False, rng=None, plot=None) -> int:
    """Compute one hull of random points and print it"""
    ps = create_points(num_points)
    randomize_points(ps, rng)
    hull = init_hull(ps)

    source = akl_toussaint(ps) if use_akl_toussaint else ps
    if use_akl_toussaint:
        print(f"Akl-Toussaint kept {source.num_points} of {ps.num_points} points")

    stats = timer(HULL_ALGORITHMS[algorithm])(source, hull)
    print(f"Critical operations: {stats.num_ops}, "
          f"allocations: {stats.num_allocs}, memory used: {stats.num_bytes} bytes")
    print(f"Hull has {hull.num_lines} edges:")
    for p in hull.vertex_coords():
        print(f"  ({p[0]: .4f}, {p[1]: .4f})")

    if plot is not None:
        from convex_hull_2d.visualization import plot_hull
        plot_hull(ps, hull, title=f"Convex Hull ({algorithm})",
                  output=plot or None, show=not plot)
    return 0


def run_benchmark_mode(num_points, seconds=None, rounds=None, rng=None) -> int:
    print(f"Benchmarking {num_points} points...")
    results = run_benchmark(num_points, seconds=seconds, rounds=rounds, rng=rng)
    print()
    for name, data in results.items():
        print(format_statistics(name, data))
        print()
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    num_points = clamp_num_points(args.num_points)
    if num_points != args.num_points:
        logger.warning("Number of points clamped from %d to %d", args.num_points, num_points)
    rng = np.random.default_rng(args.seed)

    try:
        if args.benchmark:
            return run_benchmark_mode(num_points, args.seconds, args.rounds, rng)
        return run_demo(num_points, args.algorithm, args.akl_toussaint, rng, args.plot)
    except HullError as e:
        logger.error("Hull computation failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
