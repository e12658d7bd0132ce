#!/usr/bin/env python
"""
Benchmark rectangle relation queries and display a timing breakdown.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --queries 200000
    python scripts/benchmark.py --planar
    python scripts/benchmark.py --seed 7 --iterations 5

Runs random rectangle/rectangle and rectangle/point relations plus the
vectorised point test, and prints per-marker statistics from
spatialrel.profiling together with the relation histogram.
"""

import argparse
import sys
import time
from collections import Counter
from pathlib import Path

# Add project paths for development
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import numpy as np

from spatialrel import Point, Rectangle, GEO, CARTESIAN
from spatialrel.profiling import enable_profiling, reset_profile, get_profile_results, perf_marker


# ANSI colors for output
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
CYAN = "\033[36m"


def make_rectangles(rng, ctx, count):
    """Random rectangles; in geodetic contexts about half cross the dateline."""
    xs = rng.uniform(-180, 180, size=(count, 2))
    ys = np.sort(rng.uniform(-90, 90, size=(count, 2)), axis=1)
    if not ctx.is_geo():
        xs = np.sort(xs, axis=1)
    return [Rectangle(x0, x1, y0, y1, ctx) for (x0, x1), (y0, y1) in zip(xs.tolist(), ys.tolist())]


def run_iteration(rng, ctx, queries):
    subjects = make_rectangles(rng, ctx, queries)
    others = make_rectangles(rng, ctx, queries)
    points = [Point(x, y) for x, y in zip(rng.uniform(-180, 180, queries).tolist(),
                                           rng.uniform(-90, 90, queries).tolist())]
    histogram = Counter()

    with perf_marker("rectangle_vs_rectangle"):
        for a, b in zip(subjects, others):
            histogram[a.relate(b)] += 1

    with perf_marker("rectangle_vs_point"):
        for a, p in zip(subjects, points):
            histogram[a.relate(p)] += 1

    xs = np.array([p.x for p in points])
    ys = np.array([p.y for p in points])
    with perf_marker("contains_points"):
        for a in subjects[:100]:
            a.contains_points(xs, ys)

    return histogram


def print_results(results, histogram, wall_ms):
    print(f"\n{BOLD}Markers{RESET}")
    print(f"{DIM}{'name':<28}{'count':>10}{'total ms':>12}{'avg ms':>10}{'max ms':>10}{RESET}")
    for name, stats in sorted(results.items(), key=lambda item: -item[1]['total_ms']):
        print(f"{CYAN}{name:<28}{RESET}{stats['count']:>10}{stats['total_ms']:>12.3f}"
              f"{stats['avg_ms']:>10.4f}{stats['max_ms']:>10.3f}")

    print(f"\n{BOLD}Relations{RESET}")
    total = sum(histogram.values())
    for relation, count in histogram.most_common():
        print(f"  {relation.name:<12}{count:>10}  ({100.0 * count / total:.1f}%)")

    print(f"\n{BOLD}Wall time{RESET}: {wall_ms:.1f} ms")


def main():
    parser = argparse.ArgumentParser(description="Benchmark spatialrel relation queries")
    parser.add_argument("--queries", type=int, default=50000, help="Relations per kind per iteration")
    parser.add_argument("--iterations", type=int, default=3, help="Number of iterations")
    parser.add_argument("--planar", action="store_true", help="Use a Cartesian context instead of geodetic")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    ctx = CARTESIAN if args.planar else GEO
    rng = np.random.default_rng(args.seed)

    reset_profile()
    enable_profiling()
    histogram = Counter()
    start = time.perf_counter()
    for _ in range(args.iterations):
        histogram.update(run_iteration(rng, ctx, args.queries))
    wall_ms = (time.perf_counter() - start) * 1000
    enable_profiling(False)

    print_results(get_profile_results(), histogram, wall_ms)


if __name__ == "__main__":
    main()
