import time
from dataclasses import dataclass, field
from functools import wraps
from typing import Callable, Dict, Optional

import numpy as np
from tqdm import tqdm

from convex_hull_2d import config
from convex_hull_2d.akl_toussaint import akl_toussaint
from convex_hull_2d.bruteforce import bruteforce_hull
from convex_hull_2d.hull import init_hull
from convex_hull_2d.points import create_points, randomize_points
from convex_hull_2d.quickhull import quickhull
from convex_hull_2d.stats import AlgorithmStats


def timer(f):
    """ Timer decorator """
    @wraps(f)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = f(*args, **kwargs)
        end = time.perf_counter()
        print(f"T[{f.__name__}] = {(end - start)*1e3:.4f} ms")
        return result
    return wrapper


def _min_max_sum():
    return {"min": None, "max": None, "sum": 0}


@dataclass
class BenchmarkData:
    """Min, max and running sum of every measured quantity"""
    ops: dict = field(default_factory=_min_max_sum)
    allocs: dict = field(default_factory=_min_max_sum)
    bytes: dict = field(default_factory=_min_max_sum)
    time: dict = field(default_factory=_min_max_sum)
    num_runs: int = 0

    @staticmethod
    def _update(entry, value):
        entry["min"] = value if entry["min"] is None else min(entry["min"], value)
        entry["max"] = value if entry["max"] is None else max(entry["max"], value)
        entry["sum"] += value

    def record(self, stats: AlgorithmStats, micros: int) -> None:
        self._update(self.ops, stats.num_ops)
        self._update(self.allocs, stats.num_allocs)
        self._update(self.bytes, stats.num_bytes)
        self._update(self.time, micros)
        self.num_runs += 1

    def averages(self) -> Dict[str, float]:
        if self.num_runs == 0:
            return {"ops": 0.0, "allocs": 0.0, "bytes": 0.0, "time": 0.0}
        return {
            "ops": self.ops["sum"] / self.num_runs,
            "allocs": self.allocs["sum"] / self.num_runs,
            "bytes": self.bytes["sum"] / self.num_runs,
            "time": self.time["sum"] / self.num_runs,
        }


def benchmark_algorithm(points, hull, data: BenchmarkData, fn: Callable) -> AlgorithmStats:
    """Run one hull algorithm, time it and record the result in data"""
    start = time.perf_counter()
    stats = fn(points, hull)
    micros = int((time.perf_counter() - start) * 1e6)
    data.record(stats, micros)
    return stats


def bruteforce_akl_toussaint(points, hull) -> AlgorithmStats:
    """Bruteforce on the points left over by the Akl-Toussaint heuristic"""
    filter_stats = AlgorithmStats()
    filtered = akl_toussaint(points, filter_stats)
    return filter_stats + bruteforce_hull(filtered, hull)


def quickhull_akl_toussaint(points, hull) -> AlgorithmStats:
    """Quickhull on the points left over by the Akl-Toussaint heuristic"""
    filter_stats = AlgorithmStats()
    filtered = akl_toussaint(points, filter_stats)
    return filter_stats + quickhull(filtered, hull)


ALGORITHMS = {
    "Bruteforce": bruteforce_hull,
    "Bruteforce + Akl-Toussaint": bruteforce_akl_toussaint,
    "Quickhull": quickhull,
    "Quickhull + Akl-Toussaint": quickhull_akl_toussaint,
}


def run_benchmark(num_points: int,
                  seconds: Optional[float] = None,
                  rounds: Optional[int] = None,
                  rng: Optional[np.random.Generator] = None,
                  progress: bool = True) -> Dict[str, BenchmarkData]:
    """
    Benchmark every algorithm in ALGORITHMS on fresh random points.

    Each iteration randomizes one shared point set and runs all algorithms on
    it, reusing the same hull. Stops after `rounds` iterations if given,
    otherwise after `seconds` (default config.BENCHMARK_SECONDS).
    """
    if rounds is None and seconds is None:
        seconds = config.BENCHMARK_SECONDS
    if rng is None:
        rng = np.random.default_rng()

    ps = create_points(num_points)
    hull = init_hull(ps)
    results = {name: BenchmarkData() for name in ALGORITHMS}

    if rounds is not None:
        bar = tqdm(total=rounds, unit="round", disable=not progress)
    else:
        bar = tqdm(total=seconds, unit="s", bar_format="{l_bar}{bar}| {n:.1f}/{total:.1f} s",
                   disable=not progress)

    start = last = time.perf_counter()
    num_iterations = 0
    with bar:
        while True:
            if rounds is not None and num_iterations >= rounds:
                break
            if rounds is None and time.perf_counter() - start >= seconds:
                break

            randomize_points(ps, rng)
            for name, fn in ALGORITHMS.items():
                benchmark_algorithm(ps, hull, results[name], fn)
            num_iterations += 1

            if rounds is not None:
                bar.update(1)
            else:
                now = time.perf_counter()
                if now - last >= config.PROGRESS_INTERVAL:
                    bar.update(min(now - last, seconds - bar.n))
                    last = now
    return results


def format_statistics(name: str, data: BenchmarkData) -> str:
    """Render the statistics table of one algorithm"""
    avg = data.averages()
    rule = "-" * 65

    def row(label, entry, mean):
        lo = entry["min"] if entry["min"] is not None else 0
        hi = entry["max"] if entry["max"] is not None else 0
        return f" {label:<24}{lo:<14}{hi:<14}{int(mean):<10}"

    return "\n".join([
        f"STATISTICS ({name})",
        rule,
        f" {'':<24}{'Min.':<14}{'Max.':<14}{'Avg.':<10}",
        row("Critical Operations", data.ops, avg["ops"]),
        row("Number of Allocations", data.allocs, avg["allocs"]),
        row("Memory Used (bytes)", data.bytes, avg["bytes"]),
        row("Execution Time (us)", data.time, avg["time"]),
        rule,
    ])
