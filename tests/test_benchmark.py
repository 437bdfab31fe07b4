import numpy as np

from convex_hull_2d.akl_toussaint import akl_toussaint
from convex_hull_2d.benchmark import (
    ALGORITHMS,
    BenchmarkData,
    benchmark_algorithm,
    bruteforce_akl_toussaint,
    format_statistics,
    quickhull_akl_toussaint,
    run_benchmark,
    timer,
)
from convex_hull_2d.bruteforce import bruteforce_hull
from convex_hull_2d.hull import init_hull
from convex_hull_2d.quickhull import quickhull
from convex_hull_2d.stats import AlgorithmStats


def test_timer_prints_elapsed_time(capsys):
    @timer
    def work(x):
        return x * 2

    assert work(21) == 42
    assert "T[work] =" in capsys.readouterr().out


def test_benchmark_data_tracks_min_max_and_average():
    data = BenchmarkData()
    data.record(AlgorithmStats(10, 2, 64), 100)
    data.record(AlgorithmStats(30, 4, 128), 300)
    assert data.ops["min"] == 10
    assert data.ops["max"] == 30
    assert data.averages() == {"ops": 20.0, "allocs": 3.0, "bytes": 96.0, "time": 200.0}


def test_benchmark_algorithm_records_one_run(square):
    data = BenchmarkData()
    stats = benchmark_algorithm(square, init_hull(square), data, quickhull)
    assert data.num_runs == 1
    assert data.ops["sum"] == stats.num_ops


def test_run_benchmark_fixed_rounds():
    results = run_benchmark(25, rounds=3, rng=np.random.default_rng(5), progress=False)
    assert list(results) == list(ALGORITHMS)
    for data in results.values():
        assert data.num_runs == 3
        assert data.ops["min"] > 0


def test_filtered_bruteforce_does_less_work():
    results = run_benchmark(80, rounds=2, rng=np.random.default_rng(8), progress=False)
    assert (results["Bruteforce + Akl-Toussaint"].averages()["ops"]
            < results["Bruteforce"].averages()["ops"])


def test_stats_add_up_field_by_field():
    total = AlgorithmStats(10, 1, 64) + AlgorithmStats(5, 2, 8)
    assert total == AlgorithmStats(num_ops=15, num_allocs=3, num_bytes=72)


def test_filtered_runs_include_the_filter_cost(square_with_center):
    filter_stats = AlgorithmStats()
    filtered = akl_toussaint(square_with_center, filter_stats)
    for combined, algorithm in ((bruteforce_akl_toussaint, bruteforce_hull),
                                (quickhull_akl_toussaint, quickhull)):
        expected = filter_stats + algorithm(filtered, init_hull(filtered))
        hull = init_hull(square_with_center)
        assert combined(square_with_center, hull) == expected
        assert hull.num_lines == 4


def test_run_benchmark_for_a_duration():
    results = run_benchmark(10, seconds=0.05, progress=False)
    assert all(data.num_runs >= 1 for data in results.values())


def test_format_statistics():
    data = BenchmarkData()
    data.record(AlgorithmStats(10, 2, 64), 100)
    table = format_statistics("Quickhull", data)
    assert table.startswith("STATISTICS (Quickhull)")
    for label in ("Critical Operations", "Number of Allocations",
                  "Memory Used (bytes)", "Execution Time (us)"):
        assert label in table


def test_format_statistics_without_runs():
    assert "Critical Operations" in format_statistics("Bruteforce", BenchmarkData())
