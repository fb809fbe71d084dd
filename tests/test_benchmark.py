"""
Generation benchmark and its summary.
"""

import json

import pandas as pd

from hexkudo.analysis.benchmark import BenchmarkConfig, BenchmarkResult, GenerationBenchmark


def make_benchmark(tmp_path, **kwargs):
    return GenerationBenchmark(BenchmarkConfig(show_progress=False, output_dir=tmp_path, **kwargs))


def test_run_collects_every_attempt(forced_puzzle, tmp_path):
    benchmark = make_benchmark(tmp_path, random_seed=4)
    df = benchmark.run(forced_puzzle, runs=5)

    assert len(df) == 5
    assert list(df.columns) == list(BenchmarkResult.__dataclass_fields__)
    assert df['success'].all()
    assert (df['starting_vertex'] == 3).all()
    assert (df['num_vertexes'] == 4).all()
    assert (df['memory_mb'] > 0).all()


def test_summary(forced_puzzle, tmp_path):
    benchmark = make_benchmark(tmp_path, random_seed=4)
    stats = GenerationBenchmark.summarize(benchmark.run(forced_puzzle, runs=3))

    assert stats['runs'] == 3
    assert stats['successes'] == 3
    assert stats['errors'] == 0
    assert stats['success_rate'] == 1.0
    assert stats['average_iterations'] > 0
    assert stats['max_time'] >= stats['average_time']
    assert stats['errors_by_stage'] == {}


def test_summary_of_nothing():
    stats = GenerationBenchmark.summarize(pd.DataFrame())
    assert stats['runs'] == 0
    assert stats['average_time'] == 0.0


def test_failures_are_counted(forced_puzzle, tmp_path):
    benchmark = make_benchmark(tmp_path, time_limit=0.0)
    df = benchmark.run(forced_puzzle, runs=2)
    stats = GenerationBenchmark.summarize(df)

    assert not df['success'].any()
    assert (df['error'] == 'duration_exceeded').all()
    assert stats['errors_by_stage'] == {'path': 2}
    # Path statistics only cover attempts whose path search finished
    assert stats['total_time'] == 0.0


def test_generate_games(small_puzzle, tmp_path):
    benchmark = make_benchmark(tmp_path, random_seed=8)
    games, df = benchmark.generate_games(small_puzzle, 2)

    assert len(games) == 2
    assert len(df) >= 2
    assert df['success'].sum() == 2
    for game in games:
        assert len(game.path) == 10
        assert game.path[0] in game.maps
        assert game.path[-1] in game.maps


def test_generate_games_gives_up(forced_puzzle, tmp_path):
    benchmark = make_benchmark(tmp_path, time_limit=0.0, max_failures=3)
    games, df = benchmark.generate_games(forced_puzzle, 2)
    assert games == []
    assert len(df) == 3


def test_save_results(forced_puzzle, tmp_path):
    benchmark = make_benchmark(tmp_path / "out", random_seed=4, runs=2)
    df = benchmark.run(forced_puzzle)
    csv_file = benchmark.save_results(df, prefix="forced")

    assert csv_file.exists()
    assert len(pd.read_csv(csv_file)) == 2

    summaries = list((tmp_path / "out").glob("forced_summary_*.json"))
    assert len(summaries) == 1
    with open(summaries[0]) as f:
        saved = json.load(f)
    assert saved['config']['runs'] == 2
    assert saved['summary']['successes'] == 2
