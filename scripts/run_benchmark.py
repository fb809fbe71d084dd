#!/usr/bin/env python3
"""
Script to benchmark the generation pipeline on the shipped puzzles.

Usage:
    python scripts/run_benchmark.py --runs 20
    python scripts/run_benchmark.py -p Classic -f easy --runs 50 --save
"""

import click
import sys
from pathlib import Path

import pandas as pd

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from hexkudo.config import BENCHMARK_DIR, BENCHMARK_RUNS, DEFAULT_DIFFICULTY, MAX_TIME_SEC
from hexkudo.core.puzzle import Difficulty
from hexkudo.analysis.benchmark import GenerationBenchmark, BenchmarkConfig
from hexkudo.puzzles import puzzle_map, get_puzzle


@click.command()
@click.option('--puzzle', '-p', type=str, default=None,
              help='Benchmark a single puzzle (all puzzles if omitted)')
@click.option('--difficulty', '-f',
              type=click.Choice([d.value for d in Difficulty]),
              default=DEFAULT_DIFFICULTY, help='Difficulty of the selected puzzle')
@click.option('--runs', '-n', type=click.IntRange(min=1), default=BENCHMARK_RUNS,
              help='Number of generation attempts per puzzle')
@click.option('--time-limit', '-t', type=float, default=MAX_TIME_SEC,
              help='Time limit of each search in seconds')
@click.option('--seed', type=int, default=None,
              help='Random seed for reproducibility')
@click.option('--output-dir', '-o', type=click.Path(), default=str(BENCHMARK_DIR),
              help='Output directory for results')
@click.option('--save', is_flag=True,
              help='Save the results as CSV/JSON')
def main(puzzle, difficulty, runs, time_limit, seed, output_dir, save):
    """Benchmark random path and diamond generation."""
    click.echo("=" * 60)
    click.echo("Hexkudo Generation Benchmark")
    click.echo("=" * 60)

    if puzzle:
        try:
            puzzles = [get_puzzle(puzzle, difficulty)]
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    else:
        puzzles = list(puzzle_map().values())

    benchmark = GenerationBenchmark(BenchmarkConfig(
        runs=runs,
        time_limit=time_limit,
        random_seed=seed,
        output_dir=output_dir
    ))

    frames = []
    summaries = []
    for selected in puzzles:
        df = benchmark.run(selected)
        frames.append(df)
        stats = benchmark.summarize(df)
        summaries.append({
            'puzzle': f"{selected.name} {selected.difficulty.value}",
            'vertexes': selected.num_vertexes,
            'success_rate': stats['success_rate'],
            'avg_path_time': stats['average_time'],
            'max_path_time': stats['max_time'],
            'avg_iterations': stats['average_iterations'],
            'avg_diamond_time': stats['average_diamond_time'],
            'avg_diamonds': stats['average_diamonds'],
            'avg_maps': stats['average_maps'],
            'errors': stats['errors'],
        })

    click.echo("\nResults summary:")
    click.echo(pd.DataFrame(summaries).to_string(index=False, float_format=lambda v: f"{v:.3f}"))

    if save:
        csv_file = benchmark.save_results(pd.concat(frames, ignore_index=True), prefix="benchmark")
        click.echo(f"\nResults saved to: {csv_file}")


if __name__ == '__main__':
    main()
