#!/usr/bin/env python3
"""
Script to generate sample games for a Hexkudo puzzle definition.

The printed SAMPLE_GAMES literal can be pasted into the puzzle module, where it
is used as fallback when generating a game takes too long.

Usage:
    python scripts/generate_samples.py --ls
    python scripts/generate_samples.py -p Classic -f easy -c 5 --summary
    python scripts/generate_samples.py -p Square -f easy --check
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from hexkudo.config import BENCHMARK_DIR, DEFAULT_DIFFICULTY, MAX_TIME_SEC
from hexkudo.core.puzzle import Difficulty
from hexkudo.core.puzzle_parse import PuzzleDefinitionError
from hexkudo.core.utils import setup_logger, format_sample_games
from hexkudo.analysis.benchmark import GenerationBenchmark, BenchmarkConfig
from hexkudo.puzzles import puzzle_map, get_puzzle


@click.command()
@click.option('--ls', 'list_puzzles', is_flag=True,
              help='List the available puzzles')
@click.option('--puzzle', '-p', type=str, default=None,
              help='Name of the puzzle to generate samples for')
@click.option('--difficulty', '-f',
              type=click.Choice([d.value for d in Difficulty]),
              default=DEFAULT_DIFFICULTY, help='Puzzle difficulty')
@click.option('--count', '-c', type=click.IntRange(min=1), default=10,
              help='Number of sample games to generate')
@click.option('--summary', '-s', is_flag=True,
              help='Print timing statistics')
@click.option('--debug', '-d', is_flag=True,
              help='Enable debug logging')
@click.option('--seed', type=int, default=None,
              help='Random seed for reproducibility')
@click.option('--time-limit', type=float, default=MAX_TIME_SEC,
              help='Time limit of each search in seconds')
@click.option('--check', is_flag=True,
              help='Try every starting vertex before generating')
@click.option('--output-dir', '-o', type=click.Path(), default=str(BENCHMARK_DIR),
              help='Output directory for --save')
@click.option('--save', is_flag=True,
              help='Save the attempt statistics as CSV/JSON')
def main(list_puzzles, puzzle, difficulty, count, summary, debug, seed, time_limit, check, output_dir, save):
    """Generate sample games for a Hexkudo puzzle."""
    if debug:
        setup_logger("hexkudo", level="DEBUG")

    if list_puzzles:
        for name, diff in puzzle_map():
            click.echo(f"{name} {diff.value}")
        return

    if puzzle is None:
        click.echo("Error: no puzzle given. Use --ls to list the available puzzles.", err=True)
        sys.exit(1)

    try:
        selected = get_puzzle(puzzle, difficulty)
    except ValueError as e:
        click.echo(f"Error: {e}. Use --ls to list the available puzzles.", err=True)
        sys.exit(1)

    try:
        selected.build()
    except PuzzleDefinitionError as e:
        click.echo(f"Error: {selected.name}: {e}", err=True)
        sys.exit(1)

    benchmark = GenerationBenchmark(BenchmarkConfig(
        time_limit=time_limit,
        random_seed=seed,
        verbose=debug,
        output_dir=output_dir,
        show_progress=not debug
    ))

    if check:
        try:
            failures = benchmark.generator.check_template(selected)
        except PuzzleDefinitionError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        click.echo(f"# Template check: {len(failures)} starting vertexes without a path")

    games, results_df = benchmark.generate_games(selected, count)
    if len(games) < count:
        click.echo(f"Error: only {len(games)}/{count} games generated", err=True)
        sys.exit(1)

    click.echo(format_sample_games(games))

    if summary:
        stats = benchmark.summarize(results_df)
        click.echo("")
        click.echo(f"        total time = {stats['total_time']:.3f}s")
        click.echo(f"      average time = {stats['average_time']:.3f}s")
        click.echo(f"          max time = {stats['max_time']:.3f}s")
        click.echo(f"average iterations = {stats['average_iterations']:.1f}")
        click.echo(f"            errors = {stats['errors']}")

    if save:
        csv_file = benchmark.save_results(results_df, prefix=f"{selected.name.lower()}_{difficulty}")
        click.echo(f"# Results saved to: {csv_file}")


if __name__ == '__main__':
    main()
