"""
Shipped puzzle definitions and their sample games.
"""

import pytest

from hexkudo.core.puzzle import Difficulty
from hexkudo.core.puzzle_parse import PuzzleDefinitionError
from hexkudo.core.validator import PathValidator
from hexkudo.puzzles import PUZZLE_MODULES, get_puzzle, puzzle_map


def test_catalog_keys():
    assert set(puzzle_map()) == {("Classic", Difficulty.EASY), ("Square", Difficulty.EASY)}


def test_get_puzzle():
    assert get_puzzle("classic").name == "Classic"
    assert get_puzzle("SQUARE", "easy").num_vertexes == 20
    assert get_puzzle("Classic", Difficulty.EASY).num_vertexes == 22


def test_unknown_puzzle():
    with pytest.raises(ValueError, match="Unknown puzzle: Triangle"):
        get_puzzle("Triangle")
    with pytest.raises(ValueError, match="Unknown puzzle"):
        get_puzzle("Classic", "hard")
    with pytest.raises(ValueError, match="Unknown difficulty"):
        get_puzzle("Classic", "impossible")


def test_definitions_are_fresh():
    first = get_puzzle("Classic")
    first.build()
    assert not get_puzzle("Classic").matrix.is_built


@pytest.mark.parametrize("module", PUZZLE_MODULES, ids=lambda m: m.NAME)
def test_templates_are_valid(module):
    puzzle = module.get()
    puzzle.build()
    result = PathValidator.validate_graph(puzzle.matrix)
    assert result, result.errors


@pytest.mark.parametrize("module", PUZZLE_MODULES, ids=lambda m: m.NAME)
def test_sample_games_are_valid(module):
    puzzle = module.get()
    puzzle.build()
    assert puzzle.samples

    for sample in puzzle.samples:
        path = sample.to_path()
        hints = sample.to_diamond_and_map()
        path_result = PathValidator.validate_path(path, puzzle.matrix)
        assert path_result, path_result.errors
        hint_result = PathValidator.validate_diamond_and_map(hints, path, puzzle.matrix)
        assert hint_result, hint_result.errors
        assert not hint_result.warnings


@pytest.mark.parametrize("module", PUZZLE_MODULES, ids=lambda m: m.NAME)
def test_sample_games_are_already_reduced(module):
    puzzle = module.get()
    puzzle.build()

    for sample in puzzle.samples:
        hints = sample.to_diamond_and_map()
        before = hints.get_diamond_and_map()
        hints.compute(puzzle.matrix.vertexes)
        assert hints.get_diamond_and_map() == before


def test_square_samples_have_a_unique_solution(count_solutions):
    puzzle = get_puzzle("Square")
    puzzle.build()
    assert len(puzzle.samples) == 3
    for sample in puzzle.samples:
        assert count_solutions(puzzle.matrix, sample.to_diamond_and_map(), sample.to_path()) == 1


def test_sample_game_pick(small_puzzle, rng):
    assert small_puzzle.get_sample_game(rng) is small_puzzle.samples[0]


def test_sample_game_missing():
    puzzle = get_puzzle("Classic")
    puzzle.samples = []
    with pytest.raises(PuzzleDefinitionError):
        puzzle.get_sample_game()
