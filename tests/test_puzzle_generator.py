"""
End to end game generation with the sample game fallback.
"""

import pytest

from hexkudo.core.puzzle import Difficulty, Puzzle
from hexkudo.core.puzzle_parse import PuzzleDefinitionError
from hexkudo.core.validator import PathValidator, ValidationResult
from hexkudo.generators.base_generator import GeneratorConfig, GeneratorError
from hexkudo.generators.puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig

from conftest import DISCONNECTED_TEMPLATE, FORCED_START_TEMPLATE


def test_forced_puzzle_is_generated(forced_puzzle):
    generator = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=3))
    game = generator.generate(forced_puzzle)

    assert not game.from_sample
    assert game.attempts == 1
    assert game.path.get_first() == 3
    assert game.diamond_and_map.is_map(3)
    assert game.stats['stage'] == 'done'
    assert game.stats['num_vertexes'] == 4


def test_small_puzzle_game_is_valid(small_puzzle):
    generator = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=11))
    game = generator.generate(small_puzzle)

    assert PathValidator.validate_path(game.path, small_puzzle.matrix)
    assert PathValidator.validate_diamond_and_map(game.diamond_and_map, game.path, small_puzzle.matrix)


def test_time_limit_falls_back_to_a_sample(forced_puzzle):
    generator = PuzzleGenerator(PuzzleGeneratorConfig(time_limit=0.0, random_seed=1))
    game = generator.generate(forced_puzzle)

    assert game.from_sample
    assert game.attempts == 3
    assert game.message.startswith("Sample game used")
    assert game.path.get() == [3, 2, 0, 1]
    assert game.diamond_and_map.get_map() == [1, 3]


def test_no_sample_to_fall_back_to():
    puzzle = Puzzle("Forced", Difficulty.EASY, FORCED_START_TEMPLATE)
    generator = PuzzleGenerator(PuzzleGeneratorConfig(time_limit=0.0, max_attempts=1))
    with pytest.raises(PuzzleDefinitionError, match="no sample games"):
        generator.generate(puzzle)


def test_malformed_template_raises():
    puzzle = Puzzle("Line", Difficulty.EASY, "o o o")
    with pytest.raises(PuzzleDefinitionError):
        PuzzleGenerator().generate(puzzle)


def test_path_failure_stops_before_diamonds():
    puzzle = Puzzle("Split", Difficulty.EASY, DISCONNECTED_TEMPLATE)
    result = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=5)).generate_once(puzzle)

    assert not result.success
    assert result.error == GeneratorError.NO_PATH
    assert result.stats['stage'] == 'path'
    assert result.diamond_and_map is None


def test_generate_batch(small_puzzle):
    generator = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=2))
    results = generator.generate_batch(small_puzzle, 3)

    assert len(results) == 3
    for result in results:
        if result.success:
            assert result.stats['stage'] == 'done'
            assert result.iterations == result.stats['path_iterations'] + result.stats['diamond_iterations']


def test_check_template_forced(forced_puzzle):
    assert PuzzleGenerator(PuzzleGeneratorConfig(random_seed=0)).check_template(forced_puzzle) == {}


def test_check_template_without_any_path():
    puzzle = Puzzle("Split", Difficulty.EASY, DISCONNECTED_TEMPLATE)
    with pytest.raises(PuzzleDefinitionError, match="no path from any starting vertex") as error:
        PuzzleGenerator(PuzzleGeneratorConfig(random_seed=0)).check_template(puzzle)
    assert error.value.vertexes == tuple(range(6))


def test_config_defaults():
    config = PuzzleGeneratorConfig()
    assert config.max_attempts == 3
    assert config.validate
    assert config.generator_config().time_limit == config.time_limit
    assert set(GeneratorConfig.__dataclass_fields__) == {'time_limit', 'random_seed', 'verbose', 'log_file'}


def test_invalid_hints_fail_the_attempt(forced_puzzle, monkeypatch):
    def reject(path, diamond_and_map, parse):
        result = ValidationResult()
        result.add_error("Diamond 0<->1 does not join consecutive values")
        return result

    monkeypatch.setattr(PathValidator, "validate_game", staticmethod(reject))
    result = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=1)).generate_once(forced_puzzle)

    assert not result.success
    assert result.stats['stage'] == 'validation'
    assert "Diamond 0<->1" in result.message


def test_hint_validation_can_be_disabled(forced_puzzle, monkeypatch):
    monkeypatch.setattr(PathValidator, "validate_game", None)
    result = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=1, validate=False)).generate_once(forced_puzzle)
    assert result.success
