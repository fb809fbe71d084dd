"""
Utility functions for the Hexkudo generation engine.
"""

import logging
import os
import time
from functools import wraps
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional

import numpy as np
import psutil

from ..config import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT
from .diamond_and_map import DiamondAndMap
from .path import Path
from .puzzle import PuzzleSampleGame
from .vertexes import CellType, Vertexes


def setup_logger(name: str, log_file: Optional[FilePath] = None, level: str = LOG_LEVEL) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def timer(func):
    """Decorator to time function execution"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        execution_time = time.perf_counter() - start_time

        # Log through the instance logger when decorating a method
        if args and hasattr(args[0], 'logger'):
            args[0].logger.debug(f"{func.__name__} took {execution_time:.3f} seconds")
        else:
            logging.getLogger(func.__module__).debug(f"{func.__name__} took {execution_time:.3f} seconds")

        return result
    return wrapper


def memory_usage() -> float:
    """Get current memory usage in MB"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


class PathConverter:
    """Convert generated games to inspection friendly formats"""

    @staticmethod
    def to_grid(vertexes: Vertexes, path: Optional[Path] = None) -> np.ndarray:
        """
        Convert the cell graph to a 2D grid.

        Playable cells hold their path value (1-based) when a path is given,
        their vertex id otherwise. Background and logo cells keep their
        CellType value.
        """
        grid = vertexes.vertex_array.copy()
        if path is not None:
            for index, vertex in enumerate(path):
                x, y = vertexes.get_coordinates(vertex)
                grid[y, x] = index + 1
        return grid

    @staticmethod
    def to_string(vertexes: Vertexes, path: Optional[Path] = None,
                  diamond_and_map: Optional[DiamondAndMap] = None) -> str:
        """
        Text dump of a puzzle for logs and the command line.

        Args:
            vertexes: The cell graph
            path: Solution path; values are shown instead of vertex ids
            diamond_and_map: When given with a path, only map cells show their
                value and the other playable cells show 'o'

        Returns:
            One text line per template row
        """
        values = {}
        if path is not None:
            values = {vertex: index + 1 for index, vertex in enumerate(path)}

        lines = []
        for y in range(vertexes.height):
            tokens = []
            for x in range(vertexes.width):
                cell = vertexes.get_cell(x, y)
                if cell == CellType.BACKGROUND:
                    token = ""
                elif cell == CellType.LOGO:
                    token = "X"
                elif path is None:
                    token = str(cell)
                elif diamond_and_map is not None and not diamond_and_map.is_map(cell):
                    token = "o"
                else:
                    token = str(values.get(cell, "?"))
                tokens.append(f"{token:>2}")
            lines.append("".join(tokens).rstrip())
        return "\n".join(lines)


def format_sample_games(games: List[PuzzleSampleGame], indent: int = 4) -> str:
    """
    Render sample games as a Python literal ready to paste into a puzzle module.

    Args:
        games: Games to render
        indent: Indentation width

    Returns:
        Source text assigning SAMPLE_GAMES
    """
    pad = " " * indent
    lines = ["SAMPLE_GAMES = ["]
    for game in games:
        diamonds = ", ".join(f"({a}, {b})" for a, b in game.diamonds)
        lines.append(f"{pad}PuzzleSampleGame(")
        lines.append(f"{pad * 2}path={list(game.path)},")
        lines.append(f"{pad * 2}diamonds=[{diamonds}],")
        lines.append(f"{pad * 2}maps={list(game.maps)},")
        lines.append(f"{pad}),")
    lines.append("]")
    return "\n".join(lines)


def calculate_game_stats(vertexes: Vertexes, diamond_and_map: DiamondAndMap) -> Dict[str, Any]:
    """Hint statistics of a generated game"""
    num_vertexes = vertexes.num_vertexes
    return {
        'num_vertexes': num_vertexes,
        'num_diamonds': diamond_and_map.num_diamonds,
        'num_maps': diamond_and_map.num_maps,
        'map_ratio': diamond_and_map.num_maps / num_vertexes if num_vertexes else 0.0,
        'hints_per_vertex': (diamond_and_map.num_diamonds + diamond_and_map.num_maps) / num_vertexes
        if num_vertexes else 0.0,
    }
