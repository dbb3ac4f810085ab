"""Search and partition engines for rectangular grids.

This package exposes the public API surface via:

- ``gridplay.engine.word_search.GridPathSearch``: word paths on a letter board.
- ``gridplay.engine.life.LifeStepper``: aged Game of Life generations.
- ``gridplay.engine.maze.UnionFindMazeBuilder``: randomized Kruskal mazes.
- ``gridplay.data.dictionary.WordDictionary``: word and prefix lookups.
"""

from .data.dictionary import DictionaryConfig, WordDictionary
from .engine.grid import Grid
from .engine.life import LifeBoard, LifeConfig, LifeSimulation, LifeStepper
from .engine.maze import UnionFindMazeBuilder
from .engine.word_search import GridPathSearch

__all__ = [
    "DictionaryConfig",
    "Grid",
    "GridPathSearch",
    "LifeBoard",
    "LifeConfig",
    "LifeSimulation",
    "LifeStepper",
    "UnionFindMazeBuilder",
    "WordDictionary",
]

__version__ = "0.1.0"
