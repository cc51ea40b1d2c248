"""Console word search game.

This package exposes the public API surface via:

- ``wordsearch.engine.placer.GridPlacer``: builds grids with hidden words.
- ``wordsearch.engine.searcher.GridSearcher``: finds and consumes guessed words.
- ``wordsearch.data.dictionary``: word source loading and membership lookups.
- ``wordsearch.engine.scores``: the top-5 score file.
- ``wordsearch.engine.session.GameSession``: the interactive game loop.
"""

from .core.constants import Direction, Mode
from .data.dictionary import WordList, contains, load_word_source
from .engine.grid import LetterGrid
from .engine.placer import GridPlacer
from .engine.scores import insert_score, load_score_list, save_score_list
from .engine.searcher import GridSearcher
from .engine.session import GameConfig, GameSession

__all__ = [
    "Direction",
    "Mode",
    "WordList",
    "contains",
    "load_word_source",
    "LetterGrid",
    "GridPlacer",
    "GridSearcher",
    "insert_score",
    "load_score_list",
    "save_score_list",
    "GameConfig",
    "GameSession",
]

__version__ = "0.1.0"
