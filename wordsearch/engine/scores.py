"""Top score persistence.

Scores live in a plain text file holding five integers, one per line, best
first. The file is created with zeros the first time it is read.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..core.constants import POINTS_PER_WORD, TOP_SCORE_SLOTS
from ..core.exceptions import SourceWriteError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_SCORES_PATH = Path("local_db/scores.txt")


def insert_score(top_scores: Sequence[int], candidate: int) -> List[int]:
    """Insert ``candidate`` into a descending top-N list, dropping the last entry.

    The list is returned unchanged (as a copy) when ``candidate`` does not beat
    any entry.
    """

    ranked = list(top_scores)
    for index, score in enumerate(ranked):
        if candidate > score:
            ranked.insert(index, candidate)
            ranked.pop()
            break
    return ranked


def _normalize(scores: Sequence[int]) -> List[int]:
    padded = list(scores)[:TOP_SCORE_SLOTS]
    return padded + [0] * (TOP_SCORE_SLOTS - len(padded))


def load_score_list(path: Path | str = DEFAULT_SCORES_PATH) -> List[int]:
    """Read the top scores, creating a zeroed file when none exists."""

    source = Path(path)
    if not source.exists():
        defaults = [0] * TOP_SCORE_SLOTS
        try:
            save_score_list(source, defaults)
        except SourceWriteError as exc:
            LOGGER.warning("Unable to create score file: %s", exc)
        else:
            LOGGER.info("Created score file %s", source)
        return defaults

    try:
        lines = source.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        LOGGER.warning("Score file read error (%s): %s", source, exc)
        return [0] * TOP_SCORE_SLOTS

    scores: List[int] = []
    for line in lines[:TOP_SCORE_SLOTS]:
        try:
            scores.append(int(line.strip()))
        except ValueError:
            LOGGER.debug("Unparseable score line %r in %s", line, source)
            scores.append(0)
    return _normalize(scores)


def save_score_list(path: Path | str, scores: Sequence[int]) -> None:
    """Overwrite ``path`` with the top scores, one per line."""

    target = Path(path)
    payload = "".join(f"{score}\n" for score in _normalize(scores))
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise SourceWriteError(f"Could not open file {target} for writing") from exc


def record_score(path: Path | str, score: int) -> List[int]:
    """Merge ``score`` into the stored top scores and write them back."""

    ranked = insert_score(load_score_list(path), score)
    save_score_list(path, ranked)
    LOGGER.info("Recorded score %d; top scores now %s", score, ranked)
    return ranked


class ScoreTracker:
    """Running score for one play-through."""

    def __init__(self, points_per_word: int = POINTS_PER_WORD) -> None:
        self.points_per_word = points_per_word
        self.score = 0

    def update(self, correct_guess: bool) -> int:
        if correct_guess:
            self.score += self.points_per_word
        return self.score

    def reset(self) -> None:
        self.score = 0
