"""Word source loading and dictionary lookups."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..core.exceptions import SourceUnavailable
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordList:
    """Immutable, ordered list of candidate words.

    Words are stored exactly as loaded. Lookups are case-sensitive; callers
    normalize guesses to the case convention of the word source.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: Tuple[str, ...] = tuple(words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WordList):
            return self._words == other._words
        return NotImplemented

    def __repr__(self) -> str:
        return f"WordList({list(self._words)!r})"

    def contains(self, word: str) -> bool:
        return contains(self._words, word)

    def of_length(self, length: int) -> List[str]:
        """Return words of exactly ``length`` characters, in source order."""

        return [word for word in self._words if len(word) == length]


def contains(words: Iterable[str], word: str) -> bool:
    """Exact, case-sensitive membership test."""

    for candidate in words:
        if candidate == word:
            return True
    return False


def load_word_source(path: Path | str, max_words: Optional[int] = None) -> WordList:
    """Read whitespace-delimited tokens from ``path`` into a :class:`WordList`.

    ``max_words`` caps how many tokens are kept; ``None`` keeps all of them.
    """

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceUnavailable(f"Could not open word source {source}") from exc

    tokens = text.split()
    if max_words is not None and len(tokens) > max_words:
        LOGGER.info("Word source %s truncated to %d of %d words", source, max_words, len(tokens))
        tokens = tokens[:max_words]
    LOGGER.debug("Loaded %d words from %s", len(tokens), source)
    return WordList(tokens)


__all__ = ["WordList", "contains", "load_word_source"]
