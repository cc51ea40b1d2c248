"""Interactive game orchestration.

A session shows the main menu, lets the player pick a mode and a starting
level, then plays levels in order. Each level gets a fresh grid from
:class:`GridPlacer`; each guess is checked for length, repetition and
dictionary membership before :class:`GridSearcher` looks for it. Chances
carry over between levels and the final score is merged into the top-5
score file when the game ends.
"""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO

from ..core.constants import DEFAULT_CHANCES, MAX_LEVEL, Mode
from ..core.exceptions import AllocationFailure, SourceUnavailable, SourceWriteError
from ..core.models import LevelSettings, level_settings
from ..data.dictionary import WordList, load_word_source
from ..utils.logger import get_logger
from ..utils.pretty import (
    CLEAR_SCREEN,
    format_about,
    format_instructions,
    format_menu,
    format_scores,
    pretty_print_grid,
)
from .grid import LetterGrid
from .placer import GridPlacer
from .scores import DEFAULT_SCORES_PATH, ScoreTracker, load_score_list, record_score
from .searcher import GridSearcher


LOGGER = get_logger(__name__)

DEFAULT_EASY_WORDS = Path("local_db/easy_words.txt")
DEFAULT_HARD_WORDS = Path("local_db/hard_words.txt")


@dataclass
class GameConfig:
    easy_words_path: Path | str = DEFAULT_EASY_WORDS
    hard_words_path: Path | str = DEFAULT_HARD_WORDS
    scores_path: Path | str = DEFAULT_SCORES_PATH
    seed: Optional[int] = None
    max_chances: int = DEFAULT_CHANCES
    max_words: Optional[int] = None
    clear_screen: bool = True

    def word_source(self, mode: Mode) -> Path:
        if Mode(mode) == Mode.EASY:
            return Path(self.easy_words_path)
        return Path(self.hard_words_path)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


class GuessResult(str, Enum):
    """Outcome of checking one guess."""

    FOUND = "FOUND"
    WRONG_LENGTH = "WRONG_LENGTH"
    ALREADY_FOUND = "ALREADY_FOUND"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    NOT_FOUND = "NOT_FOUND"


MODE_CHOICES = {"1": Mode.EASY, "2": Mode.HARD}
MENU_CHOICES = "abcde"


class GameSession:
    """Console game loop with injectable input and output."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_fn: Callable[[str], str] = input,
        stream: Optional[TextIO] = None,
        placer: Optional[GridPlacer] = None,
        searcher: Optional[GridSearcher] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.stream = stream or sys.stdout
        self.rng = self.config.make_rng()
        self.placer = placer or GridPlacer(self.rng)
        self.searcher = searcher or GridSearcher()
        self.tracker = ScoreTracker()
        self.chances = self.config.max_chances
        self.found_words: List[str] = []

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def run(self, mode: Optional[Mode] = None, level: Optional[int] = None) -> None:
        """Play directly when ``mode`` and ``level`` are given, otherwise show the menu."""

        try:
            if mode is not None and level is not None:
                self.play(mode, level)
            else:
                self.run_menu()
        except EOFError:
            LOGGER.info("Input closed; ending session")

    def run_menu(self) -> None:
        while True:
            self._clear()
            self._say(format_menu())
            choice = self._ask("Enter your Choice: ").strip().lower()
            if len(choice) != 1 or choice not in MENU_CHOICES:
                self._say("Invalid input! Please enter a single character (a-e).")
                continue
            if choice == "a":
                self.play()
            elif choice == "b":
                self._show_page(format_instructions(self.config.max_chances))
            elif choice == "c":
                self._show_page(format_about())
            elif choice == "d":
                self.show_scores()
            else:
                return

    def show_scores(self, wait: bool = True) -> List[int]:
        self._clear()
        scores = load_score_list(self.config.scores_path)
        self._say(format_scores(scores))
        if wait:
            self._ask("Press Enter to return to menu...")
        return scores

    def play(self, mode: Optional[Mode] = None, level: Optional[int] = None) -> int:
        """Play from ``level`` upwards and return the final score."""

        if mode is None:
            mode = self._prompt_mode()
        if level is None:
            level = self._prompt_level()

        try:
            source = load_word_source(self.config.word_source(mode), self.config.max_words)
        except SourceUnavailable as exc:
            LOGGER.error("Cannot start game: %s", exc)
            self._say(f"Error: {exc}")
            return 0

        # Grid letters and guesses are lowercase.
        dictionary = WordList(word.lower() for word in source)
        self.tracker.reset()
        self.chances = self.config.max_chances
        self.found_words = []
        current = level
        while current <= MAX_LEVEL:
            settings = level_settings(mode, current)
            try:
                grid = self.placer.place(
                    dictionary, settings.grid_size, settings.word_count, settings.word_length
                )
            except AllocationFailure as exc:
                LOGGER.error("Failed to initialize grid for level %d: %s", current, exc)
                self._say(f"Failed to initialize grid for level {current}")
                break

            found = self.play_level(grid, settings, dictionary)
            if len(found) < settings.word_count:
                self._say(f"Game Over! Final score: {self.tracker.score}")
                self._say("Words found: " + " ".join(self.found_words))
                if self._confirm("Retry level? (y/n): "):
                    self.chances = self.config.max_chances
                    self.tracker.reset()
                    self.found_words = []
                    continue
                break

            self._say(f"Congratulations! You've completed level {current}!")
            if current < MAX_LEVEL and not self._confirm("Continue to next level? (y/n): "):
                break
            current += 1

        self._record(self.tracker.score)
        return self.tracker.score

    # ------------------------------------------------------------------
    # Level loop
    # ------------------------------------------------------------------
    def play_level(self, grid: LetterGrid, settings: LevelSettings, dictionary: WordList) -> List[str]:
        """Take guesses until the level's words are found or chances run out."""

        self._clear()
        pretty_print_grid(grid, label=f"Level {settings.level}", stream=self.stream)
        self._say(
            f"You need to guess {settings.word_count} words to complete level {settings.level}."
        )
        self._say(f"Chances remaining: {self.chances}\n")

        found: List[str] = []
        while self.chances > 0 and len(found) < settings.word_count:
            guess = self._ask("Enter a word to guess: ").strip().lower()
            result = self.evaluate_guess(grid, guess, settings, dictionary, found)
            if result is GuessResult.FOUND:
                found.append(guess)
                self.found_words.append(guess)
                self.tracker.update(True)
                self._say(f"Congratulations! You found: {guess}")
                pretty_print_grid(grid, stream=self.stream)
                self._say(f"Guessed words: {len(found)} / {settings.word_count}")
            else:
                self.chances -= 1
                self.tracker.update(False)
                self._say(self._rejection_message(result, settings))
            self._say(f"Chances remaining: {self.chances}\n")
        return found

    def evaluate_guess(
        self,
        grid: LetterGrid,
        guess: str,
        settings: LevelSettings,
        dictionary: WordList,
        found: Sequence[str],
    ) -> GuessResult:
        """Classify ``guess``; consumes its cells in ``grid`` only when it is found."""

        if len(guess) != settings.word_length:
            return GuessResult.WRONG_LENGTH
        if guess in found:
            return GuessResult.ALREADY_FOUND
        if not dictionary.contains(guess):
            return GuessResult.NOT_IN_DICTIONARY
        if self.searcher.find(grid, guess):
            return GuessResult.FOUND
        return GuessResult.NOT_FOUND

    @staticmethod
    def _rejection_message(result: GuessResult, settings: LevelSettings) -> str:
        if result is GuessResult.WRONG_LENGTH:
            return f"Word must be exactly {settings.word_length} characters long."
        if result is GuessResult.ALREADY_FOUND:
            return "You already guessed this word."
        if result is GuessResult.NOT_IN_DICTIONARY:
            return "That is not a word in the dictionary."
        return "Word not found in grid."

    # ------------------------------------------------------------------
    # Prompts and output
    # ------------------------------------------------------------------
    def _prompt_mode(self) -> Mode:
        self._clear()
        while True:
            self._say("| -> Press (1) for Easy Mode  |")
            self._say("| -> Press (2) for Hard Mode  |")
            choice = self._ask("Enter your choice: ").strip()
            if choice in MODE_CHOICES:
                return MODE_CHOICES[choice]
            self._say("Invalid choice! Please enter 1 or 2.")

    def _prompt_level(self) -> int:
        valid = [str(level) for level in range(1, MAX_LEVEL + 1)]
        while True:
            for level in valid:
                self._say(f"| -> Press ({level}) for Level {level}    |")
            choice = self._ask("Enter your choice: ").strip()
            if choice in valid:
                return int(choice)
            self._say(f"Invalid choice! Please enter {', '.join(valid[:-1])}, or {valid[-1]}.")

    def _confirm(self, prompt: str) -> bool:
        return self._ask(prompt).strip().lower() == "y"

    def _record(self, score: int) -> None:
        try:
            record_score(self.config.scores_path, score)
        except SourceWriteError as exc:
            LOGGER.error("Score not saved: %s", exc)
            self._say(f"Error: {exc}")

    def _show_page(self, text: str) -> None:
        self._clear()
        self._say(text)
        self._ask("Press Enter to return to menu...")

    def _clear(self) -> None:
        if self.config.clear_screen:
            print(CLEAR_SCREEN, end="", file=self.stream)

    def _ask(self, prompt: str) -> str:
        return self.input_fn(prompt)

    def _say(self, text: str) -> None:
        print(text, file=self.stream)
