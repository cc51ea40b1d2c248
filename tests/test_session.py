import io
import tempfile
import unittest
from pathlib import Path
from typing import Callable, List, Sequence, Tuple

from wordsearch.core.constants import Mode
from wordsearch.core.models import LevelSettings, level_settings
from wordsearch.data.dictionary import WordList
from wordsearch.engine.grid import LetterGrid
from wordsearch.engine.scores import load_score_list, save_score_list
from wordsearch.engine.session import GameConfig, GameSession, GuessResult


def scripted(answers: Sequence[str]) -> Callable[[str], str]:
    remaining = iter(answers)

    def _input(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _input


class StubPlacer:
    """Hands out the same fixed grid for every level."""

    def __init__(self, rows: List[str]) -> None:
        self.rows = rows
        self.calls: List[Tuple[int, int, int]] = []

    def place(self, words, size, target_count, target_length) -> LetterGrid:
        self.calls.append((size, target_count, target_length))
        return LetterGrid.from_rows(self.rows)


EASY_ROWS = ["anis", "upxx", "xxxx", "xxxx"]


class SessionTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)
        self.easy_words = self.tmpdir / "easy.txt"
        self.easy_words.write_text("an is up go at", encoding="utf-8")
        self.scores = self.tmpdir / "scores.txt"
        self.config = GameConfig(
            easy_words_path=self.easy_words,
            hard_words_path=self.tmpdir / "missing.txt",
            scores_path=self.scores,
            seed=7,
            clear_screen=False,
        )
        self.output = io.StringIO()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def make_session(self, answers: Sequence[str], rows: List[str] = EASY_ROWS) -> GameSession:
        self.placer = StubPlacer(rows)
        return GameSession(
            self.config,
            input_fn=scripted(answers),
            stream=self.output,
            placer=self.placer,
        )


class PlayTests(SessionTestCase):
    def test_completing_a_level_scores_and_records(self) -> None:
        session = self.make_session(["an", "AN", "zz", "go", "is", "up", "n"])
        score = session.play(Mode.EASY, 1)

        self.assertEqual(score, 30)
        self.assertEqual(session.chances, 2)
        self.assertEqual(self.placer.calls, [(10, 3, 2)])
        self.assertEqual(load_score_list(self.scores), [30, 0, 0, 0, 0])
        text = self.output.getvalue()
        self.assertIn("You already guessed this word.", text)
        self.assertIn("That is not a word in the dictionary.", text)
        self.assertIn("Word not found in grid.", text)
        self.assertIn("You've completed level 1!", text)

    def test_wrong_length_costs_a_chance(self) -> None:
        session = self.make_session(["and", "an", "is", "up", "n"])
        session.play(Mode.EASY, 1)
        self.assertEqual(session.chances, 4)
        self.assertIn("Word must be exactly 2 characters long.", self.output.getvalue())

    def test_retry_resets_chances_and_score(self) -> None:
        misses = ["go", "at", "zz", "qq", "xy"]
        session = self.make_session(["an"] + misses + ["y", "an", "is", "up", "n"])
        score = session.play(Mode.EASY, 1)

        self.assertEqual(score, 30)
        self.assertEqual(session.chances, 5)
        self.assertEqual(len(self.placer.calls), 2)
        text = self.output.getvalue()
        self.assertIn("Game Over! Final score: 10", text)
        self.assertIn("Words found: an", text)

    def test_declining_retry_records_score(self) -> None:
        save_score_list(self.scores, [50, 40, 30, 20, 10])
        session = self.make_session(["an", "is", "go", "at", "zz", "qq", "xy", "n"])
        self.assertEqual(session.play(Mode.EASY, 1), 20)
        self.assertEqual(load_score_list(self.scores), [50, 40, 30, 20, 20])

    def test_chances_carry_over_to_next_level(self) -> None:
        session = self.make_session(["zz", "an", "is", "up", "y"])
        session.run(mode=Mode.EASY, level=1)
        self.assertEqual(self.placer.calls[1], (15, 5, 3))
        self.assertEqual(session.chances, 4)

    def test_missing_word_source_reports_error(self) -> None:
        session = self.make_session([])
        self.assertEqual(session.play(Mode.HARD, 1), 0)
        self.assertIn("Error:", self.output.getvalue())
        self.assertEqual(self.placer.calls, [])

    def test_mode_and_level_prompts_reject_bad_input(self) -> None:
        session = self.make_session(["3", "1", "0", "1", "an", "is", "up", "n"])
        self.assertEqual(session.play(), 30)
        text = self.output.getvalue()
        self.assertIn("Invalid choice! Please enter 1 or 2.", text)
        self.assertIn("Invalid choice! Please enter 1, 2, or 3.", text)


class MixedCaseSourceTests(SessionTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.easy_words.write_text("An IS uP go At", encoding="utf-8")

    def test_capitalised_entries_are_credited(self) -> None:
        session = self.make_session(["an", "IS", "Up", "n"])
        self.assertEqual(session.play(Mode.EASY, 1), 30)
        self.assertEqual(session.chances, 5)

    def test_capitalised_entries_placed_by_real_placer_are_found(self) -> None:
        session = GameSession(
            self.config,
            input_fn=scripted(["An", "is", "UP", "n"]),
            stream=self.output,
        )
        self.assertEqual(session.play(Mode.EASY, 1), 30)
        self.assertNotIn("not a word in the dictionary", self.output.getvalue())


class FoundWordsTests(SessionTestCase):
    def test_game_over_lists_words_from_every_level_played(self) -> None:
        misses = ["aa", "bb", "cc", "dd", "ee"]
        session = self.make_session(["an", "is", "up", "y"] + misses + ["n"])
        self.assertEqual(session.play(Mode.EASY, 1), 30)
        self.assertEqual(session.found_words, ["an", "is", "up"])
        self.assertIn("Words found: an is up", self.output.getvalue())

    def test_retry_clears_found_words(self) -> None:
        misses = ["go", "at", "zz", "qq", "xy"]
        session = self.make_session(["an"] + misses + ["y", "is"] + misses + ["n"])
        session.play(Mode.EASY, 1)
        self.assertIn("Words found: is", self.output.getvalue())
        self.assertEqual(session.found_words, ["is"])


class EvaluateGuessTests(SessionTestCase):
    def test_guess_classification(self) -> None:
        session = self.make_session([])
        grid = LetterGrid.from_rows(["cat", "xxx", "xxx"])
        settings = LevelSettings(level=1, grid_size=3, word_count=2, word_length=3)
        words = WordList(["cat", "dog"])

        self.assertIs(session.evaluate_guess(grid, "ca", settings, words, []), GuessResult.WRONG_LENGTH)
        self.assertIs(session.evaluate_guess(grid, "xxx", settings, words, []), GuessResult.NOT_IN_DICTIONARY)
        self.assertEqual(grid.rows()[1], "xxx")
        self.assertIs(session.evaluate_guess(grid, "dog", settings, words, []), GuessResult.NOT_FOUND)
        self.assertIs(session.evaluate_guess(grid, "cat", settings, words, []), GuessResult.FOUND)
        self.assertIs(session.evaluate_guess(grid, "cat", settings, words, ["cat"]), GuessResult.ALREADY_FOUND)


class MenuTests(SessionTestCase):
    def test_menu_navigation(self) -> None:
        session = self.make_session(["zz", "b", "", "c", "", "d", "", "e"])
        session.run()
        text = self.output.getvalue()
        self.assertIn("Invalid input! Please enter a single character (a-e).", text)
        self.assertIn("INSTRUCTIONS", text)
        self.assertIn("ABOUT", text)
        self.assertIn("Score 1: 0", text)
        self.assertTrue(self.scores.exists())

    def test_end_of_input_ends_session(self) -> None:
        session = self.make_session(["a", "1"])
        session.run()
        self.assertEqual(self.placer.calls, [])

    def test_direct_play_skips_menu(self) -> None:
        session = self.make_session(["an", "is", "up", "n"])
        session.run(mode=Mode.EASY, level=1)
        self.assertNotIn("MAIN MENU", self.output.getvalue())
        self.assertEqual(load_score_list(self.scores)[0], 30)


class LevelTableTests(unittest.TestCase):
    def test_tables_match_modes(self) -> None:
        self.assertEqual(level_settings(Mode.EASY, 1), LevelSettings(1, 10, 3, 2))
        self.assertEqual(level_settings(Mode.EASY, 3), LevelSettings(3, 20, 7, 4))
        self.assertEqual(level_settings(Mode.HARD, 2), LevelSettings(2, 15, 5, 6))
        self.assertEqual(level_settings("HARD", 3).word_length, 7)

    def test_unknown_level_raises(self) -> None:
        with self.assertRaises(ValueError):
            level_settings(Mode.EASY, 4)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
