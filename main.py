"""CLI entrypoint for the console word search game."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from wordsearch.core.constants import DEFAULT_CHANCES, MAX_LEVEL, Mode
from wordsearch.engine.scores import DEFAULT_SCORES_PATH
from wordsearch.engine.session import DEFAULT_EASY_WORDS, DEFAULT_HARD_WORDS, GameConfig, GameSession
from wordsearch.utils.logger import configure_logging, level_from_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the hidden words in a letter grid",
    )
    parser.add_argument(
        "--mode",
        type=str.upper,
        choices=[m.value for m in Mode],
        help="Start straight away in this mode (requires --level)",
    )
    parser.add_argument(
        "--level",
        type=int,
        choices=range(1, MAX_LEVEL + 1),
        help="Starting level (requires --mode)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible grids")
    parser.add_argument(
        "--easy-words",
        type=Path,
        default=DEFAULT_EASY_WORDS,
        help="Word source for easy mode (whitespace-separated words)",
    )
    parser.add_argument(
        "--hard-words",
        type=Path,
        default=DEFAULT_HARD_WORDS,
        help="Word source for hard mode (whitespace-separated words)",
    )
    parser.add_argument("--scores", type=Path, default=DEFAULT_SCORES_PATH, help="Top score file")
    parser.add_argument(
        "--max-chances",
        type=int,
        default=DEFAULT_CHANCES,
        help="Wrong guesses allowed per game",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=None,
        help="Only load the first N words of the word source",
    )
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Print the top scores and exit",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between screens",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        easy_words_path=args.easy_words,
        hard_words_path=args.hard_words,
        scores_path=args.scores,
        seed=args.seed,
        max_chances=args.max_chances,
        max_words=args.max_words,
        clear_screen=not args.no_clear,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))

    if (args.mode is None) != (args.level is None):
        parser.error("--mode and --level must be given together")
    if args.max_chances < 1:
        parser.error("--max-chances must be at least 1")
    if args.max_words is not None and args.max_words < 1:
        parser.error("--max-words must be at least 1")

    session = GameSession(config_from_args(args))
    if args.show_scores:
        session.show_scores(wait=False)
        return
    mode = Mode(args.mode) if args.mode else None
    session.run(mode=mode, level=args.level)


if __name__ == "__main__":  # pragma: no cover
    main()
