from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from termhang.core.errors import InvalidRangeConfigError
from termhang.core.state import DEFAULT_MAX_WRONG, GameConfig, LengthRange

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    """Everything the app needs at startup, resolved from CLI flags and env."""

    word_list_path: Path
    game: GameConfig
    seed: Optional[int] = None
    delay: float = 1.0
    clear_screen: bool = True
    play_again: bool = False
    log_level: str = "WARNING"


def parse_range(argument: str) -> LengthRange:
    """
    Parse an inclusive length range written as ``start:end``.

    Errors
    ------
    - Missing colon or more than one colon.
    - A bound that is not a non-negative integer.
    - `start > end` or `start == 0` (raised by `LengthRange`).
    """
    parts = (argument or "").strip().split(":")
    if len(parts) < 2:
        raise InvalidRangeConfigError(f"No ':' in range {argument!r} (should be x:y)")
    if len(parts) > 2:
        raise InvalidRangeConfigError(f"Too many colons in {argument!r}")

    bounds = []
    for part in parts:
        part = part.strip()
        if not part.isdigit():
            raise InvalidRangeConfigError(f"Failed to parse {part!r} into an integer")
        bounds.append(int(part))
    return LengthRange(bounds[0], bounds[1])


def parse_wrong_guesses(argument: str) -> int:
    text = str(argument).strip()
    if not text.isdigit() or int(text) < 1:
        raise InvalidRangeConfigError(f"Wrong guesses allowed must be a positive integer, got {argument!r}")
    return int(text)


def _parse_seed(argument: str) -> int:
    try:
        return int(argument)
    except ValueError as exc:
        raise InvalidRangeConfigError(f"Seed must be an integer, got {argument!r}") from exc


def _parse_delay(argument: str) -> float:
    try:
        delay = float(argument)
    except ValueError as exc:
        raise InvalidRangeConfigError(f"Delay must be a number of seconds, got {argument!r}") from exc
    if delay < 0:
        raise InvalidRangeConfigError(f"Delay must not be negative, got {argument!r}")
    return delay


def _argparse_type(fn):
    """Wrap a parser so argparse reports `InvalidRangeConfigError` as a usage error."""

    def wrapper(value: str):
        try:
            return fn(value)
        except InvalidRangeConfigError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    wrapper.__name__ = fn.__name__
    return wrapper


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def build_parser(env: Optional[Mapping[str, str]] = None) -> argparse.ArgumentParser:
    """
    Build the CLI parser. Defaults come from `env` (the process env by default),
    so a `.env` file loaded with python-dotenv can preconfigure every flag.
    """
    env = os.environ if env is None else env
    parser = argparse.ArgumentParser(
        prog="termhang",
        description="Guess the hidden word one letter at a time.",
    )
    parser.add_argument(
        "-f", "--filename",
        default=env.get("HANGMAN_WORD_LIST", "./words.txt"),
        help="Word list, one word per line (default: ./words.txt)",
    )
    parser.add_argument(
        "-g", "--wrong_guesses",
        dest="wrong_guesses",
        type=_argparse_type(parse_wrong_guesses),
        default=env.get("HANGMAN_WRONG_GUESSES", str(DEFAULT_MAX_WRONG)),
        help="Wrong guesses allowed before the game is lost (default: 8)",
    )
    parser.add_argument(
        "-l", "--word_length",
        dest="word_length",
        type=_argparse_type(parse_range),
        default=env.get("HANGMAN_WORD_LENGTH", "3:8"),
        help="Inclusive word length range as x:y (default: 3:8)",
    )
    parser.add_argument(
        "--seed",
        type=_argparse_type(_parse_seed),
        default=env.get("HANGMAN_SEED"),
        help="Random seed for a reproducible word pick",
    )
    parser.add_argument(
        "--delay",
        type=_argparse_type(_parse_delay),
        default=env.get("HANGMAN_DELAY", "1.0"),
        help="Seconds to pause after each guess (default: 1.0)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        default=_env_flag(env.get("HANGMAN_NO_CLEAR")),
        help="Do not clear the screen between turns",
    )
    parser.add_argument(
        "--play-again",
        action="store_true",
        help="Offer another round after each game and show session stats",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=env.get("HANGMAN_LOG_LEVEL", "WARNING").upper(),
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def load_settings(
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Parse `argv` into `Settings`.

    Invalid values exit through `parser.error` (status 2) before any game
    state exists.
    """
    parser = build_parser(env)
    args = parser.parse_args(argv)
    # argparse only checks `choices` for values given on the command line.
    if args.log_level not in _LOG_LEVELS:
        parser.error(
            f"invalid log level {args.log_level!r} (choose from {', '.join(_LOG_LEVELS)})"
        )
    return Settings(
        word_list_path=Path(args.filename),
        game=GameConfig(max_wrong=args.wrong_guesses, length_range=args.word_length),
        seed=args.seed,
        delay=args.delay,
        clear_screen=not args.no_clear,
        play_again=args.play_again,
        log_level=args.log_level,
    )
