from __future__ import annotations

from pathlib import Path
from typing import Union


class HangmanError(Exception):
    """Base class for every error raised by the game."""


# =====================
# Fatal (before a game)
# =====================

class FatalError(HangmanError):
    """Configuration or resource problem; the game never starts."""


class WordListIOError(FatalError):
    """The word list file could not be read."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"Could not read word list '{self.path}'"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class EmptySourceError(FatalError):
    """The word list was readable but held no words."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"Word list '{self.path}' does not contain any words")


class NoMatchError(FatalError):
    """No word in the list has a length inside the configured range."""

    def __init__(self, length_range: object) -> None:
        self.length_range = length_range
        super().__init__(f"No word matches the length criteria of {length_range}")


class InvalidRangeConfigError(FatalError, ValueError):
    """Malformed length range or a non-positive wrong-guess budget."""


# ==========================
# Recoverable (within a turn)
# ==========================

class GuessError(HangmanError):
    """A rejected guess. The turn is retried; nothing is mutated."""


class MalformedGuessError(GuessError):
    def __init__(self, candidate: str) -> None:
        self.candidate = candidate
        super().__init__("Input must be one character")


class DuplicateGuessError(GuessError):
    def __init__(self, letter: str) -> None:
        self.letter = letter
        super().__init__(f"You already guessed '{letter}'")


# ===========
# Game flow
# ===========

class GameOverError(HangmanError):
    """A guess was submitted after the game reached a terminal state."""


class GameAborted(HangmanError):
    """Input ended or was interrupted while waiting for a guess."""
