from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

from .errors import InvalidRangeConfigError


GameStatus = Literal["playing", "won", "lost"]
Outcome = Literal["hit", "miss"]

DEFAULT_MAX_WRONG = 8


@dataclass(frozen=True)
class LengthRange:
    """
    Inclusive range of allowed word lengths, e.g. ``3:8``.

    Notes
    -----
    - Both bounds are inclusive; `start` must be >= 1 and <= `end`.
    - Supports `len(word) in length_range`.
    """

    start: int = 3
    end: int = 8

    def __post_init__(self) -> None:
        if self.start < 1:
            raise InvalidRangeConfigError(f"Word length must start at 1 or more, got {self.start}")
        if self.start > self.end:
            raise InvalidRangeConfigError(
                f"Word length range start ({self.start}) is greater than its end ({self.end})"
            )

    def __contains__(self, length: object) -> bool:
        return isinstance(length, int) and self.start <= length <= self.end

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"


@dataclass(frozen=True)
class GameConfig:
    """Per-game parameters, fixed for the lifetime of one game."""

    max_wrong: int = DEFAULT_MAX_WRONG
    length_range: LengthRange = field(default_factory=LengthRange)

    def __post_init__(self) -> None:
        if self.max_wrong < 1:
            raise InvalidRangeConfigError(f"Wrong guesses allowed must be >= 1, got {self.max_wrong}")


@dataclass(frozen=True)
class GuessSet:
    """
    Immutable record of the letters guessed so far.

    Notes
    -----
    - `correct` and `wrong` keep the order the guesses were made in.
    - The two tuples are disjoint and never hold the same letter twice;
      `add` enforces this and returns a new GuessSet, so a game only ever
      grows its guesses.
    """

    correct: Tuple[str, ...] = ()
    wrong: Tuple[str, ...] = ()

    def __contains__(self, letter: object) -> bool:
        return letter in self.correct or letter in self.wrong

    def add(self, letter: str, hit: bool) -> "GuessSet":
        if letter in self:
            raise ValueError(f"'{letter}' has already been guessed")
        if hit:
            return GuessSet(correct=self.correct + (letter,), wrong=self.wrong)
        return GuessSet(correct=self.correct, wrong=self.wrong + (letter,))

    def __len__(self) -> int:
        return len(self.correct) + len(self.wrong)


@dataclass(frozen=True)
class Move:
    """One accepted guess, as recorded in a game's history."""

    guess: str
    outcome: Outcome
    mask: str
    wrong_count: int


@dataclass(frozen=True)
class GameResult:
    """Final snapshot of a finished game."""

    word: str
    status: GameStatus
    guesses: GuessSet
    max_wrong: int
    history: Tuple[Move, ...] = ()

    @property
    def wrong_count(self) -> int:
        return len(self.guesses.wrong)

    @property
    def won(self) -> bool:
        return self.status == "won"
