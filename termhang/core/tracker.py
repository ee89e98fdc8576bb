from __future__ import annotations

import logging
from typing import Optional

from .errors import DuplicateGuessError, GuessError, MalformedGuessError
from .state import GuessSet, Outcome

logger = logging.getLogger(__name__)


def normalize_guess(candidate: str) -> str:
    """
    Turn raw player input into a single lowercase letter.

    Surrounding whitespace is ignored; anything other than exactly one
    remaining character raises `MalformedGuessError`.
    """
    ch = (candidate or "").strip().lower()
    if len(ch) != 1:
        raise MalformedGuessError(candidate)
    return ch


def check_guess(guesses: GuessSet, candidate: str) -> str:
    """Normalize `candidate` and reject it if it was already guessed."""
    ch = normalize_guess(candidate)
    if ch in guesses:
        raise DuplicateGuessError(ch)
    return ch


def validate_guess(guesses: GuessSet, candidate: str) -> Optional[str]:
    """
    Validator handed to the input prompt.

    Returns
    -------
    str | None
        None if `candidate` would be accepted, otherwise the message to show.
    """
    try:
        check_guess(guesses, candidate)
    except GuessError as exc:
        return str(exc)
    return None


class GuessTracker:
    """
    Tracks the correct and wrong letters guessed against one word.

    The tracker owns a `GuessSet` and replaces it on every accepted guess;
    rejected guesses leave it untouched.
    """

    def __init__(self, word: str) -> None:
        self.word = word.lower()
        self._guesses = GuessSet()

    @property
    def guesses(self) -> GuessSet:
        return self._guesses

    def submit(self, candidate: str) -> Outcome:
        """
        Apply a single-letter guess.

        Behavior
        --------
        - Input is case-insensitive; the letter is stored lowercase.
        - Raises `MalformedGuessError` / `DuplicateGuessError` before any change.
        - Returns "hit" if the letter occurs in the word, else "miss".
        """
        ch = check_guess(self._guesses, candidate)
        hit = ch in self.word
        self._guesses = self._guesses.add(ch, hit)
        logger.debug("Guess %r -> %s", ch, "hit" if hit else "miss")
        return "hit" if hit else "miss"

    def validate(self, candidate: str) -> Optional[str]:
        return validate_guess(self._guesses, candidate)

    def wrong_count(self) -> int:
        return len(self._guesses.wrong)

    def correct_letters_revealed_count(self) -> int:
        """Number of positions in the word whose letter has been guessed."""
        return sum(1 for c in self.word if c in self._guesses.correct)
