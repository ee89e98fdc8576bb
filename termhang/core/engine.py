from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .display import list_letters, mask_word, plural_suffix
from .errors import GameOverError, GuessError
from .state import GameConfig, GameResult, GameStatus, GuessSet, Move, Outcome
from .tracker import GuessTracker

logger = logging.getLogger(__name__)

Validator = Callable[[str], Optional[str]]
PromptFn = Callable[[Validator], str]
EmitFn = Callable[[str], None]

# At or below this many remaining wrong guesses the board shows a warning.
_LOW_REMAINING = 3


def game_status(word: str, guesses: GuessSet, config: GameConfig) -> GameStatus:
    """
    Derive the status of a game from its GuessSet; nothing is stored.

    The win check runs first: a GuessSet that covers every letter of `word`
    is won even if it is also over budget. The game is lost once
    `guesses.wrong` holds `config.max_wrong` letters.
    """
    if all(c in guesses.correct for c in set(word)):
        return "won"
    if len(guesses.wrong) >= config.max_wrong:
        return "lost"
    return "playing"


class Game:
    """
    A single game of hangman: one secret word, one guess tracker.

    Notes
    -----
    - The status is never stored; it is recomputed from the tracker each time.
    - Once the game is won or lost, `submit` raises `GameOverError`, so a
      finished game never changes again.
    """

    def __init__(self, word: str, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        word = (word or "").strip().lower()
        if not word:
            raise ValueError("The secret word must be non-empty.")
        if len(word) not in self.config.length_range:
            raise ValueError(f"'{word}' is outside the word length range {self.config.length_range}.")
        self.word = word
        self.tracker = GuessTracker(word)
        self._history: List[Move] = []

    @property
    def guesses(self) -> GuessSet:
        return self.tracker.guesses

    @property
    def status(self) -> GameStatus:
        return game_status(self.word, self.tracker.guesses, self.config)

    @property
    def remaining(self) -> int:
        return max(0, self.config.max_wrong - self.tracker.wrong_count())

    def validate(self, candidate: str) -> Optional[str]:
        """Validator for the input prompt; None means the guess is acceptable."""
        if self.status != "playing":
            return "The game is over"
        return self.tracker.validate(candidate)

    def submit(self, candidate: str) -> Outcome:
        if self.status != "playing":
            raise GameOverError(f"The game is already {self.status}")
        outcome = self.tracker.submit(candidate)
        self._history.append(
            Move(
                guess=self.guesses.correct[-1] if outcome == "hit" else self.guesses.wrong[-1],
                outcome=outcome,
                mask=mask_word(self.word, self.guesses.correct),
                wrong_count=self.tracker.wrong_count(),
            )
        )
        return outcome

    def board(self) -> List[str]:
        """Lines shown at the start of a turn."""
        lines = [mask_word(self.word, self.guesses.correct)]
        if self.guesses.wrong:
            n = self.remaining
            if n > _LOW_REMAINING:
                lines.append(f"{n} Incorrect Guess{plural_suffix(n)} Remaining.")
            else:
                lines.append(f"Only {n} Incorrect Guess{plural_suffix(n)} Left!")
            lines.append(f"Wrong Guesses: {list_letters(self.guesses.wrong)}")
        return lines

    def final_message(self) -> List[str]:
        status = self.status
        if status == "won":
            n = self.remaining
            return [
                mask_word(self.word, self.word),
                "You guessed the word",
                f"{self.tracker.wrong_count()} incorrect guesses, "
                f"with {n} wrong guess{plural_suffix(n)} remaining",
            ]
        if status == "lost":
            return [f"You failed, the word was {self.word}"]
        return []

    def result(self) -> GameResult:
        return GameResult(
            word=self.word,
            status=self.status,
            guesses=self.guesses,
            max_wrong=self.config.max_wrong,
            history=tuple(self._history),
        )


def play(
    word: str,
    config: GameConfig,
    prompt_for_guess: PromptFn,
    emit: EmitFn,
    end_turn: Optional[Callable[[], None]] = None,
) -> GameResult:
    """
    Run the turn loop for one game until it is won or lost.

    Parameters
    ----------
    word : str
        The secret word.
    config : GameConfig
        Wrong-guess budget and length range.
    prompt_for_guess : Callable
        Called with a validator; must return a guess. It may re-prompt until
        the validator returns None.
    emit : Callable[[str], None]
        Receives every rendered line.
    end_turn : Callable | None
        Called after each accepted guess (pacing, screen clearing).

    Behavior
    --------
    - The status is evaluated at the start of every turn.
    - A guess rejected by the tracker is reported through `emit` and the same
      turn is retried; it does not use up the budget.
    - `GameAborted` raised by the prompt propagates to the caller.
    """
    game = Game(word, config)
    logger.debug("Starting game with word %r (%s)", game.word, config)

    while game.status == "playing":
        for line in game.board():
            emit(line)

        while True:
            candidate = prompt_for_guess(game.validate)
            try:
                outcome = game.submit(candidate)
            except GuessError as exc:
                emit(str(exc))
                continue
            break

        emit("Correct!" if outcome == "hit" else "Wrong!")
        if end_turn is not None:
            end_turn()

    for line in game.final_message():
        emit(line)
    result = game.result()
    logger.info("Game %s after %d guesses", result.status, len(result.history))
    return result
