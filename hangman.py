from __future__ import annotations

import logging
import random
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from dotenv import load_dotenv
from rich.logging import RichHandler

# --- Core game imports ---
from termhang.core.engine import play
from termhang.core.errors import FatalError, GameAborted, NoMatchError
from termhang.core.state import GameResult
from termhang.core.wordlist import load_words, pick_word

# --- Terminal collaborators ---
from termhang.services.config import Settings, load_settings
from termhang.services.terminal import TerminalUI

logger = logging.getLogger("termhang")

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_ABORTED = 130


# =========================
# Session stats (in memory)
# =========================

@dataclass
class SessionStats:
    games: int = 0
    wins: int = 0
    losses: int = 0
    mistakes: int = 0

    def record(self, result: GameResult) -> None:
        self.games += 1
        self.mistakes += result.wrong_count
        if result.won:
            self.wins += 1
        else:
            self.losses += 1

    def summary(self) -> str:
        winrate = (self.wins / self.games * 100.0) if self.games else 0.0
        avg_mistakes = (self.mistakes / self.games) if self.games else 0.0
        return (
            f"Games: {self.games}  Wins: {self.wins}  Losses: {self.losses}  "
            f"Win rate: {winrate:.1f}%  Avg mistakes: {avg_mistakes:.2f}"
        )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _play_round(words: List[str], settings: Settings, rng: random.Random, ui: TerminalUI) -> GameResult:
    word = pick_word(words, settings.game.length_range, rng)
    ui.clear()
    return play(
        word,
        settings.game,
        prompt_for_guess=ui.prompt_for_guess,
        emit=ui.emit,
        end_turn=ui.end_turn,
    )


def main(argv: Optional[Sequence[str]] = None, ui: Optional[TerminalUI] = None) -> int:
    load_dotenv(override=False)  # Load .env into process env
    settings = load_settings(argv)
    _configure_logging(settings.log_level)
    ui = ui or TerminalUI(delay=settings.delay, clear=settings.clear_screen)

    # Fail fast: nothing is played unless the list loads and a word fits.
    try:
        words = load_words(settings.word_list_path)
        rng = random.Random(settings.seed)
        stats = SessionStats()
        while True:
            result = _play_round(words, settings, rng, ui)
            stats.record(result)
            if not settings.play_again or not ui.confirm("Play again?"):
                break
    except NoMatchError as exc:
        ui.error(f"{exc} in '{settings.word_list_path}'")
        return EXIT_FATAL
    except FatalError as exc:
        logger.debug("Fatal error", exc_info=True)
        ui.error(str(exc))
        return EXIT_FATAL
    except GameAborted:
        ui.emit("")
        ui.emit("Game aborted.")
        return EXIT_ABORTED

    if settings.play_again:
        ui.emit(stats.summary())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
