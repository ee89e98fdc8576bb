from __future__ import annotations

import time
from typing import Callable, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from termhang.core.errors import GameAborted


class TerminalUI:
    """
    Rich-based terminal front end for the game loop.

    Notes
    -----
    - `emit` prints text as-is (no markup), so guessed characters such as
      '[' are shown literally.
    - Pacing and screen clearing happen in `end_turn` only; they never touch
      game state.
    """

    def __init__(self, console: Optional[Console] = None, delay: float = 1.0, clear: bool = True) -> None:
        self.console = console or Console()
        self.delay = delay
        self.clear_screen = clear

    def emit(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def error(self, text: str) -> None:
        self.console.print(text, style="bold red", markup=False, highlight=False)

    def clear(self) -> None:
        if self.clear_screen:
            self.console.clear()

    def end_turn(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)
        self.clear()

    def prompt_for_guess(self, validator: Callable[[str], Optional[str]]) -> str:
        """
        Ask for a guess until `validator` accepts it.

        Raises
        ------
        GameAborted
            Input ended (EOF) or the player pressed Ctrl-C.
        """
        while True:
            try:
                candidate = Prompt.ask("Enter a guess", console=self.console)
            except (EOFError, KeyboardInterrupt) as exc:
                raise GameAborted("Input closed while waiting for a guess") from exc
            message = validator(candidate)
            if message is None:
                return candidate
            self.error(message)

    def confirm(self, question: str) -> bool:
        try:
            return Confirm.ask(question, console=self.console, default=False)
        except (EOFError, KeyboardInterrupt):
            return False
