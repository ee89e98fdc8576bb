from __future__ import annotations

from typing import Container, Iterable

PLACEHOLDER = "_"


def mask_word(secret: str, correct: Container[str]) -> str:
    """
    Return a masked representation of the secret word, e.g. 'h _ l l _ '.

    Notes
    -----
    - Reveals letters that have been guessed; hides the others as underscores.
    - Every position is followed by a single space.
    """
    return "".join(f"{c if c in correct else PLACEHOLDER} " for c in secret)


def list_letters(letters: Iterable[str]) -> str:
    """Comma-separated letters, in the order they were guessed."""
    return ", ".join(letters)


def plural_suffix(count: int) -> str:
    return "" if count == 1 else "es"
