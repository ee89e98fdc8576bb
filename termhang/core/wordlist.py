from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import EmptySourceError, NoMatchError, WordListIOError
from .state import LengthRange

logger = logging.getLogger(__name__)

# Default word list, relative to the working directory.
DEFAULT_WORD_LIST = Path("words.txt")


def _read_lines(path: Path) -> List[str]:
    """
    Decode the word list strictly as UTF-8 and return its words, lower-cased.

    Notes
    -----
    - A missing file or bytes that are not UTF-8 raise `WordListIOError`.
    - Blank lines are dropped. Lines with whitespace inside them hold more
      than one word and are skipped, since a space can never be guessed.
    """
    try:
        raw = path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as exc:
        raise WordListIOError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise WordListIOError(path, exc.strerror or str(exc)) from exc

    words: List[str] = []
    for ln in raw:
        w = ln.strip().lower()
        if not w:
            continue
        if any(c.isspace() for c in w):
            logger.debug("Skipping %r in %s: contains whitespace", ln, path)
            continue
        words.append(w)
    return words


def load_words(path: Union[str, Path] = DEFAULT_WORD_LIST) -> List[str]:
    """
    Load the candidate words from a newline-delimited word list.

    Parameters
    ----------
    path : str | Path
        File holding one word per line.

    Returns
    -------
    List[str]
        Words in file order, lower-cased, blank lines dropped.

    Raises
    ------
    WordListIOError
        The file cannot be read.
    EmptySourceError
        The file holds no words.
    """
    path = Path(path)
    words = _read_lines(path)
    if not words:
        raise EmptySourceError(path)
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


def filter_by_length(words: Iterable[str], length_range: LengthRange) -> List[str]:
    """Keep the words whose character count lies inside `length_range`."""
    return [w for w in words if len(w) in length_range]


def pick_word(
    words: Iterable[str],
    length_range: LengthRange,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Pick one word uniformly at random among those of an allowed length.

    Parameters
    ----------
    words : Iterable[str]
        The full word list.
    length_range : LengthRange
        Inclusive bounds on the word length.
    rng : random.Random | None
        Source of randomness; pass a seeded instance for reproducible picks.

    Notes
    -----
    The list is filtered first and sampled once, so an impossible length
    range fails immediately with `NoMatchError` instead of retrying forever.
    """
    candidates = filter_by_length(words, length_range)
    if not candidates:
        raise NoMatchError(length_range)
    logger.debug("%d words match length %s", len(candidates), length_range)
    return (rng or random.Random()).choice(candidates)
