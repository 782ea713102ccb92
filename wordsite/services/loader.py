"""Word-list loading and normalisation."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)


def load_word_list(path: Union[str, Path]) -> List[str]:
    """Read *path* and return its trimmed, lowercased, non-empty tokens.

    Handles both newline-separated files and a single line of space-separated
    words.  A missing or unreadable file raises :class:`OSError`; the build
    cannot continue without its input, so nothing is retried.
    """
    raw = Path(path).read_text(encoding="utf-8")
    words = [token.strip().lower() for token in raw.split()]
    words = [w for w in words if w]
    logger.info("Loaded word list", extra={"path": str(path), "words": len(words)})
    return words


def filter_by_length(words: Iterable[str], length: int) -> List[str]:
    """Keep only the words that are exactly *length* characters long."""
    return [w for w in words if len(w) == length]
