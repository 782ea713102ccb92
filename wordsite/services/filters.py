"""Prefix / suffix grouping of the word list.

Groups below a minimum size are dropped: a page listing only a handful of
words is thin content and is not worth publishing.
"""

import logging
from typing import Iterable, List

from wordsite.models.page import WordGroup

logger = logging.getLogger(__name__)


def words_starting_with(words: Iterable[str], prefix: str) -> List[str]:
    """Return the distinct words starting with *prefix*, sorted."""
    return sorted({w for w in words if w.startswith(prefix)})


def words_ending_with(words: Iterable[str], suffix: str) -> List[str]:
    """Return the distinct words ending with *suffix*, sorted."""
    return sorted({w for w in words if w.endswith(suffix)})


def prefix_groups(words: List[str], letters: Iterable[str], min_words: int) -> List[WordGroup]:
    """One group per letter in *letters* order, skipping groups under *min_words*."""
    groups: List[WordGroup] = []
    for letter in letters:
        matched = words_starting_with(words, letter)
        if len(matched) < min_words:
            logger.debug("Skipping thin prefix group '%s' (%d words)", letter, len(matched))
            continue
        groups.append(WordGroup(kind="prefix", key=letter, words=matched))
    return groups


def suffix_groups(words: List[str], suffixes: Iterable[str], min_words: int) -> List[WordGroup]:
    """One group per suffix in *suffixes* order, skipping groups under *min_words*."""
    groups: List[WordGroup] = []
    for suffix in suffixes:
        matched = words_ending_with(words, suffix)
        if len(matched) < min_words:
            logger.debug("Skipping thin suffix group '%s' (%d words)", suffix, len(matched))
            continue
        groups.append(WordGroup(kind="suffix", key=suffix, words=matched))
    return groups
