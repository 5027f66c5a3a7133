"""Word list loading, candidate filtering and statistics."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from .errors import WordSourceError


def read_words(path: str) -> list[str]:
    """Read raw lines from a UTF-8 word list.

    A leading BOM is dropped and undecodable bytes become U+FFFD, so only the
    affected words are lost.
    """
    try:
        content = Path(path).read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        raise WordSourceError(str(exc)) from exc
    return content.splitlines()


def filter_candidates(lines: Iterable[str], min_length: int, max_length: int) -> list[str]:
    """Normalize, filter, dedupe and sort words by length.

    Words are lowercased and trimmed, then kept only when purely alphabetic and
    within ``[min_length, max_length]``. Equal-length words keep file order.
    """
    output: list[str] = []
    seen: set[str] = set()
    for raw in lines:
        word = raw.lower().strip()
        if not min_length <= len(word) <= max_length:
            continue
        if not word.isalpha():
            continue
        if word in seen:
            continue
        seen.add(word)
        output.append(word)
    return sorted(output, key=len)


def load_candidates(
    path: str, min_length: int, max_length: int, *, logger: logging.Logger
) -> list[str]:
    """Load candidates from ``path``; an unreadable file yields no candidates."""
    try:
        lines = read_words(path)
    except WordSourceError as exc:
        logger.error("Error loading %s: %s", path, exc)
        return []
    return filter_candidates(lines, min_length, max_length)


def word_statistics(words: Iterable[str]) -> dict[int, int]:
    """Return word counts keyed by length in ascending order."""
    counts = Counter(len(word) for word in words)
    return {length: counts[length] for length in sorted(counts)}


def report_word_statistics(words: list[str], *, logger: logging.Logger) -> dict[int, int]:
    stats = word_statistics(words)
    logger.info("Found %d words to check", len(words))
    for length, count in stats.items():
        logger.info("%d letter words: %d", length, count)
    return stats
