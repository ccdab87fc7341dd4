"""
Counting rules that turn raw text into the statistics the readability
formulas consume. The rules are deliberately simple pattern heuristics for
English text and are kept literal so that counts are reproducible.
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from .config import ReadabilityConfig
from .models import TextCounts

logger = logging.getLogger(__name__)

LAYOUT_WHITESPACE_RE = re.compile(r"[ \n\t]")
WORD_SPLIT_RE = re.compile(r"\s", re.ASCII)
SENTENCE_SPLIT_RE = re.compile(r"[.!?]")
SILENT_E_RE = re.compile(r"e?[,.!?]|e\b")
VOWEL_RUN_RE = re.compile(r"[aeiouy]+", re.IGNORECASE | re.ASCII)

POLYSYLLABLE_MIN_RUNS = 3


def split_segments(
    pattern: re.Pattern[str], text: str, keep_trailing_empty: bool = False
) -> List[str]:
    """
    Split text on every single match of pattern.

    Adjacent delimiters yield empty segments which are kept. Empty segments at
    the end are dropped unless keep_trailing_empty is set. When the pattern
    never matches, the whole text is the only segment (even if it is empty).
    """
    parts = pattern.split(text)
    if len(parts) == 1 or keep_trailing_empty:
        return parts
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def count_characters(text: str) -> int:
    """
    Count characters other than spaces, newlines and tabs.

    Characters are UTF-16 code units, so a character outside the Basic
    Multilingual Plane (an emoji, say) counts as two.
    """
    remaining = LAYOUT_WHITESPACE_RE.sub("", text)
    return len(remaining.encode("utf-16-le", "surrogatepass")) // 2


def count_words(text: str, keep_trailing_empty: bool = True) -> int:
    """Count segments produced by splitting on each whitespace character."""
    return len(split_segments(WORD_SPLIT_RE, text, keep_trailing_empty))


def count_sentences(text: str) -> int:
    """Count segments between '.', '!' and '?' terminators."""
    return len(split_segments(SENTENCE_SPLIT_RE, text))


def count_word_syllables(word: str) -> int:
    """Number of maximal vowel runs (a, e, i, o, u, y) in a single word."""
    return len(VOWEL_RUN_RE.findall(word))


def count_syllables(text: str) -> Tuple[int, int]:
    """Return (syllables, polysyllables) for the whole text."""
    cleaned = SILENT_E_RE.sub("", text)
    syllables = 0
    polysyllables = 0
    for word in split_segments(WORD_SPLIT_RE, cleaned):
        runs = count_word_syllables(word)
        if runs >= POLYSYLLABLE_MIN_RUNS:
            polysyllables += 1
        syllables += runs
    return syllables, polysyllables


def analyze(text: str, config: ReadabilityConfig | None = None) -> TextCounts:
    """Derive the five text statistics used by every readability formula."""
    cfg = config or ReadabilityConfig()
    syllables, polysyllables = count_syllables(text)
    counts = TextCounts(
        characters=count_characters(text),
        words=count_words(text, keep_trailing_empty=cfg.keep_trailing_empty_words),
        sentences=count_sentences(text),
        syllables=syllables,
        polysyllables=polysyllables,
    )
    logger.debug(
        "Counted characters=%d words=%d sentences=%d syllables=%d polysyllables=%d",
        counts.characters,
        counts.words,
        counts.sentences,
        counts.syllables,
        counts.polysyllables,
    )
    return counts
