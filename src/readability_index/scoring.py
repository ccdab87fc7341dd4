from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, List, Tuple

import numpy as np

from .models import ScoreKind, ScoreResult, TextCounts

logger = logging.getLogger(__name__)

OUT_OF_RANGE_AGE = "24+"

# Ceiling of a score -> (minimal age, maximal age).
AGE_TABLE: Dict[int, Tuple[str, str]] = {
    1: ("5", "6"),
    2: ("6", "7"),
    3: ("7", "9"),
    4: ("9", "10"),
    5: ("10", "11"),
    6: ("11", "12"),
    7: ("12", "13"),
    8: ("13", "14"),
    9: ("14", "15"),
    10: ("15", "16"),
    11: ("16", "17"),
    12: ("17", "18"),
    13: ("18", "24"),
}


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division that yields inf/nan instead of raising on zero."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def automated_readability_index(counts: TextCounts) -> float:
    return (
        4.71 * _ratio(counts.characters, counts.words)
        + 0.5 * _ratio(counts.words, counts.sentences)
        - 21.43
    )


def flesch_kincaid(counts: TextCounts) -> float:
    return (
        0.39 * _ratio(counts.words, counts.sentences)
        + 11.8 * _ratio(counts.syllables, counts.words)
        - 15.59
    )


def smog(counts: TextCounts) -> float:
    with np.errstate(invalid="ignore"):
        root = np.sqrt(counts.polysyllables * _ratio(30, counts.sentences))
    return 1.043 * float(root) + 3.1291


def coleman_liau(counts: TextCounts) -> float:
    letters = _ratio(counts.characters, counts.words) * 100
    sentences = _ratio(counts.sentences, counts.words) * 100
    return 0.0588 * letters - 0.296 * sentences - 15.8


FORMULAS: Dict[ScoreKind, Callable[[TextCounts], float]] = {
    ScoreKind.ARI: automated_readability_index,
    ScoreKind.FK: flesch_kincaid,
    ScoreKind.SMOG: smog,
    ScoreKind.CL: coleman_liau,
}


def age_for_score(value: float, minimal: bool = True) -> str:
    """
    Map a score to an approximate reader age.

    The score is rounded up to the next integer and looked up in AGE_TABLE;
    keys outside 1..13 and non-finite scores map to "24+".
    """
    if not math.isfinite(value):
        return OUT_OF_RANGE_AGE
    ages = AGE_TABLE.get(math.ceil(value))
    if ages is None:
        return OUT_OF_RANGE_AGE
    return ages[0] if minimal else ages[1]


def score(counts: TextCounts, kind: ScoreKind) -> ScoreResult:
    """Compute one readability index from text statistics."""
    value = FORMULAS[kind](counts)
    if not math.isfinite(value):
        logger.warning(
            "%s is undefined for words=%d sentences=%d (value=%s)",
            kind.value,
            counts.words,
            counts.sentences,
            value,
        )
    return ScoreResult(kind=kind, value=value, age=age_for_score(value, kind.minimal_range))


def score_all(
    counts: TextCounts, kinds: Iterable[ScoreKind] | None = None
) -> List[ScoreResult]:
    """Compute several indexes, defaulting to every kind in ARI, FK, SMOG, CL order."""
    selected = list(ScoreKind) if kinds is None else list(kinds)
    return [score(counts, kind) for kind in selected]
