from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List


class ScoreKind(str, Enum):
    """Readability indexes the calculator knows how to produce."""

    ARI = "ARI"
    FK = "FK"
    SMOG = "SMOG"
    CL = "CL"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def minimal_range(self) -> bool:
        """True when the age label comes from the minimal column of the table."""
        return self is not ScoreKind.CL


_DISPLAY_NAMES = {
    ScoreKind.ARI: "Automated Readability Index",
    ScoreKind.FK: "Flesch–Kincaid readability tests",
    ScoreKind.SMOG: "Simple Measure of Gobbledygook",
    ScoreKind.CL: "Coleman–Liau index",
}

ALL_SELECTION = "all"
SELECTION_CHOICES = tuple(kind.value for kind in ScoreKind) + (ALL_SELECTION,)


def parse_selection(value: str) -> List[ScoreKind]:
    """Turn a selector (ARI, FK, SMOG, CL or all) into the kinds to compute."""
    if value == ALL_SELECTION:
        return list(ScoreKind)
    try:
        return [ScoreKind(value)]
    except ValueError:
        raise ValueError(
            f"Unknown score '{value}'. Expected one of: {', '.join(SELECTION_CHOICES)}."
        ) from None


@dataclass(frozen=True, slots=True)
class TextCounts:
    """Raw statistics extracted from a block of text."""

    characters: int
    words: int
    sentences: int
    syllables: int
    polysyllables: int


@dataclass(frozen=True, slots=True)
class ScoreResult:
    """A readability index value and the reader age derived from it."""

    kind: ScoreKind
    value: float
    age: str

    @property
    def is_defined(self) -> bool:
        return math.isfinite(self.value)
