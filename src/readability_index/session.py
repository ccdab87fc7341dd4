from __future__ import annotations

from typing import List

from .config import ReadabilityConfig
from .models import ALL_SELECTION, ScoreKind, ScoreResult, TextCounts, parse_selection
from .report import format_statistics
from .scoring import score, score_all
from .textstats import analyze


class ReadabilitySession:
    """
    Holds one text and its statistics, computed once at construction.

    Scores are recomputed on each request from the cached counts.
    """

    def __init__(self, text: str, config: ReadabilityConfig | None = None) -> None:
        self._text = text
        self._counts = analyze(text, config)

    @property
    def text(self) -> str:
        return self._text

    @property
    def counts(self) -> TextCounts:
        return self._counts

    def score(self, kind: ScoreKind) -> ScoreResult:
        return score(self._counts, kind)

    def scores(self, selection: str = ALL_SELECTION) -> List[ScoreResult]:
        """Compute the indexes named by selection (ARI, FK, SMOG, CL or all)."""
        return score_all(self._counts, parse_selection(selection))

    def statistics(self) -> str:
        return format_statistics(self._counts, self._text)
