from __future__ import annotations

import math
from typing import Any, Dict, Iterable, TypedDict

from .models import ScoreKind, ScoreResult, TextCounts


class CountsPayload(TypedDict):
    words: int
    sentences: int
    characters: int
    syllables: int
    polysyllables: int


class ScorePayload(TypedDict):
    value: float | None
    age: str


def format_statistics(counts: TextCounts, text: str) -> str:
    """Render the original text followed by its statistics."""
    lines = [
        "The text is:",
        text,
        "",
        f"Words: {counts.words}",
        f"Sentences: {counts.sentences}",
        f"Characters: {counts.characters}",
        f"Syllables: {counts.syllables}",
        f"Polysyllables: {counts.polysyllables}",
    ]
    return "\n".join(lines) + "\n"


def format_score(kind: ScoreKind, result: ScoreResult) -> str:
    """Render one score line, e.g. 'Coleman–Liau index: 7.83 (about 13-year-olds).'"""
    return f"{kind.display_name}: {result.value:.2f} (about {result.age}-year-olds)."


def format_scores(results: Iterable[ScoreResult]) -> str:
    return "\n".join(format_score(result.kind, result) for result in results)


def counts_payload(counts: TextCounts) -> CountsPayload:
    return {
        "words": counts.words,
        "sentences": counts.sentences,
        "characters": counts.characters,
        "syllables": counts.syllables,
        "polysyllables": counts.polysyllables,
    }


def summary_payload(
    counts: TextCounts, results: Iterable[ScoreResult]
) -> Dict[str, Any]:
    """Create a JSON-serializable summary; undefined scores become None."""
    scores: Dict[str, ScorePayload] = {}
    for result in results:
        scores[result.kind.value] = {
            "value": result.value if math.isfinite(result.value) else None,
            "age": result.age,
        }
    return {"counts": counts_payload(counts), "scores": scores}
