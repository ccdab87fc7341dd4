"""
readability_index package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .models import ScoreKind, ScoreResult, TextCounts, parse_selection
from .report import format_score, format_scores, format_statistics, summary_payload
from .scoring import age_for_score, score, score_all
from .session import ReadabilitySession
from .textstats import analyze

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "ScoreKind",
    "ScoreResult",
    "TextCounts",
    "parse_selection",
    "analyze",
    "score",
    "score_all",
    "age_for_score",
    "format_statistics",
    "format_score",
    "format_scores",
    "summary_payload",
    "ReadabilitySession",
]

__version__ = "0.1.0"
