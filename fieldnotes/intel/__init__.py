"""Keyword and pattern based article intelligence engine."""

from .report import IntelligenceReport, build_report
from .signals import ScoreSet, is_relevant, score
from .text import ArticleText, ScanText, normalize

__all__ = [
    "ArticleText",
    "IntelligenceReport",
    "ScanText",
    "ScoreSet",
    "build_report",
    "is_relevant",
    "normalize",
    "score",
]
