"""Signal scoring and the relevance gate."""

from dataclasses import dataclass
from typing import Iterable

from .keywords import AI_SIGNALS, CREATIVITY_SIGNALS, JOB_IMPACT_SIGNALS


def score(buffer: str, keywords: Iterable[str]) -> int:
    """Count distinct keywords that occur as substrings of ``buffer``.

    A keyword found several times still counts once.
    """
    return sum(1 for keyword in dict.fromkeys(keywords) if keyword in buffer)


def contains_any(buffer: str, keywords: Iterable[str]) -> bool:
    """True if at least one keyword is a substring of ``buffer``."""
    return any(keyword in buffer for keyword in keywords)


@dataclass(frozen=True)
class ScoreSet:
    """Signal counts for one article."""

    creativity: int = 0
    ai: int = 0
    job_impact: int = 0

    @property
    def total(self) -> int:
        return self.creativity + self.ai + self.job_impact


def score_signals(buffer: str) -> ScoreSet:
    """Score the three topic lists against a lowercase scan buffer."""
    return ScoreSet(
        creativity=score(buffer, CREATIVITY_SIGNALS),
        ai=score(buffer, AI_SIGNALS),
        job_impact=score(buffer, JOB_IMPACT_SIGNALS),
    )


def is_relevant(scores: ScoreSet) -> bool:
    """Relevance gate.

    Any creative + AI co-occurrence passes, heavy job-impact language with
    a creative signal passes, otherwise overall density must exceed 5.
    """
    return (
        (scores.creativity > 0 and scores.ai > 0)
        or (scores.job_impact > 2 and scores.creativity > 0)
        or scores.total > 5
    )


def has_cross_industry_potential(scores: ScoreSet) -> bool:
    return scores.creativity > 1 and scores.ai > 1
