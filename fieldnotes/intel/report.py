"""Assemble the intelligence report for one article.

Each extractor runs exactly once over the normalized text. Composite
flags are derived only from values already computed here.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from .classifiers import (
    classify_article_type,
    classify_career_impact,
    classify_content_category,
    classify_intelligence_category,
)
from .entities import (
    detect_discovery_signals,
    extract_capitalized_entities,
    extract_competitor_names,
    find_company_mentions,
    find_competitor_targets,
)
from .keywords import POLICY_SIGNALS, URGENCY_SIGNALS
from .sectors import detect_sectors
from .signals import ScoreSet, has_cross_industry_potential, is_relevant, score, score_signals
from .text import ArticleText, normalize
from .timeline import extract_timeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelevanceAnalysis:
    creativity_signals: int
    ai_signals: int
    job_impact_signals: int
    total_relevance_score: int
    is_relevant_to_mission: bool


@dataclass(frozen=True)
class AudienceValue:
    helps_anxious_creatives: bool
    provides_actionable_info: bool
    relevant_for_career_planning: bool


@dataclass(frozen=True)
class DiscoveryMetadata:
    contains_company_launch: bool
    names_competitors: list[str]
    has_product_announcement: bool
    capitalized_entities: list[str]
    article_type: str
    needs_entity_extraction: bool


@dataclass(frozen=True)
class EmergingCompanyIndicators:
    is_likely_new_player: bool
    mentions_competitor_to: list[str]
    has_funding_news: bool
    has_launch_news: bool
    has_acquisition: bool
    mentions_startup: bool
    competitive_language: bool


@dataclass(frozen=True)
class IntelligenceReport:
    """Classification output for one article, keyed by wire field names."""

    relevance_analysis: RelevanceAnalysis
    creative_sectors: list[str]
    career_impact_level: str
    timeline_mentions: list[str]
    cross_industry_potential: bool
    intelligence_category: str
    content_category: str
    company_mentions: list[str]
    urgency_score: int
    audience_value: AudienceValue
    foia_potential: bool
    needs_deeper_research: bool
    discovery_metadata: DiscoveryMetadata
    emerging_company_indicators: EmergingCompanyIndicators
    scores: ScoreSet = field(repr=False, compare=False, default_factory=ScoreSet)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data.pop("scores")
        return data


def assess_audience_value(scores: ScoreSet, relevant: bool, urgency: int) -> AudienceValue:
    return AudienceValue(
        helps_anxious_creatives=relevant and (scores.creativity > 0 or scores.job_impact > 1),
        provides_actionable_info=scores.job_impact > 0 or urgency > 2,
        relevant_for_career_planning=scores.job_impact > 1 or scores.creativity > 2,
    )


def build_report(article: ArticleText, max_chars: int = 0) -> IntelligenceReport:
    """Run every classifier over ``article`` and assemble the report."""
    text = normalize(article, max_chars=max_chars)

    scores = score_signals(text.buffer)
    urgency = score(text.buffer, URGENCY_SIGNALS)
    policy = score(text.buffer, POLICY_SIGNALS)
    relevant = is_relevant(scores)

    companies = find_company_mentions(text)
    signals = detect_discovery_signals(text)
    article_type = classify_article_type(text)

    report = IntelligenceReport(
        relevance_analysis=RelevanceAnalysis(
            creativity_signals=scores.creativity,
            ai_signals=scores.ai,
            job_impact_signals=scores.job_impact,
            total_relevance_score=scores.total,
            is_relevant_to_mission=relevant,
        ),
        creative_sectors=detect_sectors(text),
        career_impact_level=classify_career_impact(text),
        timeline_mentions=extract_timeline(text),
        cross_industry_potential=has_cross_industry_potential(scores),
        intelligence_category=classify_intelligence_category(text),
        content_category=classify_content_category(scores),
        company_mentions=companies,
        urgency_score=urgency,
        audience_value=assess_audience_value(scores, relevant, urgency),
        foia_potential=bool(companies) or policy > 0,
        needs_deeper_research=scores.total > 7 or urgency > 3,
        discovery_metadata=DiscoveryMetadata(
            contains_company_launch=signals.company_launch,
            names_competitors=extract_competitor_names(text),
            has_product_announcement=signals.product_announcement,
            capitalized_entities=extract_capitalized_entities(text),
            article_type=article_type,
            needs_entity_extraction=(
                scores.total > 5
                and not companies
                and (scores.creativity > 0 or scores.ai > 0)
            ),
        ),
        emerging_company_indicators=EmergingCompanyIndicators(
            is_likely_new_player=signals.startup and (scores.ai > 0 or scores.creativity > 0),
            mentions_competitor_to=find_competitor_targets(text),
            has_funding_news=signals.funding,
            has_launch_news=signals.launch_news,
            has_acquisition=signals.acquisition,
            mentions_startup=signals.startup,
            competitive_language=signals.competitive_language,
        ),
        scores=scores,
    )

    logger.debug(
        "[REPORT] scores=%d/%d/%d relevant=%s category=%s type=%s",
        scores.creativity,
        scores.ai,
        scores.job_impact,
        relevant,
        report.content_category,
        article_type,
    )
    return report
