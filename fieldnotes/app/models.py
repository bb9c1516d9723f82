"""Pydantic response models for the web API."""

from pydantic import BaseModel
from typing import Optional


class RelevanceAnalysis(BaseModel):
    """Signal counts and the relevance gate."""

    creativity_signals: int
    ai_signals: int
    job_impact_signals: int
    total_relevance_score: int
    is_relevant_to_mission: bool


class AudienceValue(BaseModel):
    """Audience value flags derived from the scores."""

    helps_anxious_creatives: bool
    provides_actionable_info: bool
    relevant_for_career_planning: bool


class DiscoveryMetadata(BaseModel):
    """Hints for spotting companies not in the known list."""

    contains_company_launch: bool
    names_competitors: list[str] = []
    has_product_announcement: bool
    capitalized_entities: list[str] = []
    article_type: str
    needs_entity_extraction: bool


class EmergingCompanyIndicators(BaseModel):
    is_likely_new_player: bool
    mentions_competitor_to: list[str] = []
    has_funding_news: bool
    has_launch_news: bool
    has_acquisition: bool
    mentions_startup: bool
    competitive_language: bool


class ParsingMetadata(BaseModel):
    parsed_at: str
    parser_version: str
    content_length: int
    has_content: bool
    has_title: bool


class ParseResponse(BaseModel):
    """Response body for a successful /api/parse request."""

    success: bool = True

    # Extracted article
    title: str = ""
    author: str = ""
    content: str = ""
    excerpt: str = ""
    url: str
    domain: str = ""
    published_date: Optional[str] = None
    word_count: int = 0
    lead_image: Optional[str] = None

    # Intelligence analysis
    relevance_analysis: RelevanceAnalysis
    creative_sectors: list[str]
    career_impact_level: str
    timeline_mentions: list[str] = []
    cross_industry_potential: bool
    intelligence_category: str

    # Content classification
    content_category: str
    company_mentions: list[str] = []
    urgency_score: int

    audience_value: AudienceValue
    foia_potential: bool
    needs_deeper_research: bool

    discovery_metadata: DiscoveryMetadata
    emerging_company_indicators: EmergingCompanyIndicators
    parsing_metadata: ParsingMetadata
