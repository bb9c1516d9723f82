"""Fetch-and-classify pipeline for a single article URL."""

import logging
from datetime import datetime, timezone
from urllib.parse import urlparse

from ..config.settings import settings
from ..intel import ArticleText, IntelligenceReport, build_report
from ..news.extractor import ArticleExtractionError, extract_article
from ..news.models import ExtractedArticle
from .errors import ExtractionFailure, InvalidInputError
from .models import ParseResponse

logger = logging.getLogger(__name__)


def validate_url(url) -> str:
    """Return ``url`` if it has a scheme and a host, else raise InvalidInputError."""
    if not isinstance(url, str):
        raise InvalidInputError(url, f"Expected a string, got {type(url).__name__}")
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidInputError(url, str(e)) from e
    if not parsed.scheme or not parsed.netloc:
        raise InvalidInputError(url, f"Invalid URL: {url}")
    return url


async def analyze_url(url: str) -> ParseResponse:
    """Extract the article at ``url`` once and build its report.

    Raises:
        ExtractionFailure: the extractor raised or found no article.
    """
    try:
        article = await extract_article(url)
    except ArticleExtractionError as e:
        raise ExtractionFailure("Failed to parse article", url=url, details=str(e)) from e
    except Exception as e:
        logger.exception("[PARSE] Extractor crashed for %s", url)
        raise ExtractionFailure("Failed to parse article", url=url, details=str(e)) from e

    if article is None:
        raise ExtractionFailure(
            "Parser returned empty result",
            url=url,
            details="No title or content could be extracted",
        )

    report = build_report(
        ArticleText.of(article.title, article.content),
        max_chars=settings.max_content_chars,
    )
    logger.info(
        "[PARSE] %s relevant=%s category=%s sectors=%s",
        url,
        report.relevance_analysis.is_relevant_to_mission,
        report.content_category,
        ",".join(report.creative_sectors),
    )
    return build_response(article, report, url)


def build_response(article: ExtractedArticle, report: IntelligenceReport, url: str) -> ParseResponse:
    """Merge extracted article fields with the intelligence report."""
    return ParseResponse(
        success=True,
        title=article.title or "",
        author=article.author or "",
        content=article.content or "",
        excerpt=article.excerpt or "",
        url=article.url or url,
        domain=article.domain or urlparse(url).hostname or "",
        published_date=article.date_published or None,
        word_count=article.word_count or 0,
        lead_image=article.lead_image_url or None,
        **report.to_dict(),
        parsing_metadata={
            "parsed_at": datetime.now(timezone.utc).isoformat(),
            "parser_version": settings.parser_version,
            "content_length": len(article.content or ""),
            "has_content": bool(article.content),
            "has_title": bool(article.title),
        },
    )
