"""Article fetching and extraction."""

from .extractor import ArticleExtractionError, extract_article, parse_article_html
from .models import ExtractedArticle

__all__ = [
    "ArticleExtractionError",
    "ExtractedArticle",
    "extract_article",
    "parse_article_html",
]
