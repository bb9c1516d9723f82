"""Data models for extracted articles."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ExtractedArticle:
    """Article fields pulled from a fetched web page."""

    url: str
    title: str = ""
    author: str = ""
    content: str = ""  # plain text, paragraphs separated by blank lines
    excerpt: str = ""
    domain: str = ""
    date_published: Optional[str] = None  # ISO string as published by the page
    word_count: int = 0
    lead_image_url: Optional[str] = None
