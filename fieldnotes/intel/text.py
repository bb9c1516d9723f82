"""Article text normalization.

Every classifier reads from a ``ScanText``: a lower-cased buffer for
substring matching and the original-case text for the regex extractors
that care about capitalization.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ArticleText:
    """Title and body of an article. Missing fields are empty strings."""

    title: str = ""
    content: str = ""

    @classmethod
    def of(cls, title: Optional[str], content: Optional[str]) -> "ArticleText":
        return cls(title=title or "", content=content or "")


@dataclass(frozen=True)
class ScanText:
    """Derived views of an article used for matching."""

    buffer: str  # lowercase content + " " + lowercase title
    original: str  # content + " " + title, casing preserved
    segments: tuple[str, ...] = ()  # content and title kept apart


def normalize(article: ArticleText, max_chars: int = 0) -> ScanText:
    """Build the scan views for an article.

    Content comes first, then the title, separated by a single space.
    ``max_chars`` truncates the content before concatenation (0 = no limit).
    """
    content = article.content or ""
    title = article.title or ""
    if max_chars > 0:
        content = content[:max_chars]

    original = content + " " + title
    return ScanText(
        buffer=content.lower() + " " + title.lower(),
        original=original,
        segments=(content, title),
    )
