"""Article extraction: fetch a URL and pull title, body text and metadata."""

import logging
import re
from typing import Optional
from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup, Tag

from ..config.settings import settings
from .models import ExtractedArticle

logger = logging.getLogger(__name__)

# Elements that never hold article prose
_NOISE_TAGS = ["script", "style", "noscript", "nav", "header", "footer", "aside", "form", "iframe", "svg"]

_TEXT_TAGS = ["p", "h2", "h3", "h4", "li", "blockquote", "pre"]

_WHITESPACE = re.compile(r"\s+")


class ArticleExtractionError(Exception):
    """Raised when an article cannot be fetched or parsed."""


def _headers() -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }


async def extract_article(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[ExtractedArticle]:
    """Fetch ``url`` once and extract the article.

    No retries. Returns None when the page holds neither a title nor any
    body text.

    Raises:
        ArticleExtractionError: on network errors, non-2xx responses or
            unparseable HTML.
    """
    logger.info("[EXTRACT] Fetching %s", url)
    try:
        if client is None:
            async with httpx.AsyncClient(
                follow_redirects=True, timeout=settings.fetch_timeout, headers=_headers()
            ) as own_client:
                resp = await own_client.get(url)
        else:
            resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ArticleExtractionError(
            f"HTTP {e.response.status_code} fetching {url}"
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise ArticleExtractionError(f"{type(e).__name__}: {e}") from e

    try:
        article = parse_article_html(resp.text, str(resp.url))
    except Exception as e:
        raise ArticleExtractionError(f"Failed to parse HTML: {e}") from e

    if article is None:
        logger.warning("[EXTRACT] No title or content found at %s", url)
    else:
        logger.info(
            "[EXTRACT] %s: %d words, title=%r",
            article.domain,
            article.word_count,
            article.title[:80],
        )
    return article


def parse_article_html(html: str, url: str) -> Optional[ExtractedArticle]:
    """Extract article fields from raw HTML.

    Body text comes from the first ``<article>``, then ``<main>``, then
    the container holding the most paragraph text.
    """
    soup = BeautifulSoup(html, "html.parser")

    title = _find_title(soup)
    author = _find_author(soup)
    date_published = _find_date(soup)
    lead_image_url = _find_lead_image(soup, url)
    description = _meta_content(soup, property="og:description") or _meta_content(
        soup, name="description"
    )

    for tag in soup.find_all(_NOISE_TAGS):
        # Children of an already removed tag are decomposed with it
        if not tag.decomposed:
            tag.decompose()

    paragraphs = _collect_paragraphs(_find_body(soup))
    content = "\n\n".join(paragraphs)

    if not title and not content:
        return None

    excerpt = description or _truncate(paragraphs[0] if paragraphs else "", settings.excerpt_length)

    return ExtractedArticle(
        url=url,
        title=title,
        author=author,
        content=content,
        excerpt=excerpt,
        domain=urlparse(url).hostname or "",
        date_published=date_published,
        word_count=len(content.split()),
        lead_image_url=lead_image_url,
    )


def _clean(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _truncate(text: str, length: int) -> str:
    if len(text) <= length:
        return text
    return text[:length].rsplit(" ", 1)[0] + "..."


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    meta = soup.find("meta", attrs=attrs)
    if meta and meta.get("content"):
        return _clean(meta["content"])
    return ""


def _find_title(soup: BeautifulSoup) -> str:
    """og:title, then the first <h1>, then <title>."""
    og_title = _meta_content(soup, property="og:title")
    if og_title:
        return og_title

    h1 = soup.find("h1")
    if h1 and h1.get_text(strip=True):
        return _clean(h1.get_text(" "))

    if soup.title and soup.title.string:
        return _clean(soup.title.string)
    return ""


def _find_author(soup: BeautifulSoup) -> str:
    author = _meta_content(soup, name="author") or _meta_content(soup, property="article:author")
    if author:
        return author

    byline = soup.find(attrs={"rel": "author"}) or soup.find(class_=re.compile(r"\b(author|byline)\b"))
    if byline and byline.get_text(strip=True):
        return _clean(byline.get_text(" "))
    return ""


def _find_date(soup: BeautifulSoup) -> Optional[str]:
    for attrs in (
        {"property": "article:published_time"},
        {"name": "pubdate"},
        {"name": "date"},
        {"itemprop": "datePublished"},
    ):
        value = _meta_content(soup, **attrs)
        if value:
            return value

    time_tag = soup.find("time", attrs={"datetime": True})
    if time_tag:
        return time_tag["datetime"]
    return None


def _find_lead_image(soup: BeautifulSoup, base_url: str) -> Optional[str]:
    og_image = _meta_content(soup, property="og:image")
    if og_image:
        return urljoin(base_url, og_image)

    container = soup.find("article") or soup.find("main") or soup.body
    img = container.find("img", src=True) if container else None
    if img:
        return urljoin(base_url, img["src"])
    return None


def _find_body(soup: BeautifulSoup) -> Optional[Tag]:
    for name in ("article", "main"):
        node = soup.find(name)
        if node and node.find("p"):
            return node

    # Fall back to the parent of the densest block of paragraphs
    best = None
    best_len = 0
    for p in soup.find_all("p"):
        parent = p.parent
        if parent is None:
            continue
        length = sum(len(child.get_text(strip=True)) for child in parent.find_all("p", recursive=False))
        if length > best_len:
            best_len = length
            best = parent
    return best or soup.body


def _collect_paragraphs(node: Optional[Tag]) -> list[str]:
    if node is None:
        return []

    paragraphs = []
    for element in node.find_all(_TEXT_TAGS):
        # Nested text tags (p inside li/blockquote) are emitted once via the parent
        if element.find_parent(_TEXT_TAGS) is not None:
            continue
        text = _clean(element.get_text(" "))
        if text:
            paragraphs.append(text)
    return paragraphs
