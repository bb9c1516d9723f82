"""Tests for HTML article extraction."""

import asyncio

import httpx
import pytest

from fieldnotes.news.extractor import ArticleExtractionError, extract_article, parse_article_html

ARTICLE_URL = "https://www.example.com/news/studios"

ARTICLE_HTML = """
<html>
<head>
  <title>Fallback Title</title>
  <meta property="og:title" content="Studios Adopt Generative Tools">
  <meta name="author" content="Jane Doe">
  <meta property="article:published_time" content="2025-03-01T10:00:00Z">
  <meta property="og:image" content="/img/lead.jpg">
  <meta name="description" content="A look at studios.">
</head>
<body>
  <nav><p>Home | About</p></nav>
  <article>
    <h1>Studios Adopt Generative Tools</h1>
    <p>Animation studios are testing new tools.</p>
    <p>Some artists worry about their jobs.</p>
    <script>var tracking = 1;</script>
  </article>
  <footer><p>Copyright</p></footer>
</body>
</html>
"""

PLAIN_HTML = """
<html><head><title>Plain Page</title></head>
<body><div><p>First paragraph here.</p><p>Second one.</p></div></body></html>
"""


def test_parse_article_metadata_and_body():
    article = parse_article_html(ARTICLE_HTML, ARTICLE_URL)

    assert article is not None
    assert article.title == "Studios Adopt Generative Tools"
    assert article.author == "Jane Doe"
    assert article.date_published == "2025-03-01T10:00:00Z"
    assert article.lead_image_url == "https://www.example.com/img/lead.jpg"
    assert article.excerpt == "A look at studios."
    assert article.domain == "www.example.com"
    assert article.content == (
        "Animation studios are testing new tools.\n\nSome artists worry about their jobs."
    )
    assert article.word_count == 12


def test_parse_plain_page_fallbacks():
    article = parse_article_html(PLAIN_HTML, "https://example.org/p")

    assert article.title == "Plain Page"
    assert article.author == ""
    assert article.date_published is None
    assert article.lead_image_url is None
    assert article.excerpt == "First paragraph here."
    assert article.content == "First paragraph here.\n\nSecond one."


def test_parse_empty_page_returns_none():
    assert parse_article_html("<html><head></head><body></body></html>", "https://example.org") is None


def _run_with_transport(handler, url=ARTICLE_URL):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await extract_article(url, client=client)

    return asyncio.run(run())


def test_extract_article_fetches_once():
    calls = []

    def handler(request):
        calls.append(str(request.url))
        return httpx.Response(200, text=ARTICLE_HTML)

    article = _run_with_transport(handler)

    assert calls == [ARTICLE_URL]
    assert article.url == ARTICLE_URL
    assert article.title == "Studios Adopt Generative Tools"


def test_extract_article_http_error():
    with pytest.raises(ArticleExtractionError, match="HTTP 404"):
        _run_with_transport(lambda request: httpx.Response(404))


def test_extract_article_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ArticleExtractionError, match="ConnectError"):
        _run_with_transport(handler)
