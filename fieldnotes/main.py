#!/usr/bin/env python3
"""
Field Notes article intelligence CLI

Classifies a single article and prints the report as JSON.

Usage:
    python -m fieldnotes.main https://example.com/article
    python -m fieldnotes.main --text-file article.txt --title "Headline"
    python -m fieldnotes.main https://example.com/article --indent 0
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .app.errors import ParseRequestError
from .app.pipeline import analyze_url, validate_url
from .config.settings import settings
from .intel import ArticleText, build_report


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Score and classify a news article for creative-industry AI impact"
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Article URL to fetch and classify",
    )

    parser.add_argument(
        "--text-file",
        type=Path,
        help="Classify a local plain-text file instead of fetching a URL",
    )

    parser.add_argument(
        "--title",
        default="",
        help="Title to use with --text-file",
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2, 0 for compact)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log fetch and classification details to stderr",
    )

    args = parser.parse_args(argv)
    if not args.url and not args.text_file:
        parser.error("either a URL or --text-file is required")
    return args


def classify_file(path: Path, title: str = "") -> dict:
    """Build a report for local text, without article metadata."""
    content = path.read_text(encoding="utf-8")
    report = build_report(ArticleText.of(title, content), max_chars=settings.max_content_chars)
    return report.to_dict()


async def classify_url(url: str) -> dict:
    response = await analyze_url(validate_url(url))
    return response.model_dump()


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    indent = args.indent or None
    try:
        if args.text_file:
            result = classify_file(args.text_file, args.title)
        else:
            result = asyncio.run(classify_url(args.url))
    except ParseRequestError as e:
        print(json.dumps(e.to_payload(), indent=indent), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {args.text_file}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
