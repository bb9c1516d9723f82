"""Timeline mention extraction."""

from .patterns import TIMELINE_PATTERNS, PatternRegistry
from .text import ScanText

MAX_TIMELINE_MENTIONS = 3


def extract_timeline(
    text: ScanText,
    patterns: PatternRegistry = TIMELINE_PATTERNS,
    limit: int = MAX_TIMELINE_MENTIONS,
) -> list[str]:
    """Collect year and relative-time mentions from original-case text.

    Matches are gathered pattern by pattern in registry order (years
    first), deduplicated by exact string keeping the first occurrence,
    then truncated to ``limit``.
    """
    matches: list[str] = []
    for _name, pattern in patterns:
        matches.extend(m.group(0) for m in pattern.finditer(text.original))

    unique = list(dict.fromkeys(matches))
    return unique[:limit]
