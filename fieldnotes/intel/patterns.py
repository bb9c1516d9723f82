"""Named, precompiled regex patterns.

Patterns are declared as ``(name, regex, flags)`` and compiled once at
import. A registry preserves declaration order so extractors that walk it
always visit patterns in the same sequence.
"""

import re
from typing import Iterator, Sequence

from .keywords import KNOWN_COMPANIES


class PatternRegistry:
    """Ordered collection of compiled patterns addressable by name."""

    def __init__(self, patterns: Sequence[tuple[str, str, int]]):
        self._patterns: dict[str, re.Pattern] = {}
        for name, regex, flags in patterns:
            if name in self._patterns:
                raise ValueError(f"Duplicate pattern name: {name}")
            self._patterns[name] = re.compile(regex, flags)

    def __getitem__(self, name: str) -> re.Pattern:
        return self._patterns[name]

    def __iter__(self) -> Iterator[tuple[str, re.Pattern]]:
        return iter(self._patterns.items())

    def __len__(self) -> int:
        return len(self._patterns)

    def names(self) -> list[str]:
        return list(self._patterns)

    def search(self, name: str, text: str) -> bool:
        return self._patterns[name].search(text) is not None


TIMELINE_PATTERNS = PatternRegistry([
    ("year", r"\b20\d{2}\b", 0),
    ("next_period", r"next \d+ (?:months?|years?)", re.IGNORECASE),
    ("within_period", r"within \d+ (?:months?|years?)", re.IGNORECASE),
    ("by_year", r"by (?:end of )?20\d{2}", re.IGNORECASE),
    ("coming_period", r"coming (?:months?|years?)", re.IGNORECASE),
    ("horizon_word", r"(?:immediate|soon|near-term|long-term)", re.IGNORECASE),
])

# Evaluated against original-case text. "Series A" style rounds need a
# single capital letter; every other rule ignores case.
ARTICLE_TYPE_PATTERNS = PatternRegistry([
    ("funding_news", r"(?i:funding|raises|raised \$|seed round|venture capital)|[Ss]eries [A-Z]\b", 0),
    ("product_launch", r"launches|debuts|ships|releases|unveils|introduces", re.IGNORECASE),
    ("acquisition", r"acquires|acquired|merger|acquisition|buys|bought", re.IGNORECASE),
    ("partnership", r"partnership|partners with|collaboration|teams up|joins forces", re.IGNORECASE),
    ("workforce_reduction", r"layoffs|cuts|downsizing|reduces workforce", re.IGNORECASE),
    ("expansion", r"expands|expansion|grows|hiring|recruitment", re.IGNORECASE),
])

DISCOVERY_PATTERNS = PatternRegistry([
    ("company_launch", r"launches|debuts|introduces|unveils", re.IGNORECASE),
    ("product_announcement", r"announces|announced|revealing|revealed", re.IGNORECASE),
    (
        "competitor_naming",
        r"(?i:competes with|alternative to|better than|unlike)\s+([A-Z][a-z]+(?: [A-Z][a-z]+){0,2})",
        0,
    ),
    (
        "funding_amount",
        r"raises|raised|funding|series [a-z]\b|\$\d+(?:[.,]\d+)?\s*(?:[mbk]\b|million|billion)",
        re.IGNORECASE,
    ),
    ("launch_news", r"launches|launched|debuts|unveils", re.IGNORECASE),
    ("acquisition_news", r"acquires|acquired|acquisition|buys", re.IGNORECASE),
    ("startup", r"startup|new company|founded", re.IGNORECASE),
    ("competitive_language", r"competes with|alternative to|rival|challenger|disrupting", re.IGNORECASE),
])

ENTITY_PATTERNS = PatternRegistry([
    ("capitalized_phrase", r"\b[A-Z][a-z]+(?: [A-Z][a-z]+){0,2}\b", 0),
    ("acronym", r"^[A-Z]+$", 0),
])

# One "<competitive trigger> <company>" pattern per known company.
COMPETITOR_OF_PATTERNS = PatternRegistry([
    (
        company,
        r"(?:alternative to|competes with|rival to|challenges?) " + re.escape(company),
        re.IGNORECASE,
    )
    for company in KNOWN_COMPANIES
])
