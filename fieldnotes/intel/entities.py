"""Entity and company discovery heuristics.

None of this is real named-entity recognition. Capitalized phrases are
pulled out with a regex and filtered against a stoplist; known companies
are plain substring hits against the lowercase buffer.
"""

from dataclasses import dataclass

from .keywords import ENTITY_STOPLIST, KNOWN_COMPANIES
from .patterns import COMPETITOR_OF_PATTERNS, DISCOVERY_PATTERNS, ENTITY_PATTERNS
from .text import ScanText

MAX_ENTITIES = 10
MAX_COMPETITOR_NAMES = 5
MIN_ENTITY_LENGTH = 4


@dataclass(frozen=True)
class DiscoverySignals:
    """Boolean vocabulary checks used for emerging-company tracking."""

    company_launch: bool = False
    product_announcement: bool = False
    funding: bool = False
    launch_news: bool = False
    acquisition: bool = False
    startup: bool = False
    competitive_language: bool = False


def extract_capitalized_entities(text: ScanText, limit: int = MAX_ENTITIES) -> list[str]:
    """Find runs of 1-3 capitalized words that may name an organization.

    Stoplisted words (demonstratives, months, weekdays), phrases of 3
    characters or fewer and all-caps acronyms are dropped.
    """
    phrase = ENTITY_PATTERNS["capitalized_phrase"]
    acronym = ENTITY_PATTERNS["acronym"]

    candidates = dict.fromkeys(m.group(0) for m in phrase.finditer(text.original))
    entities = [
        candidate
        for candidate in candidates
        if candidate not in ENTITY_STOPLIST
        and len(candidate) >= MIN_ENTITY_LENGTH
        and not acronym.match(candidate)
    ]
    return entities[:limit]


def find_company_mentions(text: ScanText) -> list[str]:
    """Known companies present in the text, in table order."""
    return [company for company in KNOWN_COMPANIES if company.lower() in text.buffer]


def extract_competitor_names(text: ScanText, limit: int = MAX_COMPETITOR_NAMES) -> list[str]:
    """Capitalized names following "competes with", "unlike" and similar.

    Content and title are scanned separately so a name never runs on
    into the headline.
    """
    pattern = DISCOVERY_PATTERNS["competitor_naming"]
    names = [m.group(1) for part in (text.segments or (text.original,)) for m in pattern.finditer(part)]
    return names[:limit]


def find_competitor_targets(text: ScanText) -> list[str]:
    """Known companies named right after competitive language."""
    return [company for company, pattern in COMPETITOR_OF_PATTERNS if pattern.search(text.buffer)]


def detect_discovery_signals(text: ScanText) -> DiscoverySignals:
    buffer = text.buffer
    return DiscoverySignals(
        company_launch=DISCOVERY_PATTERNS.search("company_launch", buffer),
        product_announcement=DISCOVERY_PATTERNS.search("product_announcement", buffer),
        funding=DISCOVERY_PATTERNS.search("funding_amount", buffer),
        launch_news=DISCOVERY_PATTERNS.search("launch_news", buffer),
        acquisition=DISCOVERY_PATTERNS.search("acquisition_news", buffer),
        startup=DISCOVERY_PATTERNS.search("startup", buffer),
        competitive_language=DISCOVERY_PATTERNS.search("competitive_language", buffer),
    )
