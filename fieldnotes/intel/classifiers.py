"""Single-label priority classifiers.

Each classifier is an ordered rule table evaluated first-match-wins, so a
single hit in an early rule beats any number of hits in later ones.
"""

from .keywords import CAREER_IMPACT_TIERS, INTELLIGENCE_CATEGORY_TRIGGERS
from .patterns import ARTICLE_TYPE_PATTERNS
from .rules import Rule, first_match, keyword_rules
from .signals import ScoreSet
from .text import ScanText

# Career impact levels, most severe first
HIGH = "high"
MEDIUM = "medium"
LOW = "low"
UNKNOWN = "unknown"

CAREER_IMPACT_RULES = keyword_rules(CAREER_IMPACT_TIERS)

CONTENT_CATEGORY_RULES = [
    Rule("Direct Creative AI Impact", lambda s: s.creativity > 2 and s.ai > 2),
    Rule("Workforce Changes", lambda s: s.job_impact > 3),
    Rule("AI Technology Development", lambda s: s.ai > 3),
    Rule("Creative Industry News", lambda s: s.creativity > 1),
]
DEFAULT_CONTENT_CATEGORY = "General Tech"

INTELLIGENCE_CATEGORY_RULES = keyword_rules(INTELLIGENCE_CATEGORY_TRIGGERS)
DEFAULT_INTELLIGENCE_CATEGORY = "Industry Development"

ARTICLE_TYPE_RULES = [
    Rule(name, lambda text, pattern=pattern: pattern.search(text) is not None)
    for name, pattern in ARTICLE_TYPE_PATTERNS
]
DEFAULT_ARTICLE_TYPE = "general_news"


def classify_career_impact(text: ScanText) -> str:
    return first_match(CAREER_IMPACT_RULES, text.buffer, UNKNOWN)


def classify_content_category(scores: ScoreSet) -> str:
    return first_match(CONTENT_CATEGORY_RULES, scores, DEFAULT_CONTENT_CATEGORY)


def classify_intelligence_category(text: ScanText) -> str:
    return first_match(INTELLIGENCE_CATEGORY_RULES, text.buffer, DEFAULT_INTELLIGENCE_CATEGORY)


def classify_article_type(text: ScanText) -> str:
    """Label the kind of news story from original-case text."""
    return first_match(ARTICLE_TYPE_RULES, text.original, DEFAULT_ARTICLE_TYPE)
