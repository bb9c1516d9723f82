"""Creative sector detection.

A text can belong to several sectors at once. When no sector keyword
matches, generic creative vocabulary maps to ``general_creative`` and
anything else to ``none``; the result is never empty.
"""

from .keywords import GENERAL_CREATIVE_TERMS, SECTOR_KEYWORDS
from .signals import contains_any
from .text import ScanText

GENERAL_CREATIVE = "general_creative"
NO_SECTOR = "none"


def detect_sectors(text: ScanText) -> list[str]:
    """Return sector ids in table order."""
    detected = [
        sector
        for sector, keywords in SECTOR_KEYWORDS.items()
        if contains_any(text.buffer, keywords)
    ]
    if detected:
        return detected

    if contains_any(text.buffer, GENERAL_CREATIVE_TERMS):
        return [GENERAL_CREATIVE]
    return [NO_SECTOR]
