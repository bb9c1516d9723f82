from fieldnotes.intel.patterns import TIMELINE_PATTERNS
from fieldnotes.intel.text import ArticleText, normalize
from fieldnotes.intel.timeline import extract_timeline


def _timeline(content):
    return extract_timeline(normalize(ArticleText(content=content)))


def test_years_deduplicated_and_capped():
    result = _timeline("launched in 2024, expanding by 2024, with plans by 2025 and 2026 and 2027")
    assert result == ["2024", "2025", "2026"]
    assert result.count("2024") == 1


def test_relative_phrases_in_pattern_order():
    result = _timeline("Soon, within 2 years, and over the next 6 months.")
    assert result == ["next 6 months", "within 2 years", "Soon"]


def test_years_come_before_relative_phrases():
    assert _timeline("Shipping by end of 2026") == ["2026", "by end of 2026"]


def test_first_seen_casing_kept():
    assert _timeline("Coming Months will tell, the coming months matter") == [
        "Coming Months",
        "coming months",
    ]


def test_non_20xx_numbers_ignored():
    assert _timeline("In 1999 the 12 studios had 3000 staff") == []


def test_empty_text():
    assert _timeline("") == []


def test_registry_order():
    assert TIMELINE_PATTERNS.names() == [
        "year",
        "next_period",
        "within_period",
        "by_year",
        "coming_period",
        "horizon_word",
    ]
