"""Tests for entity, company and discovery heuristics."""

from fieldnotes.intel.entities import (
    detect_discovery_signals,
    extract_capitalized_entities,
    extract_competitor_names,
    find_company_mentions,
    find_competitor_targets,
)
from fieldnotes.intel.text import ArticleText, normalize


def _text(content="", title=""):
    return normalize(ArticleText(title=title, content=content))


class TestCapitalizedEntities:
    def test_stoplist_words_excluded(self):
        entities = extract_capitalized_entities(_text("The Monday Report from January"))
        assert "The" not in entities
        assert "Monday" not in entities
        assert "January" not in entities

    def test_short_words_excluded(self):
        assert extract_capitalized_entities(_text("We met Bob at Acme Corp today.")) == ["Acme Corp"]

    def test_acronyms_never_returned(self):
        assert extract_capitalized_entities(_text("NASA and IBM")) == []

    def test_deduplicated_and_capped(self):
        names = "Alpha, Bravo, Charlie, Delta, Echo, Foxtrot, Golf, Hotel, India, Juliet, Kilo, Lima, Alpha"
        entities = extract_capitalized_entities(_text(names))
        assert entities == [
            "Alpha", "Bravo", "Charlie", "Delta", "Echo",
            "Foxtrot", "Golf", "Hotel", "India", "Juliet",
        ]

    def test_title_scanned_after_content(self):
        assert extract_capitalized_entities(_text("Made by Figma.", title="Canva news")) == [
            "Made",
            "Figma",
            "Canva",
        ]


class TestCompanies:
    def test_table_order_not_text_order(self):
        assert find_company_mentions(_text("Figma and Adobe and OpenAI")) == ["OpenAI", "Adobe", "Figma"]

    def test_case_insensitive(self):
        assert find_company_mentions(_text("a midjourney prompt")) == ["Midjourney"]

    def test_none(self):
        assert find_company_mentions(_text("")) == []


class TestCompetitors:
    def test_names_after_trigger(self):
        text = _text("Krita is an alternative to Adobe Photoshop and competes with Procreate.")
        assert extract_competitor_names(text) == ["Adobe Photoshop", "Procreate"]

    def test_trigger_case_insensitive(self):
        assert extract_competitor_names(_text("Unlike Canva, it is free.")) == ["Canva"]

    def test_name_stops_at_title(self):
        text = _text("It is better than Photoshop", title="Krita Gains Users")
        assert extract_competitor_names(text) == ["Photoshop"]

    def test_name_at_most_three_words(self):
        text = _text("It competes with Adobe Creative Cloud Express Suite.")
        assert extract_competitor_names(text) == ["Adobe Creative Cloud"]

    def test_capped_at_five(self):
        content = " ".join(f"It competes with {name}." for name in
                           ["Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot"])
        assert len(extract_competitor_names(_text(content))) == 5

    def test_known_company_targets(self):
        assert find_competitor_targets(_text("A new rival to Figma appears")) == ["Figma"]
        assert find_competitor_targets(_text("Figma is popular")) == []


class TestDiscoverySignals:
    def test_funding_amounts(self):
        assert detect_discovery_signals(_text("It costs $5M")).funding
        assert detect_discovery_signals(_text("A $2.5 billion market")).funding
        assert not detect_discovery_signals(_text("It costs $5 today")).funding

    def test_vocabulary_flags(self):
        signals = detect_discovery_signals(
            _text("The startup unveils a challenger and announced it acquired a rival")
        )
        assert signals.company_launch
        assert signals.launch_news
        assert signals.product_announcement
        assert signals.acquisition
        assert signals.startup
        assert signals.competitive_language

    def test_empty(self):
        signals = detect_discovery_signals(_text(""))
        assert not any(vars(signals).values())
