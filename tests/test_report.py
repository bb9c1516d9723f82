"""End-to-end tests for report assembly."""

from fieldnotes.intel import ArticleText, ScoreSet, build_report
from fieldnotes.intel.report import assess_audience_value


def test_adobe_launch_article():
    report = build_report(ArticleText(
        title="Adobe launches new AI tool that could replace junior designers",
        content="Photoshop users can now automate their workflow.",
    ))

    relevance = report.relevance_analysis
    assert relevance.creativity_signals == 1
    assert relevance.ai_signals == 1
    assert relevance.job_impact_signals == 2
    assert relevance.is_relevant_to_mission
    assert "Adobe" in report.company_mentions
    # One distinct creativity term and one AI term fall short of both the
    # creative-AI and creative-industry thresholds.
    assert report.content_category == "General Tech"
    assert report.career_impact_level == "high"
    assert report.intelligence_category == "Tool Update"
    assert report.discovery_metadata.article_type == "product_launch"
    assert report.discovery_metadata.contains_company_launch
    assert report.foia_potential
    assert "design" in report.creative_sectors


def test_empty_article_never_raises():
    report = build_report(ArticleText())

    relevance = report.relevance_analysis
    assert relevance.creativity_signals == 0
    assert relevance.ai_signals == 0
    assert relevance.job_impact_signals == 0
    assert relevance.total_relevance_score == 0
    assert relevance.is_relevant_to_mission is False
    assert report.creative_sectors == ["none"]
    assert report.career_impact_level == "unknown"
    assert report.timeline_mentions == []
    assert report.company_mentions == []
    assert report.discovery_metadata.capitalized_entities == []
    assert report.discovery_metadata.names_competitors == []
    assert report.discovery_metadata.article_type == "general_news"
    assert report.content_category == "General Tech"
    assert report.intelligence_category == "Industry Development"
    assert report.urgency_score == 0
    assert report.foia_potential is False
    assert report.needs_deeper_research is False


def test_none_fields_treated_as_empty():
    assert build_report(ArticleText.of(None, None)) == build_report(ArticleText())


def test_report_is_deterministic():
    article = ArticleText(title="Runway ships video model", content="Filmmakers react in 2025.")
    assert build_report(article) == build_report(article)


def test_to_dict_uses_wire_names():
    data = build_report(ArticleText(title="Hello")).to_dict()

    assert "scores" not in data
    assert set(data["relevance_analysis"]) == {
        "creativity_signals",
        "ai_signals",
        "job_impact_signals",
        "total_relevance_score",
        "is_relevant_to_mission",
    }
    assert "career_impact_level" in data
    assert set(data["audience_value"]) == {
        "helps_anxious_creatives",
        "provides_actionable_info",
        "relevant_for_career_planning",
    }


def test_policy_vocabulary_sets_foia_potential():
    report = build_report(ArticleText(content="New government regulation on training data"))
    assert report.company_mentions == []
    assert report.foia_potential


def test_max_chars_limits_scanned_content():
    article = ArticleText(title="", content="x" * 50 + " illustrator")
    assert build_report(article).relevance_analysis.creativity_signals == 1
    assert build_report(article, max_chars=50).relevance_analysis.creativity_signals == 0


class TestAudienceValue:
    def test_creative_relevant_article(self):
        value = assess_audience_value(ScoreSet(creativity=1), relevant=True, urgency=0)
        assert value.helps_anxious_creatives
        assert not value.provides_actionable_info
        assert not value.relevant_for_career_planning

    def test_job_impact_and_urgency(self):
        value = assess_audience_value(ScoreSet(job_impact=2), relevant=False, urgency=3)
        assert not value.helps_anxious_creatives
        assert value.provides_actionable_info
        assert value.relevant_for_career_planning
