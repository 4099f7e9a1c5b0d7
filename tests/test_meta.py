from analyzers import MetaDescriptionAnalyzer
from analyzers.meta import score_meta_description
from conftest import ARTICLE_META


def test_optimal_description(make_page):
    page = make_page(head=f'<meta name="description" content="{ARTICLE_META}">')
    result = MetaDescriptionAnalyzer().analyze(page)
    # 50 length + 20 words + 15 call to action + 5 punctuation
    assert result.score == 90
    assert result.confidence == 100
    assert "Properly punctuated" in result.evidence
    assert "Contains call-to-action words" in result.evidence
    assert "Excellent meta description optimization" in result.evidence


def test_missing_description(make_page):
    result = MetaDescriptionAnalyzer().analyze(make_page())
    assert result.score == 0
    assert result.evidence == ("No meta description found",)
    assert len(result.recommendations) == 2


def test_short_description_without_call_to_action():
    finding = score_meta_description("Tomatoes.")
    # 15 length + 10 words + 5 punctuation
    assert finding.score == 30
    assert "Add call-to-action words to encourage clicks" in finding.recommendations
    assert "Meta description needs significant optimization" in finding.evidence


def test_numbers_and_question_words():
    finding = score_meta_description("How to grow 3 kinds of tomatoes")
    assert "Includes specific numbers or data" in finding.evidence
    assert "Uses question words for engagement" in finding.evidence
    assert "End meta description with proper punctuation" in finding.recommendations
