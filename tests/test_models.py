"""
Tests for data models and the detection history.
"""
import pydantic
import pytest

from models.detection import DetectionRequest, DetectionResult, Verdict
from models.history import DetectionHistory
from models.paper import ResearchPaper, ResearchRequest

from conftest import make_paper


def _result(score, verdict=Verdict.FAKE):
    return DetectionResult(verdict=verdict, score=score, cleaned_input="text", reasoning=None)


class TestDetectionHistory:

    def test_newest_first(self):
        history = DetectionHistory()
        history.add("first", _result(0.1, Verdict.REAL))
        history.add("second", _result(0.9))

        assert [e.input_preview for e in history] == ["second", "first"]

    def test_sixth_insertion_evicts_oldest(self):
        history = DetectionHistory()
        for i in range(6):
            history.add(f"article {i}", _result(0.6))

        assert len(history) == 5
        previews = [e.input_preview for e in history]
        assert "article 0" not in previews
        assert previews[0] == "article 5"

    def test_never_exceeds_limit(self):
        history = DetectionHistory(limit=5)
        for i in range(20):
            history.add(str(i), _result(0.2, Verdict.REAL))
            assert len(history) <= 5

    def test_preview_truncated(self):
        history = DetectionHistory()
        entry = history.add("x" * 60, _result(0.7))

        assert entry.input_preview == "x" * 50 + "..."
        assert entry.verdict == Verdict.FAKE
        assert entry.score == 0.7

    def test_clear(self):
        history = DetectionHistory()
        history.add("a", _result(0.7))
        history.clear()

        assert history.entries == []

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            DetectionHistory(limit=0)


def test_detection_request_url_check():
    assert DetectionRequest(input="https://example.com").is_url
    assert DetectionRequest(input="  http://example.com ").is_url
    assert not DetectionRequest(input="Read https://example.com").is_url


def test_detection_request_blank_rejected():
    with pytest.raises(pydantic.ValidationError):
        DetectionRequest(input="  ")


def test_detection_result_to_dict():
    result = DetectionResult(verdict=Verdict.REAL, score=0.25, cleaned_input="clean", reasoning="why")

    assert result.to_dict() == {"result": "Real", "score": 0.25, "cleanedInput": "clean", "reasoning": "why"}


def test_paper_markdown_rendering():
    payload = make_paper()
    payload["sections"][0]["subsections"] = [{"title": "Background", "content": "Prior work."}]
    paper = ResearchPaper.model_validate(payload)

    markdown = paper.to_markdown()

    assert markdown.startswith("# Misinformation Dynamics on Social Platforms")
    assert "## Abstract" in markdown
    assert "## 1. Section 1" in markdown
    assert "### 1.1 Background" in markdown
    assert "## References" in markdown
    assert "1. Vosoughi et al." in markdown


def test_paper_without_references_omits_section():
    paper = ResearchPaper.model_validate(make_paper(references=[]))

    assert "References" not in paper.to_markdown()


def test_research_request_blank_topic_rejected():
    with pytest.raises(pydantic.ValidationError, match="topic must not be empty"):
        ResearchRequest(topic="   ")

    assert ResearchRequest(topic=" bees ").topic == " bees "
