"""
Tests for prompt rendering.
"""
import pytest

from Agents.prompt_template import render_prompt, schema_instructions
from Agents.fake_news_agent import FAKE_NEWS_PROMPT
from Agents.research_paper_agent import RESEARCH_PAPER_PROMPT
from models.detection import FakeNewsAssessment, FakeNewsPromptInput
from models.paper import ResearchPromptInput


def test_render_from_mapping():
    assert render_prompt("Topic: ${topic}!", {"topic": "bees"}) == "Topic: bees!"


def test_render_from_model():
    prompt = render_prompt(FAKE_NEWS_PROMPT, FakeNewsPromptInput(article="Cats can fly."))

    assert "Article: Cats can fly." in prompt
    assert "${" not in prompt


def test_missing_field_raises_value_error():
    with pytest.raises(ValueError, match="topic"):
        render_prompt("Topic: ${topic}", {"other": "x"})


def test_research_prompt_keeps_json_example_and_fields():
    prompt = render_prompt(RESEARCH_PAPER_PROMPT, ResearchPromptInput(
        topic="coral reefs",
        incorporation_strategy="Focus on coral reefs as the core argument",
        style="concise",
        word_count=1000,
    ))

    assert "topic: coral reefs." in prompt
    assert "concise style, about 1000 words" in prompt
    assert "exactly 3 sections" in prompt
    assert '"sections": [' in prompt


def test_schema_instructions_mentions_fields():
    text = schema_instructions(FakeNewsAssessment)

    assert text.startswith("Return ONLY valid JSON")
    assert '"cleaned_input"' in text
    assert '"score"' in text
