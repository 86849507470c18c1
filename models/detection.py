"""
Data models for fake news detection.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Verdict(str, Enum):
    """Binary classification derived from the fake-news score."""
    REAL = "Real"
    FAKE = "Fake"


class DetectionRequest(BaseModel):
    """A single user submission: article text or a URL."""
    input: str = Field(description="The article text or URL to check for fake news.")

    @field_validator("input")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("input must not be empty")
        return value

    @property
    def is_url(self) -> bool:
        return self.input.strip().startswith(("http://", "https://"))


class FakeNewsPromptInput(BaseModel):
    """Fields substituted into the detection prompt."""
    article: str = Field(description="The article text to check for fake news.")


class FakeNewsAssessment(BaseModel):
    """Structured output the model must return for a detection request."""
    result: Verdict = Field(description='The fake news detection result, "Real" or "Fake".')
    score: float = Field(
        ge=0.0,
        le=1.0,
        description="A score indicating the likelihood of the input being fake news (0-1).",
    )
    cleaned_input: str = Field(description="A cleaned version of the input text.")


class DetectionResult(BaseModel):
    """Final result of the detection pipeline."""
    verdict: Verdict
    score: float = Field(ge=0.0, le=1.0)
    cleaned_input: str
    reasoning: Optional[str] = None

    @property
    def is_fake(self) -> bool:
        return self.verdict == Verdict.FAKE

    def to_dict(self) -> dict:
        return {
            "result": self.verdict.value,
            "score": self.score,
            "cleanedInput": self.cleaned_input,
            "reasoning": self.reasoning,
        }
