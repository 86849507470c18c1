"""
Fake news detection flow.
Optional URL fetch -> model assessment (with reasoning tool) -> verdict.
"""
import logging
from typing import List, Optional

import pydantic

import config
from errors import FetchError, FlowError, VeritasError
from models.detection import DetectionRequest, DetectionResult, Verdict
from processing.web_fetcher import WebContentFetcher
from Agents.fake_news_agent import FakeNewsAgent
from Agents.tools import ToolCall, EXTRACT_REASONING_TOOL

logger = logging.getLogger(__name__)

REAL_NEWS_REASONING = "No specific reasoning available for real news."
MISSING_REASONING = "The article is classified as fake, but no specific reasoning was provided by the tool."
URL_FETCH_FAILED = "Failed to fetch content from the provided URL."


def derive_verdict(score: float) -> Verdict:
    """Fake iff score is strictly above the threshold; 0.5 itself is Real."""
    return Verdict.FAKE if score > config.FAKE_SCORE_THRESHOLD else Verdict.REAL


def select_reasoning(verdict: Verdict, tool_calls: List[ToolCall]) -> str:
    if verdict == Verdict.REAL:
        return REAL_NEWS_REASONING

    for call in tool_calls:
        if call.name == EXTRACT_REASONING_TOOL.name:
            return call.output
        logger.warning(f"Unexpected tool call: {call.name}")
    return MISSING_REASONING


class FakeNewsDetectionPipeline:
    """
    Orchestrates a single detection request.

    Flow:
    1. If the input is a URL, replace it with the fetched page text
    2. Ask the model for a score (reasoning tool available)
    3. Threshold the score into a verdict
    4. Pick the reasoning string
    """

    def __init__(self, client, fetcher: Optional[WebContentFetcher] = None, agent: Optional[FakeNewsAgent] = None):
        self.fetcher = fetcher or WebContentFetcher()
        self.agent = agent or FakeNewsAgent(client)

    def detect(self, text: str) -> DetectionResult:
        """
        Detect whether an article (text or URL) is fake news.

        Raises:
            FlowError: with a human-readable message on any failure
        """
        try:
            request = DetectionRequest(input=text)
        except pydantic.ValidationError as e:
            logger.error(f"Invalid detection request: {e}")
            raise FlowError("Please enter some text or a URL to analyze.") from e
        article_text = request.input

        if request.is_url:
            url = request.input.strip()
            try:
                article_text = self.fetcher.fetch(url).content
            except FetchError as e:
                logger.error(f"Error fetching content from URL: {e}")
                raise FlowError(URL_FETCH_FAILED) from e

        try:
            response = self.agent.assess(article_text)
        except VeritasError as e:
            logger.error(f"Error in fake news assessment: {e}")
            raise FlowError(f"Error detecting fake news: {e}") from e

        assessment = response.data
        verdict = derive_verdict(assessment.score)
        if verdict != assessment.result:
            logger.debug(f"Model said {assessment.result.value}, score {assessment.score} gives {verdict.value}")

        return DetectionResult(
            verdict=verdict,
            score=assessment.score,
            cleaned_input=assessment.cleaned_input,
            reasoning=select_reasoning(verdict, response.tool_calls),
        )
