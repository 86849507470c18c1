"""
Research paper generation flow.
Incorporation strategy (local tool) -> model -> validated paper.
"""
import logging
from typing import Optional

import pydantic

from errors import FlowError, VeritasError
from models.paper import PaperStyle, ResearchPaper, ResearchPromptInput, ResearchRequest
from Agents.research_paper_agent import ResearchPaperAgent
from Agents.tools import INCORPORATION_STRATEGY_TOOL

logger = logging.getLogger(__name__)


class ResearchPaperPipeline:
    """Orchestrates a single research paper request."""

    def __init__(self, client, agent: Optional[ResearchPaperAgent] = None):
        self.agent = agent or ResearchPaperAgent(client)

    def generate(self, topic: str, style=PaperStyle.ACADEMIC, word_count: Optional[int] = None) -> ResearchPaper:
        """
        Generate a research paper on a topic.

        Args:
            topic: Research topic
            style: PaperStyle or its string value
            word_count: Target overall length; defaults to config.DEFAULT_WORD_COUNT

        Returns:
            ResearchPaper with exactly three sections

        Raises:
            FlowError: with a human-readable message on any failure
        """
        fields = {"topic": topic, "style": style}
        if word_count is not None:
            fields["word_count"] = word_count
        try:
            request = ResearchRequest(**fields)
        except pydantic.ValidationError as e:
            logger.error(f"Invalid research paper request: {e}")
            raise FlowError(f"Invalid research paper request: {e.errors()[0]['msg']}") from e

        strategy = INCORPORATION_STRATEGY_TOOL(query=request.topic)
        logger.info(f"Incorporation strategy: {strategy}")

        prompt_input = ResearchPromptInput(
            topic=request.topic,
            incorporation_strategy=strategy,
            style=request.style.value,
            word_count=request.word_count,
        )

        try:
            return self.agent.write_paper(prompt_input)
        except VeritasError as e:
            logger.error(f"Error generating research paper: {e}")
            raise FlowError(f"Error generating research paper: {e}") from e
