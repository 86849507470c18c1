"""
Fake news agent: classifies an article and may call the reasoning tool.
"""
import logging

from Agents.Agent import Agent, AgentResponse
from Agents.prompt_template import render_prompt, schema_instructions
from Agents.tools import ToolRegistry, EXTRACT_REASONING_TOOL
from models.detection import FakeNewsAssessment, FakeNewsPromptInput
import config

logger = logging.getLogger(__name__)


FAKE_NEWS_SYSTEM_PROMPT = """You are a fake news detection expert. You will be given an article and you will determine if it is real or fake news.

## Consider
- Sensationalism
- Lack of sourcing
- Bias

## Tools
If you judge the article to be fake, call the `extract_reasoning` tool with the parts of the article that most affect your determination before giving your final answer."""


FAKE_NEWS_PROMPT = """Article: ${article}

Respond with a determination of "Real" or "Fake", a score between 0 and 1 indicating the likelihood of the input being fake news, and a cleaned version of the input text.
"""


class FakeNewsAgent(Agent):
    """
    Agent that scores an article for likelihood of being fake news.
    The extract_reasoning tool is offered to the model during generation.
    """

    def __init__(self, client):
        super().__init__(
            client=client,
            system_prompt=FAKE_NEWS_SYSTEM_PROMPT,
            temperature=config.FAKE_NEWS_TEMPERATURE,
            top_p=config.FAKE_NEWS_TOP_P,
            top_k=config.FAKE_NEWS_TOP_K,
            tools=ToolRegistry([EXTRACT_REASONING_TOOL]),
        )

    def build_prompt(self, article: str) -> str:
        prompt = render_prompt(FAKE_NEWS_PROMPT, FakeNewsPromptInput(article=article))
        return f"{prompt}\n{schema_instructions(FakeNewsAssessment)}"

    def assess(self, article: str) -> AgentResponse:
        """
        Ask the model for a FakeNewsAssessment of the article.

        Returns:
            AgentResponse whose data is a FakeNewsAssessment
        """
        response = self.generate_structured(self.build_prompt(article), FakeNewsAssessment)
        logger.info(
            f"Assessment: result={response.data.result.value}, score={response.data.score}, "
            f"tool_calls={len(response.tool_calls)}"
        )
        return response
