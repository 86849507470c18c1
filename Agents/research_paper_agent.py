"""
Research paper agent: produces a structured paper in a single generation.
"""
import logging

from Agents.Agent import Agent
from Agents.prompt_template import render_prompt, schema_instructions
from models.paper import ResearchPaper, ResearchPromptInput
import config

logger = logging.getLogger(__name__)


RESEARCH_PAPER_SYSTEM_PROMPT = """You are an AI research assistant tasked with generating research papers on given topics.

## Guidelines
- Write in the requested style and aim for the requested overall length
- Every section needs a descriptive title and substantive content
- Subsections are optional; use them only where they help structure a section
- References are optional; list them as plain citation strings"""


RESEARCH_PAPER_PROMPT = """The user has requested a research paper on the following topic: ${topic}.
Here is the strategy for incorporating the topic: ${incorporation_strategy}

Write it in a ${style} style, about ${word_count} words in total.

Please generate a research paper with a title, abstract, and exactly 3 sections. Each section should have a title and content.
Follow this format:

{
  "title": "Research Paper Title",
  "abstract": "A brief summary of the research paper.",
  "sections": [
    {"title": "Section 1 Title", "content": "Section 1 Content", "subsections": []},
    {"title": "Section 2 Title", "content": "Section 2 Content", "subsections": []},
    {"title": "Section 3 Title", "content": "Section 3 Content", "subsections": []}
  ],
  "references": []
}
"""


class ResearchPaperAgent(Agent):
    """Agent that writes a three-section research paper as JSON."""

    def __init__(self, client):
        super().__init__(
            client=client,
            system_prompt=RESEARCH_PAPER_SYSTEM_PROMPT,
            temperature=config.RESEARCH_PAPER_TEMPERATURE,
            top_p=config.RESEARCH_PAPER_TOP_P,
            top_k=config.RESEARCH_PAPER_TOP_K,
        )

    def build_prompt(self, prompt_input: ResearchPromptInput) -> str:
        prompt = render_prompt(RESEARCH_PAPER_PROMPT, prompt_input)
        return f"{prompt}\n{schema_instructions(ResearchPaper)}"

    def write_paper(self, prompt_input: ResearchPromptInput) -> ResearchPaper:
        response = self.generate_structured(self.build_prompt(prompt_input), ResearchPaper)
        paper = response.data
        logger.info(f"Generated paper '{paper.title}' with {len(paper.sections)} sections")
        return paper
