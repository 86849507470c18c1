"""
Data models for research paper generation.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

import config


class PaperStyle(str, Enum):
    """Writing style offered by the generator."""
    ACADEMIC = "academic"
    PROFESSIONAL = "professional"
    CONCISE = "concise"
    DETAILED = "detailed"


class ResearchRequest(BaseModel):
    """A user request for a research paper."""
    topic: str = Field(min_length=1, description="The topic of the research paper.")
    style: PaperStyle = PaperStyle.ACADEMIC
    word_count: int = Field(default=config.DEFAULT_WORD_COUNT, gt=0)

    @field_validator("topic")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("topic must not be empty")
        return value


class ResearchPromptInput(BaseModel):
    """Fields substituted into the research paper prompt."""
    topic: str = Field(description="The topic of the research paper.")
    incorporation_strategy: str = Field(
        description="How to incorporate the user query into the research paper."
    )
    style: str
    word_count: int


class Subsection(BaseModel):
    title: str = Field(description="The title of the subsection.")
    content: str = Field(description="The content of the subsection.")


class Section(BaseModel):
    title: str = Field(description="The title of the section.")
    content: str = Field(description="The content of the section.")
    subsections: List[Subsection] = Field(
        default_factory=list,
        description="Optional subsections nested under this section.",
    )


class ResearchPaper(BaseModel):
    """
    A complete generated paper.
    Always exactly PAPER_SECTION_COUNT top-level sections.
    """
    title: str = Field(min_length=1, description="The title of the research paper.")
    abstract: str = Field(min_length=1, description="A brief summary of the research paper.")
    sections: List[Section] = Field(
        min_length=config.PAPER_SECTION_COUNT,
        max_length=config.PAPER_SECTION_COUNT,
        description="The sections of the research paper.",
    )
    references: List[str] = Field(
        default_factory=list,
        description="Optional list of references, one citation string per entry.",
    )

    def to_markdown(self) -> str:
        """Render the paper as a Markdown document for download."""
        lines = [f"# {self.title}", "", "## Abstract", "", self.abstract, ""]
        for idx, section in enumerate(self.sections, start=1):
            lines += [f"## {idx}. {section.title}", "", section.content, ""]
            for sub_idx, subsection in enumerate(section.subsections, start=1):
                lines += [f"### {idx}.{sub_idx} {subsection.title}", "", subsection.content, ""]
        if self.references:
            lines += ["## References", ""]
            lines += [f"{i}. {ref}" for i, ref in enumerate(self.references, start=1)]
            lines.append("")
        return "\n".join(lines)
