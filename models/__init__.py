"""
Data models for the Veritas detection and research tools.
"""
from models.detection import (
    Verdict,
    DetectionRequest,
    FakeNewsPromptInput,
    FakeNewsAssessment,
    DetectionResult,
)
from models.history import HistoryEntry, DetectionHistory
from models.paper import (
    PaperStyle,
    ResearchRequest,
    ResearchPromptInput,
    Subsection,
    Section,
    ResearchPaper,
)
from models.web_page import WebPageContent

__all__ = [
    'Verdict',
    'DetectionRequest',
    'FakeNewsPromptInput',
    'FakeNewsAssessment',
    'DetectionResult',
    'HistoryEntry',
    'DetectionHistory',
    'PaperStyle',
    'ResearchRequest',
    'ResearchPromptInput',
    'Subsection',
    'Section',
    'ResearchPaper',
    'WebPageContent',
]
