"""
Content extracted from a fetched web page.
"""
from dataclasses import dataclass


@dataclass
class WebPageContent:
    title: str      # <title> text, "No Title" when absent
    content: str    # visible body text, whitespace collapsed
