"""
Central configuration for Veritas (fake news detection + research paper generation).
All configurable parameters in one place.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# API KEYS
# =============================================================================
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("GOOGLE_GENAI_API_KEY")

# =============================================================================
# MODEL CONFIGURATION
# =============================================================================
LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.0-flash")
MAX_OUTPUT_TOKENS = 8192

# Upper bound on function-calling round trips before a final answer
MAX_TOOL_ROUNDS = 5

# =============================================================================
# AGENT PARAMETERS
# =============================================================================
# Fake News Agent
FAKE_NEWS_TEMPERATURE = 0.2
FAKE_NEWS_TOP_P = 0.8
FAKE_NEWS_TOP_K = 30

# Research Paper Agent
RESEARCH_PAPER_TEMPERATURE = 0.7
RESEARCH_PAPER_TOP_P = 0.9
RESEARCH_PAPER_TOP_K = 40

# =============================================================================
# FAKE NEWS DETECTION
# =============================================================================
FAKE_SCORE_THRESHOLD = 0.5  # score > this = Fake, otherwise Real
HISTORY_LIMIT = 5           # most recent detections kept per session
HISTORY_PREVIEW_CHARS = 50

EXAMPLE_CLAIM = "The moon landing was faked by NASA in a Hollywood studio."

# =============================================================================
# RESEARCH PAPER GENERATION
# =============================================================================
PAPER_SECTION_COUNT = 3
DEFAULT_WORD_COUNT = 1500
WORD_COUNT_OPTIONS = {
    1000: "Short (1000 words)",
    1500: "Medium (1500 words)",
    2500: "Long (2500 words)",
    5000: "Extended (5000 words)",
}

# =============================================================================
# WEB FETCHING
# =============================================================================
FETCH_TIMEOUT = 30  # seconds
FETCH_USER_AGENT = "Mozilla/5.0 (compatible; VeritasFetcher/1.0)"

# =============================================================================
# SERVER / LOGGING
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "5000"))
