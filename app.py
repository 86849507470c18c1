"""
Veritas - AI Fake News Detector & Research Paper Generator
Streamlit UI.
"""
import streamlit as st
import logging

import config
from errors import VeritasError
from models.detection import Verdict
from models.history import DetectionHistory
from models.paper import PaperStyle
from pipeline import FakeNewsDetectionPipeline, ResearchPaperPipeline
from Agents.Agent import create_client

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Veritas - AI Tools",
    page_icon="🔎",
    layout="wide",
    initial_sidebar_state="expanded"
)

# =============================================================================
# CUSTOM CSS
# =============================================================================
st.markdown("""
<style>
.verdict-fake {
    background: #fee2e2 !important;
    border-left: 4px solid #ef4444;
    padding: 12px 16px;
    border-radius: 0 8px 8px 0;
    color: #991b1b;
}
.verdict-real {
    background: #dcfce7 !important;
    border-left: 4px solid #22c55e;
    padding: 12px 16px;
    border-radius: 0 8px 8px 0;
    color: #166534;
}
</style>
""", unsafe_allow_html=True)

PAGES = ["Home", "Fake News Detector", "Research Paper Generator"]


# =============================================================================
# SHARED RESOURCES
# =============================================================================
@st.cache_resource
def get_pipelines():
    """One Gemini client per process, shared by both pipelines."""
    client = create_client()
    return FakeNewsDetectionPipeline(client), ResearchPaperPipeline(client)


def init_session_state():
    """Initialize session state variables."""
    defaults = {
        'page': PAGES[0],
        'input_type': 'text',
        'article_input': '',
        'detection_result': None,
        'history': DetectionHistory(),
        'paper': None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


# =============================================================================
# CALLBACKS
# =============================================================================
def load_example():
    st.session_state.article_input = config.EXAMPLE_CLAIM
    st.session_state.input_type = 'text'


def clear_input():
    st.session_state.article_input = ''
    st.session_state.detection_result = None


# =============================================================================
# PAGES
# =============================================================================
def render_home():
    st.title("🔎 Veritas")
    st.markdown("AI-assisted tools for checking news and drafting research papers.")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### 📰 Fake News Detector")
        st.markdown("Paste an article or a link and get a Real/Fake verdict with a confidence score.")
    with col2:
        st.markdown("### 📄 Research Paper Generator")
        st.markdown("Enter a topic and get a structured paper with an abstract and three sections.")


def render_detection_result(result):
    css = "verdict-fake" if result.verdict == Verdict.FAKE else "verdict-real"
    emoji = "🚨" if result.verdict == Verdict.FAKE else "✅"
    st.markdown(
        f"<div class='{css}'><h3>{emoji} {result.verdict.value}</h3></div>",
        unsafe_allow_html=True
    )
    st.progress(result.score, text=f"Confidence: {round(result.score * 100)}%")
    st.caption("Higher percentage indicates stronger confidence in the result")

    if result.reasoning:
        st.markdown("**Reasoning**")
        st.markdown(result.reasoning)

    st.text_area("Cleaned input", value=result.cleaned_input, height=150, disabled=True)


def render_history(history: DetectionHistory):
    if not len(history):
        return
    st.markdown("---")
    st.markdown("### 🕘 Recent Checks")
    for entry in history:
        emoji = "🚨" if entry.verdict == Verdict.FAKE else "✅"
        st.markdown(
            f"{emoji} **{entry.verdict.value}** · {round(entry.score * 100)}% · "
            f"{entry.timestamp:%H:%M} - {entry.input_preview}"
        )


def render_fake_news_detector():
    st.title("📰 Fake News Detector")
    st.markdown("*Analyze news articles or social media posts for authenticity using AI detection.*")

    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        st.button("Load Example", on_click=load_example)
    with col2:
        st.button("Clear", on_click=clear_input)

    input_type = st.radio(
        "Input type",
        options=['text', 'url'],
        format_func=lambda v: "Article Text" if v == 'text' else "Article URL",
        horizontal=True,
        key='input_type'
    )

    if input_type == 'text':
        article = st.text_area(
            "Article Text",
            height=200,
            placeholder="Paste news article or social media post content here...",
            key='article_input'
        )
    else:
        article = st.text_input(
            "Article URL",
            placeholder="https://example.com/news/article",
            key='article_input'
        )

    if st.button("Detect Fake News", type="primary", disabled=not article.strip()):
        try:
            detection_pipeline, _ = get_pipelines()
            with st.spinner("Analyzing..."):
                result = detection_pipeline.detect(article)
            st.session_state.detection_result = result
            st.session_state.history.add(article, result)
        except VeritasError as e:
            st.session_state.detection_result = None
            st.error(f"Analysis Failed: {e}")
            logger.exception("Detection error")

    if st.session_state.detection_result is not None:
        st.markdown("---")
        render_detection_result(st.session_state.detection_result)

    render_history(st.session_state.history)


def render_paper(paper):
    st.markdown(f"## {paper.title}")
    st.markdown("### Abstract")
    st.markdown(paper.abstract)
    for idx, section in enumerate(paper.sections, start=1):
        st.markdown(f"### {idx}. {section.title}")
        st.markdown(section.content)
        for sub_idx, subsection in enumerate(section.subsections, start=1):
            st.markdown(f"#### {idx}.{sub_idx} {subsection.title}")
            st.markdown(subsection.content)
    if paper.references:
        st.markdown("### References")
        for i, ref in enumerate(paper.references, start=1):
            st.markdown(f"{i}. {ref}")


def render_research_generator():
    st.title("📄 Research Paper Generator")
    st.markdown("*Generate a structured research paper on any topic.*")

    with st.form("research_form"):
        topic = st.text_input("Research Topic", placeholder="e.g., The impact of social media on misinformation")
        col1, col2 = st.columns(2)
        with col1:
            style = st.selectbox(
                "Paper Style",
                options=list(PaperStyle),
                format_func=lambda s: s.value.capitalize()
            )
        with col2:
            word_count = st.selectbox(
                "Word Count",
                options=list(config.WORD_COUNT_OPTIONS),
                index=list(config.WORD_COUNT_OPTIONS).index(config.DEFAULT_WORD_COUNT),
                format_func=config.WORD_COUNT_OPTIONS.get
            )
        submitted = st.form_submit_button("Generate Research Paper", type="primary")

    if submitted:
        if not topic.strip():
            st.error("Please enter a research topic.")
        else:
            try:
                _, paper_pipeline = get_pipelines()
                with st.spinner("Generating research paper..."):
                    st.session_state.paper = paper_pipeline.generate(topic, style=style, word_count=word_count)
            except VeritasError as e:
                st.error(f"Generation Failed: {e}")
                logger.exception("Paper generation error")

    paper = st.session_state.paper
    if paper is not None:
        st.divider()
        with st.container():
            render_paper(paper)

        st.download_button(
            "📥 Download Paper",
            paper.to_markdown(),
            file_name="research_paper.md",
            mime="text/markdown"
        )


# =============================================================================
# MAIN APP LOGIC
# =============================================================================
def main():
    init_session_state()

    page = st.sidebar.radio("Navigate", PAGES, key='page')

    if page == "Home":
        render_home()
    elif page == "Fake News Detector":
        render_fake_news_detector()
    else:
        render_research_generator()


if __name__ == "__main__":
    main()
