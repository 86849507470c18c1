"""
Pipeline orchestration for the detection and research flows.
"""
from pipeline.fake_news_pipeline import FakeNewsDetectionPipeline
from pipeline.research_paper_pipeline import ResearchPaperPipeline

__all__ = ['FakeNewsDetectionPipeline', 'ResearchPaperPipeline']
