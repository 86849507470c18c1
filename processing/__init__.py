"""
Processing modules for fetching input content.
"""
from processing.web_fetcher import WebContentFetcher

__all__ = ['WebContentFetcher']
