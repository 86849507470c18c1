"""
Fetches a web page and extracts its title and visible body text.
"""
import re
import logging
import urllib.request
import urllib.error

from bs4 import BeautifulSoup

import config
from errors import FetchError
from models.web_page import WebPageContent

logger = logging.getLogger(__name__)

NO_TITLE = "No Title"


class WebContentFetcher:
    """
    Retrieves a URL with a single GET request and turns the HTML
    into a WebPageContent. No retries.
    """

    def __init__(self, timeout: float = config.FETCH_TIMEOUT, user_agent: str = config.FETCH_USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch(self, url: str) -> WebPageContent:
        """
        Fetch and parse a web page.

        Args:
            url: Absolute http(s) URL

        Returns:
            WebPageContent with title and collapsed body text

        Raises:
            FetchError: on non-success status, network failure or parse failure
        """
        logger.info(f"Fetching web page: {url}")
        try:
            req = urllib.request.Request(url)
            req.add_header('User-Agent', self.user_agent)

            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                status = getattr(response, 'status', 200)
                if status >= 400:
                    raise FetchError(f"HTTP error! status: {status}", status_code=status)
                charset = response.headers.get_content_charset() or 'utf-8'
                html = response.read().decode(charset, errors='replace')

            page = self.parse_html(html)

        except urllib.error.HTTPError as e:
            logger.error(f"Error fetching {url}: HTTP {e.code}")
            raise FetchError(
                f"Failed to fetch content from URL: HTTP error! status: {e.code}",
                status_code=e.code,
            ) from e
        except FetchError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FetchError(f"Failed to fetch content from URL: {e}", status_code=e.status_code) from e
        except Exception as e:
            logger.error(f"Error fetching or parsing {url}: {e}")
            raise FetchError(f"Failed to fetch content from URL: {e}") from e

        logger.info(f"Fetched '{page.title}' ({len(page.content)} chars)")
        return page

    @staticmethod
    def parse_html(html: str) -> WebPageContent:
        """Extract title and the text of every element under <body>."""
        soup = BeautifulSoup(html, 'html.parser')

        title = soup.title.get_text() if soup.title else ''
        title = title or NO_TITLE

        texts = []
        if soup.body is not None:
            for element in soup.body.find_all(True):
                texts.append(element.get_text())

        content = re.sub(r'\s+', ' ', ' '.join(texts)).strip()
        return WebPageContent(title=title, content=content)
