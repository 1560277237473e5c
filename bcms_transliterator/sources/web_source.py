"""
Web page line source.

Fetches a URL and yields the visible text of the page, one non-empty
line at a time. Links to PDF or Word files are downloaded and handed to
the matching document source.
"""

import os
import re
import tempfile
from typing import Iterator, Optional
from urllib.parse import urlparse

from .base import SourceError
from .docx_source import DocxSource
from .pdf_source import PdfSource


class WebSource:
    """Reads lines from web pages."""

    TIMEOUT = 30
    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        )
    }
    NON_CONTENT_TAGS = ["script", "style", "nav", "footer", "iframe", "noscript"]

    @staticmethod
    def can_handle(source: str) -> bool:
        """Check if the source looks like a URL."""
        try:
            parsed = urlparse(source)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except ValueError:
            return False

    @staticmethod
    def read_lines(url: str) -> Iterator[str]:
        """
        Fetch ``url`` and return an iterator over its text lines.

        Raises:
            SourceError: If the request fails or returns an error status.
        """
        try:
            import requests
        except ImportError:
            raise RuntimeError("requests is not installed. Run: pip install requests")

        try:
            from bs4 import BeautifulSoup
        except ImportError:
            raise RuntimeError("beautifulsoup4 is not installed. Run: pip install beautifulsoup4")

        try:
            response = requests.get(
                url, headers=WebSource.HEADERS, timeout=WebSource.TIMEOUT, allow_redirects=True
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise SourceError(f"Cannot fetch {url}: {e}") from e

        content_type = response.headers.get("Content-Type", "")
        path = urlparse(url).path.lower()

        # Remote documents go through the file sources
        if "application/pdf" in content_type or path.endswith(".pdf"):
            return _read_downloaded(response.content, ".pdf", PdfSource.read_lines)
        if "wordprocessingml" in content_type or path.endswith(".docx"):
            return _read_downloaded(response.content, ".docx", DocxSource.read_lines)

        soup = BeautifulSoup(
            response.content, "html.parser", from_encoding=_charset(content_type)
        )
        for tag in soup.find_all(WebSource.NON_CONTENT_TAGS):
            tag.decompose()

        text = soup.get_text("\n")
        return iter([line.strip() for line in text.splitlines() if line.strip()])


def _charset(content_type: str) -> Optional[str]:
    match = re.search(r"charset=([\w\-]+)", content_type, re.IGNORECASE)
    return match.group(1) if match else None


def _read_downloaded(content: bytes, suffix: str, reader) -> Iterator[str]:
    """Save downloaded bytes to a temp file and read its lines."""
    with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as tmp:
        tmp.write(content)
        tmp_path = tmp.name

    try:
        return iter(list(reader(tmp_path)))
    finally:
        os.unlink(tmp_path)
