"""Page fetching and text extraction."""

from .extractor import clean_text, extract_body, extract_title, scrape_page
from .fetcher import FetchResult, fetch_page

__all__ = [
    "FetchResult",
    "fetch_page",
    "extract_title",
    "extract_body",
    "clean_text",
    "scrape_page",
]
