"""
Article Report - AI-powered web article summarizer.

This package fetches a single web page, extracts its readable text, asks a
language model for a structured summary and writes the result as a
Markdown note.

Main entry point is the CLI via the `article-report` command.

Example:
    $ article-report notes/ https://example.com/some-article
"""

__all__ = ["__version__", "Article", "ArticleSummary", "run_pipeline"]
__version__ = "0.1.0"

from .runner import run_pipeline
from .types import Article, ArticleSummary
