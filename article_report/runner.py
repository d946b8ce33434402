"""
Pipeline orchestration for a single article.

This module coordinates the whole run:
1. Fetch the page markup
2. Extract the title and the cleaned body text
3. Replace the title if it cannot be used as a filename
4. Summarize the text via the LLM provider
5. Render and write the Markdown note

Every stage failure raises a ReportError subclass and aborts the run before
anything is written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .config import AppConfig, get_api_key
from .errors import FetchError, MissingApiKey
from .fetch.extractor import scrape_page
from .fetch.fetcher import fetch_page
from .llm.prompts import load_system_prompt
from .llm.providers.base import SummaryProvider
from .llm.providers.groq import GroqProvider
from .logging_utils import get_logger, log_event
from .output.filenames import is_valid_filename, prompt_for_title
from .output.renderer import export_article
from .types import Article


def scrape_article(url: str, cfg: AppConfig, logger: logging.Logger | None = None) -> Article:
    """Fetch ``url`` and reduce it to an Article without a summary.

    Raises:
        FetchError: If the page could not be fetched
        ExtractionNotFound: If the page has no title heading or no body
    """
    logger = logger or get_logger()
    result = fetch_page(url, timeout=cfg.fetch.timeout_seconds, trust_env=cfg.fetch.trust_env)
    if not result.ok:
        raise FetchError(f"getting page at '{url}': {result.error}")
    log_event(logger, "Page fetched", event="fetch_ok", url=url, status_code=result.status_code)

    title, content = scrape_page(result.text or "")
    log_event(
        logger,
        "Article extracted",
        event="extract_ok",
        url=url,
        title=title,
        content_chars=len(content),
    )
    return Article(url=url, title=title, content=content)


def run_pipeline(
    url: str,
    output_folder: Path,
    cfg: AppConfig,
    read_line: Callable[[str], str] = input,
    notify: Callable[[str], None] = print,
    provider: SummaryProvider | None = None,
) -> Path:
    """Run the complete fetch, summarize and export pipeline for one URL.

    Args:
        url: The article URL
        output_folder: Directory the Markdown note is written to
        cfg: Application configuration
        read_line: Line-input collaborator used to correct an invalid title
        notify: Message sink for the title correction prompt
        provider: Summarization provider; a GroqProvider is built from cfg if None

    Returns:
        Path to the written Markdown file
    """
    logger = get_logger()

    if provider is None:
        api_key = get_api_key(cfg.provider)
        if not api_key:
            raise MissingApiKey(f"{cfg.provider.api_key_env} environment variable not set")
        provider = GroqProvider(api_key, cfg.provider)

    log_event(logger, "Pipeline start", event="pipeline_start", url=url, output=str(output_folder))
    article = scrape_article(url, cfg, logger)

    if not is_valid_filename(article.title):
        notify(f"Article title '{article.title}' is not a valid filename")
        article.title = prompt_for_title(read_line, notify)
        log_event(logger, "Title replaced", event="title_replaced", title=article.title)

    article.summary = provider.summarize(article.content, load_system_prompt())
    log_event(
        logger,
        "Summary received",
        event="summarize_ok",
        keypoints=len(article.summary.keypoints),
        tags=len(article.summary.tags),
    )

    template_path = Path(cfg.output.template_path) if cfg.output.template_path else None
    output_path = export_article(output_folder, article, template_path)
    log_event(logger, "Pipeline complete", event="pipeline_complete", output=str(output_path))
    return output_path
