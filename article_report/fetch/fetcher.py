"""
HTTP page fetching.

A single synchronous GET per run: redirects are followed, no custom
headers are sent and no retries are attempted.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..logging_utils import get_logger

logger = get_logger("fetch")


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The response body text, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_page(url: str, timeout: float, trust_env: bool = True) -> FetchResult:
    """Fetch a URL and return its body decoded as text.

    Non-success status codes are not treated as failures: the body is
    returned as-is and a warning is logged.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        trust_env: Whether to respect system proxy settings from environment

    Returns:
        FetchResult with text on success or error message on failure
    """
    try:
        with httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            trust_env=trust_env,
        ) as client:
            resp = client.get(url)
            text = resp.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return FetchResult(
            url=url,
            status_code=None,
            text=None,
            error=f"{type(exc).__name__}: {exc}",
        )

    if not resp.is_success:
        logger.warning("Page %s returned HTTP %s; using body anyway", url, resp.status_code)
    return FetchResult(url=url, status_code=resp.status_code, text=text)
