"""
Visible-text extraction from raw page markup.

The title comes from the first ``<h1>`` heading and the content from the
``<body>`` container, which is parsed with BeautifulSoup and flattened to a
single whitespace-normalized line of text suitable for an LLM prompt.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PreformattedString

from ..errors import ExtractionNotFound
from ..logging_utils import get_logger

logger = get_logger("extract")

_H1_RE = re.compile(r"<h1.*?>(.*?)</h1>")
_BODY_RE = re.compile(r"<body.*?>(.*?)</body>", re.DOTALL)

_SKIP_TAGS = frozenset({"script", "style", "nav", "footer", "header"})
_BLOCK_TAGS = frozenset({"p", "h1", "h2", "h3", "h4", "h5", "h6", "div"})
_TRAILING_BREAK_TAGS = frozenset({"p", "br", "div"})


def extract_title(markup: str) -> str:
    """Return the inner markup of the first ``<h1>`` element.

    Nested tags inside the heading are returned verbatim, not stripped.

    Raises:
        ExtractionNotFound: If the markup has no non-empty ``<h1>``
    """
    match = _H1_RE.search(markup)
    if not match or not match.group(1):
        raise ExtractionNotFound("no h1 found in page content")
    return match.group(1)


def extract_body(markup: str) -> str:
    """Return the raw inner markup of the first ``<body>`` element.

    Raises:
        ExtractionNotFound: If the markup has no non-empty ``<body>``
    """
    match = _BODY_RE.search(markup)
    if not match or not match.group(1):
        raise ExtractionNotFound("no body found in page content")
    return match.group(1)


def clean_text(body_markup: str) -> str:
    """Flatten body markup into a single line of readable text.

    Navigation, header/footer chrome, scripts and styles are dropped, images
    are replaced by their alt text, and all whitespace runs collapse to a
    single space. If the markup cannot be parsed it is returned unchanged.

    Args:
        body_markup: Inner markup of the page body

    Returns:
        Whitespace-normalized plain text

    Examples:
        >>> clean_text('<p>Hello <b>world</b></p><img alt="cat">')
        'Hello world [Image: cat]'
    """
    try:
        soup = BeautifulSoup(body_markup, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse content as HTML: %s", exc)
        return body_markup

    return " ".join(_collect_text(soup).split())


def scrape_page(markup: str) -> tuple[str, str]:
    """Extract ``(title, content)`` from a full page.

    The heading the title was taken from is removed from the body before
    cleaning, so the content does not start with a copy of the title. When
    the heading is all the body holds, the unmodified body is used instead.

    Raises:
        ExtractionNotFound: If the title or the body is missing
    """
    title = extract_title(markup)
    body = extract_body(markup)
    title_match = _H1_RE.search(markup)
    body_match = _BODY_RE.search(markup)
    if body_match.start(1) <= title_match.start() and title_match.end() <= body_match.end(1):
        offset = body_match.start(1)
        content = clean_text(body[: title_match.start() - offset] + body[title_match.end() - offset :])
        if content:
            return title, content
    return title, clean_text(body)


def _collect_text(root: Tag) -> str:
    """Walk the tree depth-first and return the emitted text, unnormalized."""
    out: list[str] = []
    # (node, closing): closing entries emit the trailing break after children
    stack: list[tuple[object, bool]] = [(root, False)]
    while stack:
        node, closing = stack.pop()
        if closing:
            out.append("\n")
            continue
        if isinstance(node, NavigableString):
            if not isinstance(node, PreformattedString):
                out.append(str(node))
            continue
        if not isinstance(node, Tag):
            continue

        name = node.name
        if name in _SKIP_TAGS:
            continue
        if name == "img":
            alt = node.get("alt")
            if alt is not None:
                out.append(f"[Image: {alt}]")
            continue
        if name in _BLOCK_TAGS:
            out.append("\n")
        if name in _TRAILING_BREAK_TAGS:
            stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.contents))
    return "".join(out)
