"""
Filename rules for exported articles.

Titles become file names, so they are checked against the strictest common
target (Windows): no reserved characters, no control characters, at most
255 characters and no trailing space or period.
"""

from __future__ import annotations

import re
from typing import Callable

from ..errors import InvalidFilename

_INVALID_CHARS_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_MAX_LENGTH = 255


def is_valid_filename(filename: str) -> bool:
    """Return True if ``filename`` can be used as a file name on any platform.

    Examples:
        >>> is_valid_filename("My Article")
        True
        >>> is_valid_filename("What now?")
        False
    """
    if not filename or len(filename) > _MAX_LENGTH:
        return False
    if _INVALID_CHARS_RE.search(filename):
        return False
    return not filename.endswith((" ", "."))


def prompt_for_title(
    read_line: Callable[[str], str],
    notify: Callable[[str], None],
    max_attempts: int | None = None,
) -> str:
    """Ask for a replacement title until a valid filename is entered.

    Args:
        read_line: Displays a prompt and returns one line of user input
        notify: Shows a message to the user
        max_attempts: Give up after this many invalid entries; None retries forever

    Returns:
        The first entered value that is a valid filename, stripped of
        surrounding whitespace

    Raises:
        InvalidFilename: If input ends or max_attempts is exhausted
    """
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        try:
            value = read_line("Please enter a valid filename: ").strip()
        except EOFError as exc:
            raise InvalidFilename("input closed before a valid filename was entered") from exc
        if is_valid_filename(value):
            return value
        notify("The entered filename is still not valid. Please try again.")
    raise InvalidFilename(f"no valid filename entered after {attempts} attempts")
