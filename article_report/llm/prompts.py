"""Prompt loading and request-payload helpers for the summarization service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping


_PROMPT_DIR = Path(__file__).resolve().parent.parent / "prompts"


@lru_cache(maxsize=None)
def _load_template(name: str) -> str:
    path = _PROMPT_DIR / f"{name}.md"
    return path.read_text(encoding="utf-8").strip()


def load_system_prompt() -> str:
    """Return the bundled system instruction for article summarization."""
    return _load_template("system")


def build_summary_request(
    content: str,
    system_prompt: str,
    policy: Mapping[str, Any],
) -> dict[str, Any]:
    """Build a chat-completion payload for one article.

    The payload carries exactly two messages, the system instruction followed
    by the article text verbatim, plus the fixed request policy.
    """
    payload: dict[str, Any] = {
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": content},
        ],
    }
    payload.update(policy)
    return payload
