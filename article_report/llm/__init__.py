"""LLM summarization of extracted article text."""

from .prompts import build_summary_request, load_system_prompt
from .providers.base import SummaryProvider
from .providers.groq import GroqProvider, REQUEST_POLICY, parse_summary_response

__all__ = [
    "SummaryProvider",
    "GroqProvider",
    "REQUEST_POLICY",
    "build_summary_request",
    "load_system_prompt",
    "parse_summary_response",
]
