"""LLM provider implementations for article summarization."""

from .base import SummaryProvider
from .groq import GroqProvider

__all__ = ["SummaryProvider", "GroqProvider"]
