"""Abstract interface for LLM-driven article summarization."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...types import ArticleSummary


class SummaryProvider(ABC):
    """Provider interface for turning article text into a structured summary."""

    @abstractmethod
    def summarize(self, content: str, system_prompt: str) -> ArticleSummary:
        """Return the summary for ``content`` or raise a SummarizationError."""
        raise NotImplementedError
