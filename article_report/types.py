"""
Core data types for the article report pipeline.

- Article: a fetched page reduced to its title and cleaned text
- ArticleSummary: the structured summary returned by the language model
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ArticleSummary:
    """Structured summary produced by the summarization service.

    Attributes:
        summary: A short prose summary of the article
        keypoints: Ordered list of the article's key points
        tags: Ordered list of topic tags
    """
    summary: str = ""
    keypoints: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    def is_complete(self) -> bool:
        return bool(self.summary and self.keypoints and self.tags)


@dataclass
class Article:
    """A single web article moving through the pipeline.

    Attributes:
        url: The URL the page was fetched from
        title: The article headline, used as the output filename
        content: Whitespace-normalized plain text of the page body
        summary: The model-generated summary, attached after summarization
    """
    url: str
    title: str
    content: str
    summary: ArticleSummary | None = None

    def missing_fields(self) -> list[str]:
        """Return the names of fields that must be set before export."""
        missing = []
        if not self.title:
            missing.append("title")
        if self.summary is None:
            return missing + ["summary", "keypoints", "tags"]
        if not self.summary.summary:
            missing.append("summary")
        if not self.summary.keypoints:
            missing.append("keypoints")
        if not self.summary.tags:
            missing.append("tags")
        return missing
