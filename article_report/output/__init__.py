"""Filename validation and Markdown export."""

from .filenames import is_valid_filename, prompt_for_title
from .renderer import export_article, render_article

__all__ = ["is_valid_filename", "prompt_for_title", "export_article", "render_article"]
