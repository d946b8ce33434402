from __future__ import annotations

from datetime import date
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from ..errors import ExportError, IncompleteArticle
from ..types import Article

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_DEFAULT_TEMPLATE = "article.md"


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _load_template(template_path: Path | None) -> Template:
    if template_path is None:
        folder, name = _TEMPLATE_DIR, _DEFAULT_TEMPLATE
    else:
        folder, name = template_path.parent, template_path.name
    env = Environment(
        loader=FileSystemLoader(str(folder)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    return env.get_template(name)


def render_article(article: Article, template_path: Path | None = None, created: date | None = None) -> str:
    """Render a complete article into the Markdown note template.

    Raises:
        IncompleteArticle: If title, summary, keypoints or tags are missing
        ExportError: If the template cannot be loaded or references an
            unknown placeholder
    """
    missing = article.missing_fields()
    if missing:
        raise IncompleteArticle(missing)

    try:
        template = _load_template(template_path)
        return template.render(
            title=article.title,
            url=article.url,
            created=(created or date.today()).isoformat(),
            summary=article.summary.summary,
            keypoints=_bullets(article.summary.keypoints),
            tags=_bullets(article.summary.tags),
        )
    except TemplateError as exc:
        raise ExportError(f"rendering template: {type(exc).__name__}: {exc}") from exc


def export_article(output_folder: Path, article: Article, template_path: Path | None = None) -> Path:
    """Render ``article`` and write it to ``<output_folder>/<title>.md``.

    Nothing is written when the article is incomplete or rendering fails.
    """
    content = render_article(article, template_path)
    output_path = output_folder / f"{article.title}.md"
    try:
        output_folder.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"writing output file: {exc}") from exc
    return output_path
