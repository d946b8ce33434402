from datetime import date
from pathlib import Path

import pytest

from article_report.errors import ExportError, IncompleteArticle
from article_report.output.renderer import export_article, render_article
from article_report.types import Article, ArticleSummary


def _sample_article(title: str = "My Title", summary: ArticleSummary | None = None) -> Article:
    return Article(
        url="https://example.com/post",
        title=title,
        content="Hello world",
        summary=summary
        if summary is not None
        else ArticleSummary(
            summary="A short summary.",
            keypoints=["First point", "Second point"],
            tags=["python", "web-scraping"],
        ),
    )


def test_render_article_fills_all_placeholders() -> None:
    text = render_article(_sample_article(), created=date(2024, 5, 1))

    assert "title: My Title" in text
    assert "source: https://example.com/post" in text
    assert "created: 2024-05-01" in text
    assert "# My Title" in text
    assert "A short summary." in text
    assert "- First point\n- Second point" in text
    assert "- python\n- web-scraping" in text
    assert "{{" not in text


def test_render_article_does_not_escape_markdown() -> None:
    article = _sample_article(
        summary=ArticleSummary(summary="Uses <b>tags</b> & more", keypoints=["k"], tags=["t"])
    )
    assert "Uses <b>tags</b> & more" in render_article(article)


@pytest.mark.parametrize(
    "article, missing",
    [
        (Article(url="u", title="", content="c", summary=ArticleSummary("s", ["k"], ["t"])), ["title"]),
        (Article(url="u", title="T", content="c"), ["summary", "keypoints", "tags"]),
        (Article(url="u", title="T", content="c", summary=ArticleSummary("s", [], ["t"])), ["keypoints"]),
        (Article(url="u", title="T", content="c", summary=ArticleSummary("", ["k"], [])), ["summary", "tags"]),
    ],
)
def test_render_article_rejects_incomplete_article(article: Article, missing: list[str]) -> None:
    with pytest.raises(IncompleteArticle) as excinfo:
        render_article(article)
    assert excinfo.value.missing == missing


def test_export_article_writes_markdown_file(tmp_path: Path) -> None:
    output_dir = tmp_path / "notes"
    path = export_article(output_dir, _sample_article())

    assert path == output_dir / "My Title.md"
    text = path.read_text(encoding="utf-8")
    assert "A short summary." in text
    assert f"created: {date.today().isoformat()}" in text


def test_export_article_writes_nothing_when_incomplete(tmp_path: Path) -> None:
    article = Article(url="u", title="T", content="c")
    with pytest.raises(IncompleteArticle):
        export_article(tmp_path, article)
    assert list(tmp_path.iterdir()) == []


def test_export_article_uses_custom_template(tmp_path: Path) -> None:
    template = tmp_path / "custom.md"
    template.write_text("{{ title }} | {{ url }}\n{{ tags }}\n", encoding="utf-8")

    path = export_article(tmp_path / "out", _sample_article(), template_path=template)

    assert path.read_text(encoding="utf-8") == (
        "My Title | https://example.com/post\n- python\n- web-scraping\n"
    )


def test_export_article_reports_missing_template(tmp_path: Path) -> None:
    with pytest.raises(ExportError, match="TemplateNotFound"):
        export_article(tmp_path / "out", _sample_article(), template_path=tmp_path / "nope" / "t.md")
    assert not (tmp_path / "out").exists()


def test_export_article_reports_unknown_placeholder(tmp_path: Path) -> None:
    template = tmp_path / "custom.md"
    template.write_text("{{ title }} by {{ author }}\n", encoding="utf-8")

    with pytest.raises(ExportError, match="author"):
        export_article(tmp_path / "out", _sample_article(), template_path=template)
    assert not (tmp_path / "out").exists()


def test_export_article_reports_filesystem_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-folder"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(ExportError, match="writing output file") as excinfo:
        export_article(blocker / "sub", _sample_article())
    assert excinfo.value.stage == "export"
