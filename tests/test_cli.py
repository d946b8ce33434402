"""CLI tests using Typer's CliRunner, mostly with the pipeline patched out."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from article_report import cli
from article_report import runner as pipeline
from article_report.fetch.fetcher import FetchResult
from article_report.types import ArticleSummary
from article_report.errors import RemoteError

runner = CliRunner()


def test_cli_prints_output_path(tmp_path: Path, monkeypatch) -> None:
    calls = {}

    def fake_run_pipeline(url, output_folder, cfg, read_line, notify):
        calls["url"] = url
        calls["output_folder"] = output_folder
        calls["api_key"] = cfg.provider.api_key
        return output_folder / "Note.md"

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)

    result = runner.invoke(
        cli.app,
        [str(tmp_path), "https://example.com/post", "--api-key", "k-123"],
    )

    assert result.exit_code == 0, result.output
    assert "Article created successfully" in result.output
    assert calls == {
        "url": "https://example.com/post",
        "output_folder": tmp_path,
        "api_key": "k-123",
    }


def test_cli_reads_api_key_from_environment(tmp_path: Path, monkeypatch) -> None:
    seen = {}

    def fake_run_pipeline(url, output_folder, cfg, read_line, notify):
        seen["api_key"] = cfg.provider.api_key
        return output_folder / "Note.md"

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)
    monkeypatch.setenv("GROQ_API_KEY", "from-env")

    result = runner.invoke(cli.app, [str(tmp_path), "https://example.com/post"])

    assert result.exit_code == 0, result.output
    assert seen["api_key"] == "from-env"


def test_cli_exits_non_zero_on_pipeline_error(tmp_path: Path, monkeypatch) -> None:
    def failing_run_pipeline(*args, **kwargs):
        raise RemoteError("rate limited", type="tokens", code="rate_limit_exceeded")

    monkeypatch.setattr(cli, "run_pipeline", failing_run_pipeline)

    result = runner.invoke(cli.app, [str(tmp_path), "https://example.com/post"])

    assert result.exit_code == 1
    assert "Error [summarize]" in result.output
    assert "rate limited" in result.output


def test_cli_applies_config_file(tmp_path: Path, monkeypatch) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("fetch:\n  timeout_seconds: 3\n", encoding="utf-8")
    seen = {}

    def fake_run_pipeline(url, output_folder, cfg, read_line, notify):
        seen["timeout"] = cfg.fetch.timeout_seconds
        return output_folder / "Note.md"

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)

    result = runner.invoke(
        cli.app,
        [str(tmp_path), "https://example.com/post", "--config", str(config_path)],
    )

    assert result.exit_code == 0, result.output
    assert seen["timeout"] == 3


def test_cli_requires_both_arguments() -> None:
    result = runner.invoke(cli.app, ["only-a-folder"])
    assert result.exit_code != 0


def test_cli_reports_unparseable_url_as_fetch_error(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, [str(tmp_path), "http://[::1", "--api-key", "k-123"])

    assert result.exit_code == 1
    assert "Error [fetch]" in result.output
    assert list(tmp_path.iterdir()) == []


class _CannedProvider:
    def __init__(self, api_key, cfg):
        pass

    def summarize(self, content, system_prompt):
        return ArticleSummary(summary="s", keypoints=["k1"], tags=["t1"])


def test_cli_reports_missing_template_as_export_error(tmp_path: Path, monkeypatch) -> None:
    out = tmp_path / "notes"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"output:\n  template_path: {tmp_path / 'missing.md'}\n", encoding="utf-8"
    )

    def fetch(url, timeout, trust_env=True):
        page = "<html><body><h1>Title</h1><p>Body</p></body></html>"
        return FetchResult(url=url, status_code=200, text=page)

    monkeypatch.setattr(pipeline, "fetch_page", fetch)
    monkeypatch.setattr(pipeline, "GroqProvider", _CannedProvider)

    result = runner.invoke(
        cli.app,
        [str(out), "https://example.com/post", "--api-key", "k-123", "--config", str(config_path)],
    )

    assert result.exit_code == 1
    assert "Error [export]" in result.output
    assert not (out / "Title.md").exists()
