"""
Command-line interface for the article report tool.

Uses Typer for argument parsing and rich for console output. Loads a
``.env`` file so the Groq API key can be kept out of the shell environment.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
import typer
from rich.console import Console

from .config import load_config
from .errors import ReportError
from .logging_utils import setup_logging
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def run(
    output_folder: Path = typer.Argument(..., help="Folder the Markdown note is written to."),
    url: str = typer.Argument(..., help="URL of the article to summarize."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        envvar="GROQ_API_KEY",
        help="Groq API key (or set GROQ_API_KEY / .env).",
    ),
):
    """Summarize the article at URL into OUTPUT_FOLDER/<title>.md.

    Args:
        output_folder: Directory for the generated note
        url: The article to fetch
        config: Optional path to YAML config file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        api_key: Override the summarization API key
    """
    load_dotenv()

    cfg = load_config(str(config) if config else None)
    if api_key:
        cfg.provider.api_key = api_key
    if log_level:
        cfg.logging.level = log_level
    setup_logging(cfg.logging)

    try:
        output_path = run_pipeline(
            url,
            output_folder,
            cfg,
            read_line=console.input,
            notify=lambda message: console.print(message, markup=False),
        )
    except ReportError as exc:
        console.print(f"Error [{exc.stage}]: {exc}", style="red", markup=False)
        raise typer.Exit(code=1) from exc

    console.print(f"Article created successfully: {output_path}", markup=False)


if __name__ == "__main__":
    app()
