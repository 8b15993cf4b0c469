"""Command-line entrypoint for Article Stock."""

import asyncio
import json

import typer

from article_stock.config import settings
from article_stock.exceptions import IntakeError
from article_stock.extractors.cached import CachingMetadataExtractor
from article_stock.extractors.http_extractor import HttpMetadataExtractor
from article_stock.models.article import ArticlePreview
from article_stock.platforms.classifier import classify
from article_stock.services.intake import ArticleIntakeService
from article_stock.utils.log_config import configure_logging

app = typer.Typer(
    name="article-stock",
    help="Classify and preview article URLs (Twitter/X, Zenn, Qiita)",
    add_completion=False,
)


@app.callback()
def setup() -> None:
    """Configure logging before any command runs."""
    configure_logging(settings.get_log_level(), json_output=settings.log_json)


@app.command("classify")
def classify_command(url: str = typer.Argument(..., help="URL to classify")) -> None:
    """Print the platform a URL belongs to."""
    platform = classify(url)
    if platform is None:
        typer.echo("unsupported")
        raise typer.Exit(code=1)
    typer.echo(platform.value)


async def _preview(url: str, timeout_seconds: float) -> ArticlePreview:
    settings_override = settings.model_copy(update={"extract_timeout_seconds": timeout_seconds})
    extractor = CachingMetadataExtractor.from_settings(
        HttpMetadataExtractor.from_settings(settings_override), settings_override
    )
    async with extractor:
        return await ArticleIntakeService(extractor).preview(url)


@app.command("preview")
def preview_command(
    url: str = typer.Argument(..., help="Article URL to preview"),
    timeout: float = typer.Option(
        settings.extract_timeout_seconds, "--timeout", "-t", help="Fetch timeout in seconds"
    ),
) -> None:
    """Fetch an article and print its preview JSON."""
    try:
        preview = asyncio.run(_preview(url, timeout))
    except IntakeError as e:
        typer.echo(json.dumps(e.to_response(), ensure_ascii=False))
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps(preview.to_response(), ensure_ascii=False, indent=2))


def main() -> None:
    """Run the CLI."""
    app()


if __name__ == "__main__":
    main()
