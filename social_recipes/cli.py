"""Command line interface for recipe detection in social posts."""

import sys

import click
import orjson

from .config import get_settings, validate_config
from .logging import get_logger, setup_logging
from .processing.content import analyze_post
from .processing.scoring import default_scorer
from .sources import load_sources
from .ui import RecipeUI

logger = get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: LOG_LEVEL setting)",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Emit logs as JSON (default: JSON_LOGGING setting)",
)
def cli(log_level, json_logs):
    """Social Recipes - find recipe content in captions and comments."""
    setup_logging(log_level=log_level, json_logging=json_logs, force=True)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Output file (default: stdout)",
)
@click.option("--pretty", is_flag=True, help="Show a table instead of JSON")
def analyze(source, output, pretty):
    """Analyse the posts in SOURCE (YAML or JSON, '-' for stdin)."""
    settings = get_settings()

    if not validate_config(settings):
        click.echo("❌ Error: configuration validation failed", err=True)
        sys.exit(1)

    try:
        posts = load_sources(source)
    except Exception as e:
        logger.error("Loading posts failed", error=str(e), source=source.name)
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    analyses = [analyze_post(post, settings) for post in posts]
    logger.info(
        "posts_analyzed",
        posts=len(analyses),
        recipes=sum(1 for a in analyses if a.recipe_detected),
    )

    if pretty:
        RecipeUI().show_analyses(analyses)
        return

    payload = [analysis.model_dump(by_alias=True) for analysis in analyses]
    output.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
    output.write("\n")


@cli.command()
@click.argument("text", required=False)
@click.option("--explain", is_flag=True, help="Show the points of every signal")
def score(text, explain):
    """Score TEXT (or stdin) for how recipe-like it is."""
    if text is None:
        text = click.get_text_stream("stdin").read()

    if explain:
        RecipeUI().show_breakdown(default_scorer.explain(text))
    else:
        click.echo(default_scorer.score(text))


if __name__ == "__main__":
    cli()
