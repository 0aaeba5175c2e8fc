"""Prompt Atlas CLI."""

import asyncio
import json
import sys
from pathlib import Path

import click

from .catalog import CATEGORIES, Dialect, PromptRecord, SourceConfig, load_sources
from .config import get_settings
from .engine import PromptAggregator, parse_document, summarize
from .github_client import GitHubClient
from .logging_config import setup_colored_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--color/--no-color", default=None, help="Color log output (default: only on a terminal)")
@click.pass_context
def cli(ctx, verbose, color):
    """Prompt Atlas - extract image-generation prompt templates from community READMEs."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_colored_logging(verbose, color=color)


@cli.command()
def sources():
    """List the configured README sources."""
    settings = get_settings()
    try:
        configured = load_sources(settings)
    except Exception as e:
        click.echo(f"Error loading sources: {e}", err=True)
        sys.exit(1)

    for source in configured:
        click.echo(f"  {source.source_id:<12} {source.repository} ({source.branch}:{source.file_path}) [{source.dialect}]")


@cli.command()
def categories():
    """List the prompt category taxonomy."""
    for category in CATEGORIES:
        click.echo(f"  {category.id.value:<13} {category.name} - {category.description}")


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--dialect",
    "-d",
    type=click.Choice([d.value for d in Dialect]),
    default=Dialect.FLAT.value,
    show_default=True,
    help="README convention of the file",
)
@click.option("--source-id", default="local", show_default=True, help="ID namespace for the records")
@click.option("--owner", default="local", show_default=True, help="Repository owner used for attribution")
@click.option("--repo", "repo_name", default=None, help="Repository name (defaults to the file's parent directory)")
@click.option("--json", "as_json", is_flag=True, help="Print records as JSON")
def parse(file_path, dialect, source_id, owner, repo_name, as_json):
    """Parse a local README file."""
    path = Path(file_path)
    source = SourceConfig(
        owner=owner,
        repo_name=repo_name or path.resolve().parent.name,
        file_path=path.name,
        source_id=source_id,
        dialect=dialect,
    )

    records = parse_document(path.read_text(encoding="utf-8"), source)

    if as_json:
        _echo_json(records)
    else:
        _echo_report(records)


@cli.command()
@click.option("--source", "-s", "source_ids", multiple=True, help="Only fetch these source IDs")
@click.option("--json", "as_json", is_flag=True, help="Print records as JSON")
def fetch(source_ids, as_json):
    """Fetch every configured source and extract its prompts."""
    settings = get_settings()
    try:
        configured = load_sources(settings)
    except Exception as e:
        click.echo(f"Error loading sources: {e}", err=True)
        sys.exit(1)

    if source_ids:
        configured = [s for s in configured if s.source_id in source_ids]
        if not configured:
            click.echo(f"No configured source matches: {', '.join(source_ids)}", err=True)
            sys.exit(1)

    aggregator = PromptAggregator(GitHubClient(settings), concurrent=settings.concurrent_fetch)
    records = asyncio.run(aggregator.collect(configured))

    if not records:
        click.echo("No prompts were collected. Check the README structure of each source.", err=True)
        sys.exit(1)

    if as_json:
        _echo_json(records)
        return

    _echo_report(records)
    click.echo("")
    click.echo("Samples")
    click.echo("-" * 40)
    for source in configured:
        sample = next((r for r in records if r.id.startswith(f"{source.source_id}-")), None)
        if sample is None:
            continue
        click.echo(f"  [{sample.id}] {sample.title}")
        click.echo(f"      category:    {sample.category.value}")
        click.echo(f"      description: {sample.description or 'none'}")
        click.echo(f"      language:    {sample.language}")


def _echo_json(records: list[PromptRecord]) -> None:
    payload = [record.model_dump(mode="json") for record in records]
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _echo_report(records: list[PromptRecord]) -> None:
    click.echo(f"Extracted {len(records)} prompts")
    click.echo("=" * 40)
    for category, count in summarize(records).items():
        click.echo(f"  {category:<13} {count}")


if __name__ == "__main__":
    cli()
