"""
CLI commands for searching an exported entries file.

Each command loads the entries, builds the index and answers one request.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from ...exceptions import DocumentStoreError, FileHandlerError
from ...services.notebook import Notebook
from ...store.memory import InMemoryDocumentStore
from ...utils.file_handler import load_documents

DATE_FORMAT = "%Y-%m-%d"


def open_notebook(entries_path: Path) -> Notebook:
    """Load entries from JSON and index them."""
    try:
        documents = load_documents(entries_path)
        return Notebook(InMemoryDocumentStore(documents)).open()
    except (FileHandlerError, DocumentStoreError) as e:
        logger.error(f"Could not load entries: {e}")
        sys.exit(1)


def _as_date(value: Optional[datetime]):
    return value.date() if value is not None else None


def _format_date(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M")


@click.command(name="search")
@click.argument("entries", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("query", required=False, default="")
@click.option("--title/--no-title", "search_title", default=True, help="Match titles")
@click.option("--body/--no-body", "search_body", default=True, help="Match entry text")
@click.option("--tags/--no-tags", "search_tags", default=True, help="Match tags")
@click.option("--from", "from_date", type=click.DateTime(formats=[DATE_FORMAT]), help="Created on or after (YYYY-MM-DD)")
@click.option("--to", "to_date", type=click.DateTime(formats=[DATE_FORMAT]), help="Created on or before (YYYY-MM-DD)")
@click.option("--favorites", is_flag=True, help="Only favorite entries")
@click.option("--limit", default=20, show_default=True, type=click.IntRange(min=1), help="Maximum results shown")
def search_command(entries: Path, query: str, search_title: bool, search_body: bool,
                   search_tags: bool, from_date: Optional[datetime],
                   to_date: Optional[datetime], favorites: bool, limit: int):
    """Ranked full-text search over ENTRIES."""
    notebook = open_notebook(entries)

    results = notebook.search(
        query,
        search_title=search_title,
        search_body=search_body,
        search_tags=search_tags,
        from_date=_as_date(from_date),
        to_date=_as_date(to_date),
        favorites_only=favorites,
    )

    if not results:
        click.echo("No matching entries.")
        return

    for hit in results[:limit]:
        doc = hit.document
        star = "*" if doc.favorite else " "
        click.echo(f"{hit.score:>5} {star} {_format_date(doc.created_at)}  {doc.title}  [{doc.id}]")

    if len(results) > limit:
        click.echo(f"... {len(results) - limit} more")


@click.command(name="tag")
@click.argument("entries", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("tag")
def tag_command(entries: Path, tag: str):
    """List entries in ENTRIES carrying TAG."""
    notebook = open_notebook(entries)

    documents = notebook.entries_by_tag(tag)
    if not documents:
        click.echo(f"No entries tagged '{tag}'.")
        return

    for doc in documents:
        click.echo(f"{_format_date(doc.created_at)}  {doc.title}  [{doc.id}]")


@click.command(name="suggest")
@click.argument("entries", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("prefix")
@click.option("--limit", default=None, type=click.IntRange(min=0), help="Maximum suggestions")
def suggest_command(entries: Path, prefix: str, limit: Optional[int]):
    """Auto-complete PREFIX from title words and tags."""
    notebook = open_notebook(entries)

    for term in notebook.engine.suggest_terms(prefix, limit):
        click.echo(term)


@click.command(name="stats")
@click.argument("entries", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def stats_command(entries: Path):
    """Show index statistics for ENTRIES."""
    notebook = open_notebook(entries)

    for name, count in notebook.engine.stats().items():
        click.echo(f"{name:<12} {count}")
    click.echo(f"{'this_month':<12} {notebook.entries_this_month()}")
