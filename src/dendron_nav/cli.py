"""CLI for resolving Dendron vault navigation."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from dendron_nav.config import DEFAULT_BASE_URL, DEFAULT_NOTES_DIR, OUTPUT_FILES
from dendron_nav.core.importer.loader import NoteImporter
from dendron_nav.core.resolver import EmptyCorpusError, resolve_config
from dendron_nav.logging_config import configure_logging
from dendron_nav.models.node import ImportFailure, ResolvedConfig
from dendron_nav.protocols import ImporterProtocol, WriterProtocol
from dendron_nav.writer import FileWriter

app = typer.Typer(help="Build VitePress navigation tables from a Dendron vault.")


def run_build(
    importer: ImporterProtocol,
    *,
    base_url: str = DEFAULT_BASE_URL,
    writer: WriterProtocol | None = None,
) -> ResolvedConfig:
    """Execute the import and resolution pipeline.

    Args:
        importer: Source of note import results.
        base_url: Prefix for redirect targets.
        writer: If given, each table is written to its own JSON file.

    Returns:
        The resolved navigation tables.
    """
    config = resolve_config(importer.import_notes(), base_url=base_url)

    if writer is not None:
        tables = config.to_dict()
        for table, fname in OUTPUT_FILES.items():
            writer.make_data_file(fname, data=tables[table])

    logger.info(
        "Resolved {} leaf page(s) under {} sidebar(s), {} note(s) failed",
        len(config.leaf_nodes),
        len(config.sidebar),
        len(config.import_failures),
    )
    return config


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


@app.command()
def build(
    notes_dir: Annotated[
        Path, typer.Argument(help="Directory with Dendron .md notes")
    ] = DEFAULT_NOTES_DIR,
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", "-b", help="Site base path"),
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Write one JSON file per table here"),
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
) -> None:
    """Resolve nav, sidebars, vocabulary, leaves and redirects for a vault."""
    writer = FileWriter(output_dir, dry_run=dry_run) if output_dir is not None else None
    try:
        config = run_build(NoteImporter(notes_dir), base_url=base_url, writer=writer)
    except FileNotFoundError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    except EmptyCorpusError as e:
        logger.error("Nothing to build from {}: {}", notes_dir, e)
        raise typer.Exit(1) from e

    if writer is None:
        typer.echo(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
    else:
        logger.info(writer.summary())


@app.command()
def check(
    notes_dir: Annotated[
        Path, typer.Argument(help="Directory with Dendron .md notes")
    ] = DEFAULT_NOTES_DIR,
) -> None:
    """List notes whose frontmatter cannot be imported."""
    try:
        results = NoteImporter(notes_dir).import_notes()
    except FileNotFoundError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    failures = [r for r in results if isinstance(r, ImportFailure)]
    typer.echo(f"{len(results) - len(failures)} valid, {len(failures)} invalid note(s)")
    for failure in failures:
        typer.echo(f"  {failure.filename}: {', '.join(failure.errors)}")
    if failures:
        raise typer.Exit(1)
