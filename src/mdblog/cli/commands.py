"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.export import build_manifest, write_manifest
from mdblog.core.models import CollectionConfig, LoadResult
from mdblog.core.pipeline import load_collection
from mdblog.errors import ContentError


PathArg = Annotated[Optional[str], typer.Argument(help="Content directory (default: content_dir setting)")]
DraftsOpt = Annotated[Optional[bool], typer.Option("--drafts/--no-drafts", help="Include draft documents")]
FutureOpt = Annotated[Optional[bool], typer.Option("--future/--no-future", help="Include future-dated documents")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def _load(settings: Settings) -> LoadResult:
    config = CollectionConfig(
        include_drafts=settings.include_drafts,
        include_future=settings.include_future,
    )
    try:
        return load_collection(settings.content_dir, config, settings.extensions, settings.summary_words)
    except OSError as e:
        _fail(f"Cannot read content directory {settings.content_dir}", e)


def _echo_errors(errors: list[ContentError]) -> None:
    for e in errors:
        typer.echo(f"  skipped {e}", err=True)


def list_cmd(
    ctx: typer.Context,
    path: PathArg = None,
    drafts: DraftsOpt = None,
    future: FutureOpt = None,
    ):
    """List published documents, newest first."""
    settings = _settings(ctx, overrides={
        "content_dir": path, "include_drafts": drafts, "include_future": future,
    })
    result = _load(settings)
    for doc in result.documents:
        marker = " [draft]" if doc.draft else ""
        typer.echo(f"{doc.date:%Y-%m-%d}  {doc.title}{marker}  ({doc.path})")
    _echo_errors(result.errors)
    if not result.documents:
        typer.echo("No documents found.", err=True)


def check_cmd(
    ctx: typer.Context,
    path: PathArg = None,
    ):
    """Validate every document's front matter, drafts included. Exit 1 on any error."""
    settings = _settings(ctx, overrides={
        "content_dir": path, "include_drafts": True, "include_future": True,
    })
    result = _load(settings)
    for e in result.errors:
        typer.echo(f"  {e}", err=True)
    typer.echo(f"Check complete - {len(result.documents)} ok, {len(result.errors)} error(s)")
    if result.errors:
        raise typer.Exit(1)


def export_cmd(
    ctx: typer.Context,
    path: PathArg = None,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Manifest file; stdout when omitted")] = None,
    drafts: DraftsOpt = None,
    future: FutureOpt = None,
    strict: Annotated[bool, typer.Option("--strict", help="Exit 1 if any document was skipped")] = False,
    ):
    """Write the ordered collection as a JSON manifest for the renderer."""
    settings = _settings(ctx, overrides={
        "content_dir": path, "include_drafts": drafts, "include_future": future,
    })
    result = _load(settings)
    if out is None:
        typer.echo(json.dumps(build_manifest(result.documents), indent=2, ensure_ascii=False))
    else:
        try:
            write_manifest(result.documents, out)
        except OSError as e:
            _fail(f"Cannot write manifest {out}", e)
        typer.echo(f"Exported {len(result.documents)} document(s) to {out}", err=True)
    _echo_errors(result.errors)
    if strict and result.errors:
        raise typer.Exit(1)
