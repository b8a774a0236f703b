"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdtree.config import Settings, load_config
from mdtree.core.blocks import parse_blocks
from mdtree.core.frontmatter import extract
from mdtree.core.links import extract_links
from mdtree.core.models import DocumentAdapter
from mdtree.core.pipeline import discover_files, run_export, run_import
from mdtree.core.tiptap import to_tiptap
from mdtree.crud.json_repo import JsonRepo
from mdtree.exceptions import MdtreeError
from mdtree.logging_utils import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def convert_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to convert")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="tree or tiptap")] = None,
    ):
    """Print a file's front matter and document tree as JSON."""
    settings = _settings(overrides={"content_format": fmt})
    frontmatter, body = extract(_read(path))
    nodes = parse_blocks(body, settings.wikilink_prefix)
    if settings.content_format == "tiptap":
        content = to_tiptap(nodes)
    else:
        content = DocumentAdapter.dump_python(nodes, mode="json")
    typer.echo(json.dumps({"frontmatter": frontmatter, "content": content}, indent=2, ensure_ascii=False))


def links_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file or directory to scan")],
    ):
    """Print the wikilink targets and tags found in Markdown files."""
    _settings()
    files = discover_files(path)
    if not files:
        _fail(f"No Markdown files found at {path}")
    wikilinks, tags = set(), set()
    for f in files:
        frontmatter, body = extract(_read(f))
        links = extract_links(body, frontmatter.get("tags"))
        wikilinks |= links.wikilinks
        tags |= links.tags
    typer.echo(json.dumps({"wikilinks": sorted(wikilinks), "tags": sorted(tags)}, indent=2, ensure_ascii=False))


def import_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file or vault directory to import")],
    store: Annotated[Optional[str], typer.Option("--store-dir", help="Note store directory")] = None,
    ):
    """Convert Markdown notes and upsert them into the note store."""
    settings = _settings(overrides={"store_dir": store})
    if not path.exists():
        _fail(f"Path not found: {path}")
    store_dir = Path(settings.store_dir)
    try:
        result = run_import(path, JsonRepo(store_dir), settings.wikilink_prefix)
    except MdtreeError as e:
        _fail("Import failed", e)

    for name in result.skipped:
        typer.echo(f"  skipped: {name}")
    for err in result.errors:
        typer.echo(f"  error: {err}", err=True)
    counts = result.counts
    typer.echo(
        f"Import complete - "
        f"{counts['created']} created, "
        f"{counts['updated']} updated, "
        f"{counts['unchanged']} unchanged, "
        f"{len(result.skipped)} skipped, "
        f"{len(result.errors)} failed"
    )
    if not result.success:
        raise typer.Exit(1)


def export_cmd(
    store: Annotated[Optional[str], typer.Option("--store-dir", help="Note store directory")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Write every stored note back out as Markdown with front matter."""
    settings = _settings(overrides={"store_dir": store, "output_dir": out})
    repo = JsonRepo(Path(settings.store_dir))
    output_dir = Path(settings.output_dir)
    try:
        results = run_export(repo, output_dir)
    except (MdtreeError, OSError) as e:
        _fail("Export failed", e)
    if not results:
        typer.echo(f"No notes found in {settings.store_dir}.")
        raise typer.Exit(1)
    for slug, md_path in results:
        typer.echo(f"  {slug} -> {md_path}")
    typer.echo(f"Exported {len(results)} note(s) to {output_dir}/")
