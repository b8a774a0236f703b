"""Note import/export orchestration: file discovery, per-file conversion, store round trip"""

import logging
from pathlib import Path

from mdtree.core.blocks import parse_blocks
from mdtree.core.frontmatter import extract, render_frontmatter
from mdtree.core.inline import WIKILINK_PREFIX
from mdtree.core.links import extract_links
from mdtree.core.models import ImportResult, Note
from mdtree.core.serialize import serialize
from mdtree.core.utils.hashing import sha256
from mdtree.core.utils.slug import slugify
from mdtree.crud.repo import NoteRepo


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.markdown'}


def _string_field(frontmatter: dict, *keys: str) -> str | None:
    """Return the first non-empty string value among keys."""
    for key in keys:
        value = frontmatter.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def parse_note(path: str, raw: str, wikilink_prefix: str = WIKILINK_PREFIX) -> Note:
    """Convert one source file's text into a Note.

    Title comes from front matter `title`/`Title`, else the file stem. Slug is the
    slugified front matter `slug`, else the slugified stem, else a hash prefix,
    so it is always safe to use as a file name.
    """
    frontmatter, body = extract(raw)
    digest = sha256(raw)
    stem = Path(path).stem
    links = extract_links(body, frontmatter.get('tags'))
    return Note(
        slug=slugify(_string_field(frontmatter, 'slug') or '') or slugify(stem) or digest[:12],
        path=path,
        title=_string_field(frontmatter, 'title', 'Title') or stem,
        hash=digest,
        markdown=body,
        frontmatter=frontmatter,
        content=parse_blocks(body, wikilink_prefix),
        wikilinks=sorted(links.wikilinks),
        tags=sorted(links.tags),
    )


def discover_files(path: Path) -> list[Path]:
    """Return sorted Markdown files under path, or [path] if it is a single Markdown file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith('.') for part in path.relative_to(root).parts[:-1])


def _candidates(path: Path) -> list[Path]:
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and not _is_hidden(p, path))


def run_import(path: str | Path, repo: NoteRepo, wikilink_prefix: str = WIKILINK_PREFIX) -> ImportResult:
    """Import a Markdown file or vault directory into repo.

    Non-Markdown files are reported as skipped; files that cannot be read or
    decoded are reported as errors and do not stop the import.
    """
    root = Path(path)
    base = root.parent if root.is_file() else root
    result = ImportResult()

    for p in _candidates(root):
        rel = p.relative_to(base).as_posix()
        if p.suffix.lower() not in MD_EXTENSIONS:
            result.skipped.append(rel)
            continue
        try:
            raw = p.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", p, e)
            result.errors.append(f"{rel}: {e}")
            continue
        note = parse_note(rel, raw, wikilink_prefix)
        status = repo.upsert(note)
        result.counts[status] += 1
        result.slugs.append(note.slug)
        logger.info("%s: %s -> %s", status, rel, note.slug)

    return result


def build_markdown(note: Note) -> str:
    """Return the note as Markdown with its front matter header re-attached."""
    header = render_frontmatter(note.frontmatter)
    body = serialize(note.content)
    if not header:
        return body + '\n'
    return f"{header}\n{body}\n"


def run_export(repo: NoteRepo, output_dir: Path) -> list[tuple[str, Path]]:
    """Write every stored note to output_dir mirroring its source folder. Returns (slug, path) pairs."""
    results = []
    for note in repo.all():
        dest_dir = output_dir / Path(note.path).parent
        dest_dir.mkdir(parents=True, exist_ok=True)
        out = dest_dir / f"{note.slug}.md"
        out.write_text(build_markdown(note), encoding='utf-8')
        results.append((note.slug, out))
    return results
