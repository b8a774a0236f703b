"""Directory-of-JSON note store: one <slug>.json file per note"""

import logging
from pathlib import Path

from pydantic import ValidationError

from mdtree.core.models import Note
from mdtree.crud.repo import NoteRepo, upsert_status
from mdtree.exceptions import StoreError


logger = logging.getLogger(__name__)


class JsonRepo(NoteRepo):
    def __init__(self, root: Path):
        self.root = Path(root)

    def _file(self, slug: str) -> Path:
        if not slug or Path(slug).name != slug or slug in ('.', '..'):
            raise StoreError(f"Slug {slug!r} is not a plain file name")
        return self.root / f"{slug}.json"

    def _load(self, path: Path) -> Note:
        try:
            return Note.model_validate_json(path.read_text(encoding='utf-8'))
        except (OSError, ValidationError) as e:
            raise StoreError(f"Cannot read stored note {path}: {e}") from e

    def get(self, slug: str) -> Note | None:
        path = self._file(slug)
        return self._load(path) if path.exists() else None

    def upsert(self, note: Note) -> str:
        existing = self.get(note.slug)
        if existing is not None and existing.path != note.path:
            logger.warning("Slug %r from %s replaces note imported from %s", note.slug, note.path, existing.path)
        status = upsert_status(existing, note)
        if status != 'unchanged':
            self.root.mkdir(parents=True, exist_ok=True)
            self._file(note.slug).write_text(note.model_dump_json(indent=2), encoding='utf-8')
        return status

    def all(self) -> list[Note]:
        if not self.root.exists():
            return []
        return [self._load(p) for p in sorted(self.root.glob('*.json'))]
