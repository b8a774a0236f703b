from dataclasses import dataclass, field

from mdtree.core.models import Note
from mdtree.crud.repo import NoteRepo, upsert_status


@dataclass
class MemoryRepo(NoteRepo):
    _notes: dict[str, Note] = field(default_factory=dict)

    def get(self, slug: str) -> Note | None:
        return self._notes.get(slug)

    def upsert(self, note: Note) -> str:
        status = upsert_status(self._notes.get(note.slug), note)
        if status != 'unchanged':
            self._notes[note.slug] = note
        return status

    def all(self) -> list[Note]:
        return [self._notes[s] for s in sorted(self._notes)]
