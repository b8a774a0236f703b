"""Storage interface for imported notes"""

from abc import ABC, abstractmethod

from mdtree.core.models import Note


class NoteRepo(ABC):
    @abstractmethod
    def get(self, slug: str) -> Note | None:
        raise NotImplementedError

    @abstractmethod
    def upsert(self, note: Note) -> str:
        """Store note; return 'created', 'updated', or 'unchanged' (same content hash)."""
        raise NotImplementedError

    @abstractmethod
    def all(self) -> list[Note]:
        """Return every stored note ordered by slug."""
        raise NotImplementedError


def upsert_status(existing: Note | None, note: Note) -> str:
    """Classify an upsert by comparing the stored note's hash with the incoming one."""
    if existing is None:
        return 'created'
    return 'unchanged' if existing.hash == note.hash else 'updated'
