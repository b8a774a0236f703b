"""Unit tests for the note stores in crud/"""

import pytest

from mdtree.core.pipeline import parse_note
from mdtree.crud.json_repo import JsonRepo
from mdtree.crud.memory_repo import MemoryRepo
from mdtree.exceptions import StoreError


@pytest.fixture(name="note")
def note_fixture():
    return parse_note("docs/Hello.md", "---\ntags: [x]\n---\n# Hello\n\nWorld [[Other]]\n")


@pytest.fixture(params=["memory", "json"], name="repo")
def repo_fixture(request, tmp_path):
    if request.param == "memory":
        return MemoryRepo()
    return JsonRepo(tmp_path / "store")


def test_upsert_created_then_unchanged(repo, note):
    assert repo.upsert(note) == "created"
    assert repo.upsert(note) == "unchanged"


def test_upsert_updated_on_new_hash(repo, note):
    repo.upsert(note)
    changed = parse_note("docs/Hello.md", "# Hello again\n")
    assert repo.upsert(changed) == "updated"
    assert repo.get("hello").markdown == "# Hello again\n"


def test_get_missing(repo):
    assert repo.get("nope") is None


def test_get_returns_equal_note(repo, note):
    repo.upsert(note)
    assert repo.get("hello") == note


def test_all_sorted_by_slug(repo):
    for name in ["b.md", "a.md", "c.md"]:
        repo.upsert(parse_note(name, name))
    assert [n.slug for n in repo.all()] == ["a", "b", "c"]


def test_json_repo_writes_one_file_per_note(tmp_path, note):
    repo = JsonRepo(tmp_path / "store")
    repo.upsert(note)
    assert (tmp_path / "store" / "hello.json").exists()


def test_json_repo_all_on_missing_dir(tmp_path):
    assert JsonRepo(tmp_path / "absent").all() == []


def test_json_repo_corrupt_file_raises(tmp_path):
    store = tmp_path / "store"
    store.mkdir()
    (store / "broken.json").write_text("{not json")
    with pytest.raises(StoreError):
        JsonRepo(store).get("broken")


@pytest.mark.parametrize("slug", ["blog/post", "../escape", ".."])
def test_json_repo_rejects_path_slugs(tmp_path, note, slug):
    repo = JsonRepo(tmp_path / "store")
    with pytest.raises(StoreError):
        repo.upsert(note.model_copy(update={"slug": slug}))
    assert not (tmp_path / "escape.json").exists()
