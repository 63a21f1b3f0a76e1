"""
notecache — NoteStore Unit Tests
=================================

What:  Tests for name→path mapping and the fetch/save/remove/list primitives.
How:   Real files in a temporary directory; failures are provoked with
       directories masquerading as notes and missing cache directories.

Test Strategy:
    ✅ path_for joins cache_dir and <name>.txt verbatim
    ✅ fetch returns None for missing AND unreadable notes
    ✅ save creates and overwrites; write errors are swallowed
    ✅ remove is a no-op for missing notes
    ✅ list_notes filters on .txt and loads content eagerly
"""

import pytest

from notecache.exceptions import FileStorageError
from notecache.services.note_store import NoteStore


class TestPathFor:

    def test_appends_txt_extension(self, note_store, cache_dir):
        assert note_store.path_for("todo") == cache_dir / "todo.txt"

    def test_name_is_not_sanitized(self, note_store, cache_dir):
        """Traversal sequences pass through unchanged."""
        assert note_store.path_for("../escape") == cache_dir / "../escape.txt"


class TestFetch:

    @pytest.mark.asyncio
    async def test_missing_note_is_none(self, note_store):
        assert await note_store.fetch("nope") is None

    @pytest.mark.asyncio
    async def test_reads_existing_note(self, note_store, cache_dir):
        (cache_dir / "todo.txt").write_text("buy milk", encoding="utf-8")
        assert await note_store.fetch("todo") == "buy milk"

    @pytest.mark.asyncio
    async def test_empty_note_is_present(self, note_store, cache_dir):
        (cache_dir / "blank.txt").write_text("", encoding="utf-8")
        assert await note_store.fetch("blank") == ""

    @pytest.mark.asyncio
    async def test_unreadable_note_is_none(self, note_store, cache_dir):
        """A directory named like a note exists but cannot be read."""
        (cache_dir / "weird.txt").mkdir()
        assert await note_store.fetch("weird") is None

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_none(self, note_store, cache_dir):
        (cache_dir / "binary.txt").write_bytes(b"\xff\xfe\xfa")
        assert await note_store.fetch("binary") is None


class TestSave:

    @pytest.mark.asyncio
    async def test_creates_file(self, note_store, cache_dir):
        await note_store.save("todo", "buy milk")
        assert (cache_dir / "todo.txt").read_text(encoding="utf-8") == "buy milk"

    @pytest.mark.asyncio
    async def test_overwrites_file(self, note_store, cache_dir):
        await note_store.save("todo", "a much longer first version")
        await note_store.save("todo", "short")
        assert (cache_dir / "todo.txt").read_text(encoding="utf-8") == "short"

    @pytest.mark.asyncio
    async def test_unicode_round_trip(self, note_store):
        await note_store.save("greeting", "привіт ✓")
        assert await note_store.fetch("greeting") == "привіт ✓"

    @pytest.mark.asyncio
    async def test_write_failure_is_swallowed(self, tmp_path):
        """Saving into a missing directory logs instead of raising."""
        store = NoteStore(tmp_path / "does-not-exist")
        await store.save("todo", "buy milk")
        assert await store.fetch("todo") is None


class TestRemove:

    @pytest.mark.asyncio
    async def test_deletes_existing_note(self, note_store, cache_dir):
        (cache_dir / "todo.txt").write_text("x", encoding="utf-8")
        await note_store.remove("todo")
        assert not (cache_dir / "todo.txt").exists()

    @pytest.mark.asyncio
    async def test_missing_note_is_noop(self, note_store):
        await note_store.remove("nope")
        assert await note_store.exists("nope") is False

    @pytest.mark.asyncio
    async def test_exists_tracks_lifecycle(self, note_store):
        assert await note_store.exists("todo") is False
        await note_store.save("todo", "x")
        assert await note_store.exists("todo") is True
        await note_store.remove("todo")
        assert await note_store.exists("todo") is False

    @pytest.mark.asyncio
    async def test_nul_in_name_is_absent(self, note_store):
        """No file can carry a NUL byte; every primitive treats it as missing."""
        assert await note_store.exists("bad\x00name") is False
        assert await note_store.fetch("bad\x00name") is None
        await note_store.remove("bad\x00name")
        await note_store.save("bad\x00name", "x")
        assert await note_store.list_notes() == []


class TestListNotes:

    @pytest.mark.asyncio
    async def test_empty_directory(self, note_store):
        assert await note_store.list_notes() == []

    @pytest.mark.asyncio
    async def test_only_txt_files_are_listed(self, note_store, cache_dir):
        (cache_dir / "a.txt").write_text("alpha", encoding="utf-8")
        (cache_dir / "b.txt").write_text("beta", encoding="utf-8")
        (cache_dir / "c.md").write_text("ignored", encoding="utf-8")
        (cache_dir / "d.txt.bak").write_text("ignored", encoding="utf-8")

        notes = await note_store.list_notes()

        by_name = {note.name: note.text for note in notes}
        assert by_name == {"a": "alpha", "b": "beta"}

    @pytest.mark.asyncio
    async def test_unreadable_entry_has_null_text(self, note_store, cache_dir):
        (cache_dir / "weird.txt").mkdir()
        notes = await note_store.list_notes()
        assert [(n.name, n.text) for n in notes] == [("weird", None)]

    @pytest.mark.asyncio
    async def test_missing_directory_raises(self, tmp_path):
        store = NoteStore(tmp_path / "gone")
        with pytest.raises(FileStorageError):
            await store.list_notes()
