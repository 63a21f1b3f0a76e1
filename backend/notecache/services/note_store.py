"""
notecache — Note Store (filesystem-backed storage)
===================================================

What:  Maps a note name to <cache_dir>/<name>.txt and performs existence,
       read, write, delete and listing against it.
How:   Async file I/O through aiofiles, so a handler suspends only at
       filesystem calls and other requests may run in between.
Who:   Called by the note route handlers; one instance per application,
       stored on app.state.note_store.

Failure model:
    Every per-note filesystem error is caught here and logged:
    - fetch() collapses it into None (indistinguishable from "missing")
    - save() and remove() swallow it (the caller sees success)
    Only list_notes() raises, when the directory itself cannot be listed.

Names are used verbatim: no escaping, no normalization. A name containing
"../" resolves outside the cache directory.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import aiofiles
import aiofiles.os

from notecache.exceptions import FileStorageError
from notecache.schemas.note import NoteEntry

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".txt"


class NoteStore:
    """
    File-per-note storage rooted at a single cache directory.

    No in-memory cache or index: every call goes back to the filesystem,
    so the directory contents are the only source of truth.
    """

    def __init__(self, cache_dir: Union[str, Path]):
        self.cache_dir = Path(cache_dir)

    def path_for(self, name: str) -> Path:
        """Return <cache_dir>/<name>.txt without touching the filesystem."""
        return self.cache_dir / f"{name}{NOTE_EXTENSION}"

    async def exists(self, name: str) -> bool:
        return await aiofiles.os.path.exists(self.path_for(name))

    async def fetch(self, name: str) -> Optional[str]:
        """
        Read a note's content.

        Returns:
            The UTF-8 text, or None when the file is missing OR unreadable.
            An existing empty note returns "" (present, not None).
        """
        path = self.path_for(name)
        try:
            if not await aiofiles.os.path.exists(path):
                return None
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                return await f.read()
        except (OSError, ValueError) as e:
            logger.error("Error reading note %r at %s: %s", name, path, str(e))
            return None

    async def save(self, name: str, content: str) -> None:
        """
        Create or overwrite a note.

        Truncates and replaces an existing file. Write errors are logged and
        not reported to the caller.
        """
        path = self.path_for(name)
        try:
            async with aiofiles.open(path, "w", encoding="utf-8") as f:
                await f.write(content)
            logger.info("Note saved: %r (%d chars)", name, len(content))
        except (OSError, ValueError) as e:
            logger.error("Error writing note %r at %s: %s", name, path, str(e))

    async def remove(self, name: str) -> None:
        """Delete a note if it exists; no-op otherwise."""
        path = self.path_for(name)
        try:
            if await self.exists(name):
                await aiofiles.os.remove(path)
                logger.info("Note deleted: %r", name)
        except OSError as e:
            logger.error("Error deleting note %r at %s: %s", name, path, str(e))

    async def list_notes(self) -> List[NoteEntry]:
        """
        Load every stored note.

        What:    Scans the cache directory for *.txt entries, strips the
                 extension to recover each name, and reads each file in full.
        Order:   Whatever the directory listing yields (not sorted).
        Raises:  FileStorageError if the directory cannot be listed.
        """
        try:
            filenames = await aiofiles.os.listdir(self.cache_dir)
        except OSError as e:
            logger.error("Error listing cache directory %s: %s", self.cache_dir, str(e))
            raise FileStorageError(
                context={"cache_dir": str(self.cache_dir), "os_error": str(e)},
            )

        notes = []
        for filename in filenames:
            if not filename.endswith(NOTE_EXTENSION):
                continue
            name = filename[: -len(NOTE_EXTENSION)]
            notes.append(NoteEntry(name=name, text=await self.fetch(name)))
        return notes
