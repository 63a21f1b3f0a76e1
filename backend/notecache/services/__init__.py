"""
notecache — Services Layer
===========================

What:  Storage logic sitting between routes (HTTP) and the filesystem.

Service Inventory:
    - NoteStore: name → <cache>/<name>.txt mapping with fetch/save/remove/list

Routes never touch the filesystem directly; the store is handed to them
through the get_note_store dependency.
"""

from fastapi import Request

from notecache.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """FastAPI dependency: the NoteStore attached by the application factory."""
    return request.app.state.note_store
