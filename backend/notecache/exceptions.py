"""
notecache — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions, one per HTTP outcome the API signals.
How:   Each exception carries a plain-text message (returned to the client)
       and an optional context dict (logged server-side only). Handlers
       registered in notecache.main turn them into text/plain responses.
Who:   Raised by route handlers and the NoteStore; caught by global handlers.

Exception Hierarchy:
    NoteCacheError (base)
    ├── InvalidRequestError  → 400 Bad Request (missing/malformed body field)
    ├── NoteExistsError      → 400 Bad Request (create on an existing name)
    ├── NotFoundError        → 404 Not Found
    ├── FileStorageError     → 500 Internal Server Error
    └── StaticAssetError     → 500 Internal Server Error

Read/write/delete failures inside the NoteStore never become exceptions:
they are logged and collapsed into "absent" or silently dropped. Only a
cache directory that cannot be listed surfaces as FileStorageError.
"""

from typing import Any, Dict, Optional


class NoteCacheError(Exception):
    """
    Base exception for all notecache application errors.

    Attributes:
        message:      Client-facing text (returned as the response body)
        context:      Debug info (logged, never returned)
        status_code:  HTTP status the global handler responds with
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidRequestError(NoteCacheError):
    """
    Raised when a request body lacks a required field or cannot be parsed.

    HTTP: 400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NoteExistsError(NoteCacheError):
    """
    Raised by POST /write when the name is already taken.

    HTTP: 400 Bad Request
    """

    status_code = 400

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["note_name"] = name
        super().__init__(message="Note already exists", context=ctx)
        self.name = name


class NotFoundError(NoteCacheError):
    """
    Raised when a note required by the operation is absent (or unreadable).

    The message differs by endpoint: reads and deletes say "Note not found",
    updates say "Note does not exist".

    HTTP: 404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        name: str,
        message: str = "Note not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["note_name"] = name
        super().__init__(message=message, context=ctx)
        self.name = name


class FileStorageError(NoteCacheError):
    """
    Raised when the cache directory itself cannot be enumerated.

    When: Directory removed after startup, permission denied, I/O error.
    HTTP: 500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Could not read the note storage directory",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StaticAssetError(NoteCacheError):
    """
    Raised when the upload form page cannot be read.

    HTTP: 500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "An error occurred while serving the file.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
