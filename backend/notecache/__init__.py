"""
notecache — Application Package Initializer
============================================

What: Marks the `notecache` directory as a Python package.
Who:  Used by uvicorn (through the CLI), pytest, and the console script.

Architecture Note:
    The service follows the same thin layering throughout:

    ┌─────────────────────────────────────┐
    │       CLI / App Factory (Bootstrap) │  ← flags, logging, uvicorn
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        NoteStore (Storage Layer)    │  ← name → <cache>/<name>.txt
    └─────────────────────────────────────┘

    Routes map status codes; the store owns every filesystem call.
    The filesystem is the only state; nothing is cached in memory.
"""

__version__ = "1.0.0"
