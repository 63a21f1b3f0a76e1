"""
notecache — API Routes Package
===============================

Route Inventory:
    - notes.py:   GET /notes, GET|PUT|DELETE /notes/{noteName}, POST /write
    - static.py:  GET /UploadForm.html
    - health.py:  GET /health

Routes stay thin: read the request, call the NoteStore, pick the status
code. Error responses come from the global handlers in notecache.main.
"""
