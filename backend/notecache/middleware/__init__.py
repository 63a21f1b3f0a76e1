"""
notecache — Middleware Package
===============================

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    RequestIDMiddleware runs first so the access log line written by
    RequestLoggingMiddleware carries the request ID.
"""
