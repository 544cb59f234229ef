# Middleware package init
"""
QuickNotes Backend: Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Responses travel back in reverse order, so the logging middleware sees
    the final status code and the request ID header is set last.
"""
