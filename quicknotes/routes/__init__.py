# Routes package init
"""
QuickNotes Backend: API Routes Package
========================================

Route Inventory:
    - notes.py:   GET    /api/notes          (list notes, newest first)
                  GET    /api/notes/{id}     (get single note)
                  POST   /api/notes          (create note)
                  PUT    /api/notes/{id}     (partial update)
                  DELETE /api/notes/{id}     (delete note)
    - health.py:  GET    /health             (service health check)

Routes stay thin: they parse the request, call NoteService, and wrap the
result in the success envelope. Errors are turned into envelopes by the
handlers registered in main.py.
"""
