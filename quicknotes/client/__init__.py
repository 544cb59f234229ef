# Client package init
"""
QuickNotes Client
==================

A terminal front end for the notes API.

    api.py         NotesApiClient: httpx calls, envelope parsing
    state.py       AppState, NoteDraft and the Modal variant
    controller.py  NotesApp: actions and the create/edit state machine
    console.py     render() and the command loop

Run with `python -m quicknotes.client` (QUICKNOTES_API_URL selects the server).
"""
