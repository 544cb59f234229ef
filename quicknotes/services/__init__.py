# Services package init
"""
QuickNotes Backend: Services Layer
====================================

What:  Data-access logic sitting between routes (HTTP) and the database.
How:   Services take the request's AsyncSession plus validated schemas and
       return response schemas. They raise application exceptions; they
       never build HTTP responses.

Service Inventory:
    - NoteService: list, get, create, update, delete notes
"""
