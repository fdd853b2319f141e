"""
Shared, cross-cutting code for the API.

`core/` holds the database handles and the FastAPI dependencies that hand them
to routes. Recipe, chord and task SQL stays in the feature packages
(`ojakh/`, `nvag/`, `tasks/`).
"""
