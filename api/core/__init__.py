"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks (DB wiring, settings). Keep
resource-specific SQL and request logic in the corresponding feature package
(e.g. `ach/`).
"""
