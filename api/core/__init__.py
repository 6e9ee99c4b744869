"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks both features use (settings, DB
wiring, schema bootstrap, error taxonomy). Entity SQL and request logic live
in the feature packages (`questions/`, `answers/`).
"""
