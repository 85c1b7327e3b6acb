"""
Shared, cross-cutting code for the connector.

`core/` holds the small building blocks every endpoint uses (settings,
errors, identifier escaping, the query executor). SQL that belongs to one
endpoint family lives in that feature package (e.g. `data/`).
"""
