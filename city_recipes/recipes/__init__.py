"""
In-memory recipe store.

Responsibilities:
- Keep an ordered list of recipes per city identifier.
- Hand out globally unique, never reused recipe ids.
- Validate recipe content before it is stored.
"""
