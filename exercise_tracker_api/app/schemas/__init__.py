"""
Pydantic schema definitions for API payloads.

Schemas are separated from storage so the wire format (for example
the ``_id`` field name) is independent of the table layout.
"""
