"""
Pydantic schema definitions for API payloads and stored documents.

Schemas are separated from the store implementations so the API
representation does not depend on how documents are persisted.
"""
