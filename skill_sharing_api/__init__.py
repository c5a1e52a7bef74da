"""
Top-level package for the Skill Sharing API.

All server functionality lives in submodules under ``app``; ``client``
holds a small HTTP client for the same endpoints.
"""

__all__ = []
