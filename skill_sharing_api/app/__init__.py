"""
Application package initializer.

This package contains the entrypoint for the API and its submodules,
organised by layer: ``api`` (HTTP routes), ``services`` (business
logic), ``stores`` (persistence), ``schemas`` (pydantic models) and
``core`` (configuration, logging and database setup).
"""

from .main import app  # noqa: F401
