"""
HTTP API package.

``router.py`` exposes a top-level ``router`` that includes the router
of every domain module in ``endpoints``; the application mounts it
under ``/api``.
"""
