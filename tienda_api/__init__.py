"""
Top‑level package for the Tienda API.

This file makes ``tienda_api`` a regular package so that modules
within ``app`` can be imported using fully qualified names like
``tienda_api.app.main``, both when serving the application and when
running the test suite from the repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
