"""
Application package initializer.

This package contains the entrypoint for the product catalogue API
and its submodules: configuration and logging under ``core``,
request/response models under ``schemas``, persistence under
``repositories``, business rules under ``services`` and HTTP routes
under ``api/<version>/``.
"""

from .main import app  # noqa: F401
