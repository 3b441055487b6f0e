"""
Persistence layer.

Repositories hide the storage backend behind a small document-store
interface (save, find all, find by id, delete by id) so that services
can be exercised against any implementation.
"""

from .producto_repository import ProductoRepository, SQLiteProductoRepository  # noqa: F401
