"""
Repositories for the ``productos`` collection.

``ProductoRepository`` is the abstract storage collaborator used by
``ProductoService``.  ``SQLiteProductoRepository`` implements it on
top of the SQLite helpers in ``core.db``: each product is stored as a
JSON document in the ``productos`` table, keyed by its string id.

``save`` is a blind write.  A record without id receives a new
24‑character hex id; a record with id replaces the stored document
with that id or is inserted under it when absent.  Replacing a
document keeps its original row, so ``find_all`` returns products in
creation order.
"""

from __future__ import annotations

import json
import logging
import secrets
import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from tienda_api.app.core.db import get_cursor, get_database_path
from tienda_api.app.core.errors import StorageError
from tienda_api.app.schemas.producto import Producto


logger = logging.getLogger(__name__)


def new_id() -> str:
    """Return a fresh 24‑character hexadecimal document id."""
    return secrets.token_hex(12)


class ProductoRepository(ABC):
    """Document collection of products keyed by string id."""

    @abstractmethod
    def save(self, producto: Producto) -> Producto:
        """Insert or replace ``producto`` and return it with its id."""

    @abstractmethod
    def find_all(self) -> List[Producto]:
        """Return every stored product in storage order."""

    @abstractmethod
    def find_by_id(self, producto_id: str) -> Optional[Producto]:
        """Return the product with ``producto_id`` or None."""

    @abstractmethod
    def delete_by_id(self, producto_id: str) -> int:
        """Remove the product with ``producto_id`` and return how many were removed.

        Absent ids are ignored and yield 0.
        """


class SQLiteProductoRepository(ProductoRepository):
    """``ProductoRepository`` backed by the SQLite ``productos`` table.

    A new connection is opened for every call.  Any ``sqlite3.Error``
    or malformed stored document is re-raised as ``StorageError``.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_database_path()

    def save(self, producto: Producto) -> Producto:
        stored = producto.model_copy(update={"id": producto.id or new_id()})
        document = json.dumps(
            stored.model_dump(exclude={"id"}), ensure_ascii=False, separators=(",", ":")
        )
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "INSERT INTO productos (id, document) VALUES (?, ?)"
                    " ON CONFLICT(id) DO UPDATE SET document = excluded.document,"
                    " updated_at = CURRENT_TIMESTAMP",
                    (stored.id, document),
                )
        except sqlite3.Error as exc:
            raise StorageError(f"could not save producto {stored.id}: {exc}") from exc
        logger.debug("Saved producto %s", stored.id)
        return stored

    def find_all(self) -> List[Producto]:
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute(
                    "SELECT id, document FROM productos ORDER BY rowid"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"could not list productos: {exc}") from exc
        return [self._row_to_producto(row) for row in rows]

    def find_by_id(self, producto_id: str) -> Optional[Producto]:
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(
                    "SELECT id, document FROM productos WHERE id = ?",
                    (producto_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"could not read producto {producto_id}: {exc}") from exc
        if not row:
            return None
        return self._row_to_producto(row)

    def delete_by_id(self, producto_id: str) -> int:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute("DELETE FROM productos WHERE id = ?", (producto_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StorageError(f"could not delete producto {producto_id}: {exc}") from exc
        if affected:
            logger.debug("Deleted producto %s", producto_id)
        return affected

    @staticmethod
    def _row_to_producto(row: sqlite3.Row) -> Producto:
        """Convert a stored row into a ``Producto``."""
        try:
            return Producto(id=row["id"], **json.loads(row["document"]))
        except (TypeError, ValueError) as exc:
            raise StorageError(f"corrupt document for producto {row['id']}: {exc}") from exc
