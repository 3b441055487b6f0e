import sqlite3

import pytest

from tienda_api.app.core.db import get_cursor
from tienda_api.app.core.errors import StorageError
from tienda_api.app.repositories.producto_repository import SQLiteProductoRepository
from tienda_api.app.schemas.producto import Producto


def test_save_assigns_hex_id(sqlite_repo):
    saved = sqlite_repo.save(Producto(nombre="Pan", precio=2.5, cantidad=10))
    assert len(saved.id) == 24
    int(saved.id, 16)
    assert sqlite_repo.find_by_id(saved.id) == saved


def test_save_keeps_given_id_and_replaces_in_place(sqlite_repo):
    first = sqlite_repo.save(Producto(nombre="Pan", precio=2.5, cantidad=10))
    sqlite_repo.save(Producto(id="abc123", nombre="Leche", precio=1.2, cantidad=3))
    sqlite_repo.save(first.model_copy(update={"cantidad": 7}))

    assert [p.id for p in sqlite_repo.find_all()] == [first.id, "abc123"]
    assert sqlite_repo.find_by_id(first.id).cantidad == 7


def test_unicode_names_round_trip(sqlite_repo):
    saved = sqlite_repo.save(Producto(nombre="Jamón ibérico", precio=30.0, cantidad=1))
    assert sqlite_repo.find_by_id(saved.id).nombre == "Jamón ibérico"


def test_delete_by_id(sqlite_repo):
    saved = sqlite_repo.save(Producto(nombre="Pan", precio=2.5, cantidad=10))
    assert sqlite_repo.delete_by_id("no-existe") == 0
    assert sqlite_repo.find_all() == [saved]
    assert sqlite_repo.delete_by_id(saved.id) == 1
    assert sqlite_repo.find_all() == []
    assert sqlite_repo.find_by_id(saved.id) is None


def test_corrupt_document_raises_storage_error(sqlite_repo, db_path):
    with get_cursor(db_path) as cursor:
        cursor.execute("INSERT INTO productos (id, document) VALUES (?, ?)", ("roto", "{no json"))
    with pytest.raises(StorageError):
        sqlite_repo.find_all()


def test_missing_table_raises_storage_error(tmp_path):
    repo = SQLiteProductoRepository(str(tmp_path / "vacia.db"))
    with pytest.raises(StorageError) as excinfo:
        repo.save(Producto(nombre="Pan", precio=2.5, cantidad=10))
    assert isinstance(excinfo.value.__cause__, sqlite3.Error)
