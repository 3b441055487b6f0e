"""Shared fixtures for the Tienda API tests."""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from tienda_api.app.api.v1.endpoints.productos import get_producto_service
from tienda_api.app.core.db import init_db
from tienda_api.app.main import create_app
from tienda_api.app.repositories.producto_repository import (
    ProductoRepository,
    SQLiteProductoRepository,
    new_id,
)
from tienda_api.app.schemas.producto import Producto
from tienda_api.app.services.producto_service import ProductoService


class InMemoryProductoRepository(ProductoRepository):
    """Dict-backed repository; insertion order is storage order."""

    def __init__(self) -> None:
        self.documents: Dict[str, Producto] = {}
        self.saves = 0

    def save(self, producto: Producto) -> Producto:
        self.saves += 1
        stored = producto.model_copy(update={"id": producto.id or new_id()})
        self.documents[stored.id] = stored
        return stored

    def find_all(self) -> List[Producto]:
        return list(self.documents.values())

    def find_by_id(self, producto_id: str) -> Optional[Producto]:
        return self.documents.get(producto_id)

    def delete_by_id(self, producto_id: str) -> int:
        return 1 if self.documents.pop(producto_id, None) is not None else 0


@pytest.fixture
def memory_repo():
    return InMemoryProductoRepository()


@pytest.fixture
def service(memory_repo):
    return ProductoService(memory_repo)


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "tienda-test.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_repo(db_path):
    return SQLiteProductoRepository(db_path)


@pytest.fixture
def app(sqlite_repo):
    application = create_app()
    application.dependency_overrides[get_producto_service] = lambda: ProductoService(sqlite_repo)
    return application


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
