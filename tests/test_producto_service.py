import logging

import pytest

from tienda_api.app.core.errors import NotFoundError, StorageError, ValidationError
from tienda_api.app.schemas.producto import Producto, ProductoIn
from tienda_api.app.services.producto_service import (
    CANTIDAD_NEGATIVA,
    ID_OBLIGATORIO,
    NOMBRE_VACIO,
    PRECIO_NO_POSITIVO,
    ProductoService,
    validar_cantidad,
    validar_nombre,
    validar_precio,
)


def pan(**overrides):
    data = {"nombre": "Pan", "precio": 2.5, "cantidad": 10}
    data.update(overrides)
    return ProductoIn(**data)


@pytest.mark.parametrize("nombre", [None, "", "   ", "\t\n"])
def test_validar_nombre_rejects_blank(nombre):
    error = validar_nombre(nombre)
    assert error is not None
    assert error.field == "nombre"
    assert error.message == NOMBRE_VACIO


@pytest.mark.parametrize("precio", [0, -0.01, -10, float("nan"), float("inf"), float("-inf")])
def test_validar_precio_rejects_non_positive(precio):
    error = validar_precio(precio)
    assert error is not None
    assert error.field == "precio"
    assert error.message == PRECIO_NO_POSITIVO


def test_validar_cantidad_accepts_zero_and_rejects_negative():
    assert validar_cantidad(0) is None
    error = validar_cantidad(-1)
    assert error.field == "cantidad"
    assert error.message == CANTIDAD_NEGATIVA


@pytest.mark.asyncio
async def test_create_assigns_id_and_keeps_fields(service):
    created = await service.create(pan())
    assert created.id
    assert (created.nombre, created.precio, created.cantidad) == ("Pan", 2.5, 10)


@pytest.mark.asyncio
async def test_create_then_list_contains_only_created(service):
    created = await service.create(pan())
    assert await service.list() == [created]


@pytest.mark.asyncio
async def test_list_empty_collection(service):
    assert await service.list() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"nombre": ""}, "nombre"),
        ({"nombre": None}, "nombre"),
        ({"precio": 0}, "precio"),
        ({"precio": -3.0}, "precio"),
        ({"cantidad": -1}, "cantidad"),
    ],
)
async def test_create_rejects_invalid_field_before_saving(service, memory_repo, overrides, field):
    with pytest.raises(ValidationError) as excinfo:
        await service.create(pan(**overrides))
    assert excinfo.value.field == field
    assert memory_repo.saves == 0


@pytest.mark.asyncio
async def test_create_reports_every_violation(service):
    with pytest.raises(ValidationError) as excinfo:
        await service.create(ProductoIn(nombre=" ", precio=-1, cantidad=-5))
    assert excinfo.value.fields == ["nombre", "precio", "cantidad"]
    assert excinfo.value.message == NOMBRE_VACIO


@pytest.mark.asyncio
async def test_create_without_price_is_rejected(service):
    with pytest.raises(ValidationError) as excinfo:
        await service.create(ProductoIn(nombre="Pan"))
    assert excinfo.value.fields == ["precio"]


@pytest.mark.asyncio
async def test_update_uses_path_id_over_body_id(service):
    updated = await service.update("abc123", pan(id="otro", precio=3.0, cantidad=5))
    assert updated == Producto(id="abc123", nombre="Pan", precio=3.0, cantidad=5)


@pytest.mark.asyncio
async def test_update_unknown_id_creates_record(service, memory_repo):
    await service.update("abc123", pan())
    assert list(memory_repo.documents) == ["abc123"]


@pytest.mark.asyncio
async def test_update_replaces_existing_record(service):
    created = await service.create(pan())
    await service.update(created.id, pan(nombre="Pan integral", precio=3.0, cantidad=0))
    assert await service.list() == [
        Producto(id=created.id, nombre="Pan integral", precio=3.0, cantidad=0)
    ]


@pytest.mark.asyncio
async def test_update_validates_payload(service, memory_repo):
    with pytest.raises(ValidationError) as excinfo:
        await service.update("abc123", pan(cantidad=-2))
    assert excinfo.value.field == "cantidad"
    assert memory_repo.documents == {}


@pytest.mark.asyncio
async def test_delete_removes_record(service):
    await service.update("abc123", pan())
    await service.delete("abc123")
    assert "abc123" not in [p.id for p in await service.list()]


@pytest.mark.asyncio
async def test_delete_unknown_id_is_noop(service):
    created = await service.create(pan())
    await service.delete("no-existe")
    assert await service.list() == [created]


@pytest.mark.asyncio
async def test_get_unknown_id_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.get("no-existe")


@pytest.mark.asyncio
async def test_storage_errors_propagate(memory_repo):
    def broken_save(producto):
        raise StorageError("disk full")

    memory_repo.save = broken_save
    with pytest.raises(StorageError, match="disk full"):
        await ProductoService(memory_repo).create(pan())


def test_from_input_forced_id_replaces_body_id():
    assert Producto.from_input(pan(id="otro"), producto_id="abc123").id == "abc123"
    assert Producto.from_input(pan(id="")).id is None


@pytest.mark.asyncio
@pytest.mark.parametrize("producto_id", ["", "   "])
async def test_update_requires_id(service, memory_repo, producto_id):
    with pytest.raises(ValidationError) as excinfo:
        await service.update(producto_id, pan(id="otro"))
    assert excinfo.value.field == "id"
    assert excinfo.value.message == ID_OBLIGATORIO
    assert memory_repo.saves == 0


@pytest.mark.asyncio
async def test_delete_logs_only_removed_records(service, caplog):
    await service.update("abc123", pan())
    with caplog.at_level(logging.INFO, logger="tienda_api.app.services.producto_service"):
        await service.delete("no-existe")
        await service.delete("abc123")
    deleted = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Deleted")]
    assert deleted == ["Deleted producto abc123"]
