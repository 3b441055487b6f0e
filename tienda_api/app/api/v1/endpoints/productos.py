"""
Product endpoints for API v1.

These routes expose the product catalogue: create, list, read, replace
and delete.  Handlers only translate between HTTP and
``ProductoService``; validation, not‑found and storage failures are
raised by the service and turned into responses by the exception
handlers registered in ``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from tienda_api.app.repositories.producto_repository import SQLiteProductoRepository
from tienda_api.app.schemas.producto import Producto, ProductoIn
from tienda_api.app.services.producto_service import ProductoService

router = APIRouter()


def get_producto_service() -> ProductoService:
    """Build the service for one request.

    Tests override this dependency to point the service at another
    repository.
    """
    return ProductoService(SQLiteProductoRepository())


@router.post("", response_model=Producto)
async def agregar_producto(
    producto_in: ProductoIn,
    service: ProductoService = Depends(get_producto_service),
) -> Producto:
    """Create a product; the response carries the generated id."""
    return await service.create(producto_in)


@router.get("", response_model=List[Producto])
async def listar_productos(
    service: ProductoService = Depends(get_producto_service),
) -> List[Producto]:
    """Return every product.  An empty catalogue yields ``[]``."""
    return await service.list()


@router.get("/{producto_id}", response_model=Producto)
async def obtener_producto(
    producto_id: str,
    service: ProductoService = Depends(get_producto_service),
) -> Producto:
    """Return a single product, or 404 when the id is unknown."""
    return await service.get(producto_id)


@router.put("/{producto_id}", response_model=Producto)
async def actualizar_producto(
    producto_id: str,
    producto_in: ProductoIn,
    service: ProductoService = Depends(get_producto_service),
) -> Producto:
    """Replace the product stored under ``producto_id``.

    The id in the path always wins over any id in the body.  Unknown
    ids are created rather than rejected.
    """
    return await service.update(producto_id, producto_in)


@router.delete("/{producto_id}", status_code=status.HTTP_200_OK)
async def eliminar_producto(
    producto_id: str,
    service: ProductoService = Depends(get_producto_service),
) -> Response:
    """Delete a product.  Unknown ids succeed with the same empty response."""
    await service.delete(producto_id)
    return Response(status_code=status.HTTP_200_OK)
