"""
Service layer for products.

``ProductoService`` validates product payloads and forwards them to a
``ProductoRepository``.  It holds no state of its own between calls;
the repository is the single source of truth.

Validation is done by the plain functions below, which are run before
any repository call.  Each returns a ``FieldError`` or ``None``;
``validar_producto`` collects them and raises ``ValidationError`` when
at least one field is invalid.

Updates are full replacements written with the repository's blind
``save``: updating an id that does not exist creates the product under
that id.  Deleting an unknown id is a no‑op.  Storage errors are not
caught here and reach the caller unchanged.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from tienda_api.app.core.errors import FieldError, NotFoundError, ValidationError
from tienda_api.app.repositories.producto_repository import ProductoRepository
from tienda_api.app.schemas.producto import Producto, ProductoIn


logger = logging.getLogger(__name__)

NOMBRE_VACIO = "El nombre no puede estar vacío"
PRECIO_NO_POSITIVO = "El precio debe ser mayor que 0"
CANTIDAD_NEGATIVA = "La cantidad no puede ser negativa"
ID_OBLIGATORIO = "El id es obligatorio"


def validar_nombre(nombre: Optional[str]) -> Optional[FieldError]:
    if nombre is None or not nombre.strip():
        return FieldError("nombre", NOMBRE_VACIO)
    return None


def validar_precio(precio: float) -> Optional[FieldError]:
    # Infinity and NaN cannot be stored as JSON numbers.
    if not math.isfinite(precio) or precio <= 0:
        return FieldError("precio", PRECIO_NO_POSITIVO)
    return None


def validar_cantidad(cantidad: int) -> Optional[FieldError]:
    if cantidad < 0:
        return FieldError("cantidad", CANTIDAD_NEGATIVA)
    return None


def validar_producto(producto: ProductoIn | Producto) -> None:
    """Raise ``ValidationError`` listing every invalid field of ``producto``."""
    errors = [
        error
        for error in (
            validar_nombre(producto.nombre),
            validar_precio(producto.precio),
            validar_cantidad(producto.cantidad),
        )
        if error is not None
    ]
    if errors:
        raise ValidationError(errors)


class ProductoService:
    """Create, list, read, replace and delete products."""

    def __init__(self, repository: ProductoRepository) -> None:
        self.repository = repository

    async def create(self, data: ProductoIn) -> Producto:
        """Validate and persist a new product.

        The storage layer assigns the id when the payload carries none.
        """
        self._validate(data)
        producto = self.repository.save(Producto.from_input(data))
        logger.info("Created producto %s", producto.id)
        return producto

    async def list(self) -> List[Producto]:
        """Return all products in storage order."""
        return self.repository.find_all()

    async def get(self, producto_id: str) -> Producto:
        """Return a single product or raise ``NotFoundError``."""
        producto = self.repository.find_by_id(producto_id)
        if producto is None:
            raise NotFoundError("producto", producto_id)
        return producto

    async def update(self, producto_id: str, data: ProductoIn) -> Producto:
        """Replace the product stored under ``producto_id``.

        Any id in ``data`` is overwritten with ``producto_id``.  When no
        product has that id a new one is created under it.  A blank
        ``producto_id`` is rejected.
        """
        if not producto_id or not producto_id.strip():
            logger.info("Rejected producto update: missing id")
            raise ValidationError([FieldError("id", ID_OBLIGATORIO)])
        producto = Producto.from_input(data, producto_id=producto_id)
        self._validate(producto)
        saved = self.repository.save(producto)
        logger.info("Updated producto %s", saved.id)
        return saved

    async def delete(self, producto_id: str) -> None:
        """Delete the product with ``producto_id`` if it exists."""
        if self.repository.delete_by_id(producto_id):
            logger.info("Deleted producto %s", producto_id)

    @staticmethod
    def _validate(producto: ProductoIn | Producto) -> None:
        try:
            validar_producto(producto)
        except ValidationError as exc:
            logger.info("Rejected producto %s: invalid %s", producto.id, ", ".join(exc.fields))
            raise
