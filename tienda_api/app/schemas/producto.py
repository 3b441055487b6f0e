"""
Pydantic schemas for products.

A product has a name (``nombre``), a unit price (``precio``) and a
stock quantity (``cantidad``).  The ``id`` is a string assigned by the
storage layer.  Numeric fields default to zero when omitted from the
request body, so a missing ``precio`` is rejected by validation while a
missing ``cantidad`` is accepted.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProductoIn(BaseModel):
    """Schema for the request body of create and update."""

    id: Optional[str] = Field(None, description="Ignored on update; the path id wins")
    nombre: Optional[str] = Field(None, description="Product name, must not be blank")
    precio: float = Field(0.0, description="Unit price, strictly greater than 0")
    cantidad: int = Field(0, description="Units in stock, 0 or more")


class Producto(BaseModel):
    """A persisted product as returned by the API."""

    id: Optional[str] = None
    nombre: Optional[str] = None
    precio: float = 0.0
    cantidad: int = 0

    @classmethod
    def from_input(cls, data: ProductoIn, producto_id: Optional[str] = None) -> "Producto":
        """Build a record from a request body.

        When ``producto_id`` is given it replaces the body id as is;
        otherwise an empty body id is treated as absent.
        """
        return cls(
            id=producto_id if producto_id is not None else (data.id or None),
            nombre=data.nombre,
            precio=data.precio,
            cantidad=data.cantidad,
        )
