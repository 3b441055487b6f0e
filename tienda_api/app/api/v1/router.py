"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  When a new domain is
introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import productos

router = APIRouter()

router.include_router(productos.router, prefix="/productos", tags=["productos"])
