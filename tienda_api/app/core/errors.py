"""
Domain exceptions and their HTTP translation.

Services raise the exceptions defined here; the API layer never
inspects them directly.  ``register_exception_handlers`` installs
FastAPI handlers that turn each exception into a JSON response:

* ``ValidationError`` → 400 with the offending fields,
* ``NotFoundError`` → 404,
* ``StorageError`` → 500 with an opaque message; the underlying cause
  is logged but never sent to the client.
"""

import logging
from dataclasses import asdict, dataclass
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class TiendaError(Exception):
    """Base class for all application errors."""


@dataclass
class FieldError:
    """A single violated constraint on a product field."""

    field: str
    message: str


class ValidationError(TiendaError):
    """Raised before persistence when one or more fields are invalid.

    ``errors`` lists every violation in field declaration order;
    ``field`` and ``message`` refer to the first one.
    """

    def __init__(self, errors: List[FieldError]) -> None:
        if not errors:
            raise ValueError("ValidationError requires at least one field error")
        self.errors = list(errors)
        super().__init__(self.message)

    @property
    def field(self) -> str:
        return self.errors[0].field

    @property
    def message(self) -> str:
        return self.errors[0].message

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class NotFoundError(TiendaError):
    """The requested record does not exist."""

    def __init__(self, resource: str, record_id: str) -> None:
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} {record_id} not found")


class StorageError(TiendaError):
    """The storage backend failed (connectivity, serialization, ...)."""


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "errors": [asdict(error) for error in exc.errors]},
    )


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Producto no encontrado"},
    )


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error de almacenamiento"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain exception handlers to ``app``."""
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
