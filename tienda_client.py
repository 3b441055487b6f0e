"""Tienda API client.

A thin wrapper around the product endpoints of the Tienda API built on
the ``requests`` library.  It is meant for scripts and other services
that need to manage the catalogue without dealing with raw HTTP.

The client exposes one method per operation:

* :meth:`crear_producto` – create a product and return it with its id.
* :meth:`listar_productos` – return every product.
* :meth:`obtener_producto` – fetch a single product by id.
* :meth:`actualizar_producto` – replace the product stored under an id.
* :meth:`eliminar_producto` – delete a product by id.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list / ``False``)
and ``error`` is a dictionary with the keys ``status_code`` and
``message``.  For validation failures ``error`` also carries the
``errors`` list sent by the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)


class TiendaAPI:
    """Client for the ``/productos`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
                Include the API prefix if the server was started with one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (``None`` for empty bodies) and ``error`` is ``None`` on
            success.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> Dict[str, Any]:
        """Build the error dictionary for a non‑2xx response."""
        response = exc.response
        status = response.status_code if response is not None else None
        error: Dict[str, Any] = {"status_code": status, "message": ""}
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                error["message"] = response.text
            else:
                if isinstance(body, dict):
                    detail = body.get("detail")
                    error["message"] = detail if isinstance(detail, str) else str(detail or body)
                    if "errors" in body:
                        error["errors"] = body["errors"]
                else:
                    error["message"] = str(body)
        if not error["message"]:
            error["message"] = str(exc)
        logger.error("API request failed (%s): %s", status, error["message"])
        return error

    @staticmethod
    def _producto_path(producto_id: str) -> str:
        """Path of a single product with the id percent‑encoded."""
        return f"/productos/{quote(producto_id, safe='')}"

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def crear_producto(self, nombre: str, precio: float, cantidad: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a product and return the stored record with its id."""
        payload = {"nombre": nombre, "precio": precio, "cantidad": cantidad}
        return self._request("POST", "/productos", json_body=payload)

    def listar_productos(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all products."""
        data, error = self._request("GET", "/productos")
        if error:
            return [], error
        return data or [], None

    def obtener_producto(self, producto_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single product by id."""
        return self._request("GET", self._producto_path(producto_id))

    def actualizar_producto(
        self, producto_id: str, nombre: str, precio: float, cantidad: int
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Replace the product stored under ``producto_id``."""
        payload = {"nombre": nombre, "precio": precio, "cantidad": cantidad}
        return self._request("PUT", self._producto_path(producto_id), json_body=payload)

    def eliminar_producto(self, producto_id: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a product.  Deleting an unknown id still succeeds."""
        _, error = self._request("DELETE", self._producto_path(producto_id))
        return error is None, error
