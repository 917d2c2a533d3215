"""Taxonomía de errores del dominio.

Cada fallo de `TransactionInfoClient` se mapea a exactamente una de estas
excepciones. Son errores normales (capturables); ninguna respuesta alcanzable
del gateway debe abortar el proceso.

- TransportError: la llamada HTTP falló (red, DNS, TLS, timeout, status no-2xx
  sin cuerpo de error interpretable).
- ProtocolError: el transporte funcionó, pero el gateway devolvió su envelope
  de error.
- MalformedResponse: el cuerpo no encaja en ningún esquema conocido.
- InvalidRequest: un parámetro de ruta cambiaría el endpoint; no se envía nada.
"""

from __future__ import annotations

from typing import Any


class ArweaveError(Exception):
    """Base de los errores del cliente de transacciones."""


class TransportError(ArweaveError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProtocolError(ArweaveError):
    def __init__(self, payload: dict[str, Any] | str, *, status_code: int | None = None) -> None:
        super().__init__(f"gateway reported an error: {payload!r}")
        self.payload = payload
        self.status_code = status_code


class MalformedResponse(ArweaveError):
    def __init__(self, body: str) -> None:
        preview = body if len(body) <= 200 else body[:200] + "..."
        super().__init__(f"response matched no known schema: {preview!r}")
        self.body = body


class InvalidRequest(ArweaveError, ValueError):
    """Parámetro de ruta que no puede formar un segmento propio (vacío, `.` o `..`)."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"{name} cannot be used as a path segment: {value!r}")
        self.name = name
        self.value = value
