"""Decodificación de respuestas de doble forma (envelope).

Por qué un módulo propio:
- Un gateway puede devolver, bajo el mismo endpoint y status, el payload de
  éxito o un payload de error propio. Discriminamos por estructura.
- El resultado es siempre uno de tres casos (`Success`, `ServerError`,
  `Malformed`); nunca se escapa una excepción de decodificación.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ValidationError

from core.domain.models import GatewayErrorPayload

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class ServerError:
    payload: dict[str, Any] | str


@dataclass(frozen=True)
class Malformed:
    body: str


Envelope = Union[Success[T], ServerError, Malformed]


def _as_text(body: bytes | str) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def decode_error_payload(body: bytes | str) -> ServerError | None:
    """Intenta leer `body` como payload de error del gateway."""

    try:
        error = GatewayErrorPayload.model_validate_json(body)
    except ValidationError:
        return None
    return ServerError(payload=error.root)


def decode_envelope(body: bytes | str, model: type[T]) -> Envelope[T]:
    """Decodifica `body` contra `model`; si no encaja, contra el esquema de error.

    Orden:
    1. Esquema de éxito del endpoint -> `Success(payload)`.
    2. Esquema genérico de error -> `ServerError(payload)`.
    3. Ninguno -> `Malformed(body)`.
    """

    try:
        return Success(payload=model.model_validate_json(body))
    except ValidationError:
        pass

    error = decode_error_payload(body)
    if error is not None:
        return error
    return Malformed(body=_as_text(body))
