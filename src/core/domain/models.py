"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta en el borde (JSON del gateway) sin acoplar el
  Core a librerías de I/O.
- Los nombres de campo coinciden 1:1 con el protocolo de Arweave (snake_case),
  así decode/encode preservan las claves tal cual.

Nota:
- Todos los modelos son inmutables (`frozen=True`): una instancia es una foto
  completa de la respuesta, nunca un objeto a medio rellenar.
"""

from __future__ import annotations

import base64
from typing import Any

from pydantic import BaseModel, Field, RootModel, field_serializer, field_validator
from pydantic.config import ConfigDict


def b64url_decode(value: str) -> bytes:
    """Decodifica base64url con o sin padding (formato nativo de Arweave)."""

    padded = value + "=" * (-len(value) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def b64url_encode(value: bytes) -> str:
    return base64.urlsafe_b64encode(value).rstrip(b"=").decode("ascii")


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Tag(_Snapshot):
    """Par nombre/valor adjunto a una transacción.

    El orden dentro de `TransactionData.tags` es significativo y los nombres
    repetidos se conservan.
    """

    name: str = Field(..., description="Nombre del tag (codificado por el gateway).")
    value: str = Field(..., description="Valor del tag (codificado por el gateway).")


class TransactionData(_Snapshot):
    """Transacción tal como la devuelve `GET /tx/{id}`.

    Por qué casi todo es `str`:
    - owner/quantity/reward/signature/data_size/data_root son valores opacos
      (base64url o decimales como texto); esta capa no los interpreta.
    - `data` sí se decodifica: contiene los bytes crudos.
    """

    format: int = Field(..., description="Versión del formato de transacción (1 o 2).")
    id: str = Field(..., description="Identificador de la transacción.")
    last_tx: str = Field(..., description="Ancla: última transacción del owner o bloque reciente.")
    owner: str = Field(..., description="Clave pública del owner (base64url).")
    tags: tuple[Tag, ...] = Field(..., description="Tags en orden de aparición.")
    target: str = Field(..., description="Dirección destino de una transferencia (o vacío).")
    quantity: str = Field(..., description="Cantidad transferida en winston, como texto.")
    data: bytes = Field(..., description="Payload ya decodificado.")
    reward: str = Field(..., description="Fee pagado en winston, como texto.")
    signature: str = Field(..., description="Firma (base64url).")
    data_size: str = Field(..., description="Tamaño del payload en bytes, como texto.")
    data_root: str = Field(..., description="Raíz merkle del payload (base64url).")

    @field_validator("data", mode="before")
    @classmethod
    def _decode_data(cls, value: Any) -> Any:
        # Aceptamos las dos formas del cable: base64url (gateway) o lista de enteros.
        if isinstance(value, str):
            return b64url_decode(value)
        if isinstance(value, (list, tuple)):
            if not all(isinstance(item, int) and not isinstance(item, bool) for item in value):
                raise ValueError("data must be a list of integers in range 0..255")
            return bytes(value)
        return value

    @field_serializer("data", when_used="json")
    def _encode_data(self, value: bytes) -> str:
        return b64url_encode(value)


class TransactionConfirmedData(_Snapshot):
    """Datos de confirmación; solo existen cuando la tx ya entró en un bloque."""

    block_indep_hash: str = Field(..., description="Hash independiente del bloque.")
    block_height: int = Field(..., ge=0, description="Altura del bloque que la incluye.")
    number_of_confirmations: int = Field(..., ge=0, description="Bloques minados desde entonces.")


class TransactionStatusResponse(_Snapshot):
    """Respuesta de `GET /tx/{id}/status`."""

    status: int = Field(..., description="Código de estado reportado por el gateway.")
    confirmed: TransactionConfirmedData | None = Field(
        default=None,
        description="Presente solo si la transacción ya está en un bloque.",
    )


class GatewayErrorPayload(RootModel[dict[str, Any] | str]):
    """Forma alternativa (error) que el gateway puede devolver en el mismo endpoint.

    El esquema concreto lo define el gateway; aquí solo distinguimos
    "objeto JSON o string JSON" de "cualquier otra cosa".
    """

    model_config = ConfigDict(frozen=True)
