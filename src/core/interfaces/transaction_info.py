"""Contrato de lectura de transacciones de un gateway Arweave.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que la CLI u otros consumidores dependan de la abstracción y se
  testeen con dobles sin tocar HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TransactionData, TransactionStatusResponse


@runtime_checkable
class TransactionInfoSource(Protocol):
    """Contrato mínimo: precio, transacción y estado.

    Reglas de diseño:
    - Todo es asíncrono porque cada operación hace exactamente una petición HTTP.
    - Los fallos se expresan con `core.domain.errors.ArweaveError`.
    """

    async def get_price(self, byte_size: str) -> str:
        """Fee estimado (texto decimal, precisión arbitraria) para `byte_size` bytes."""

        ...

    async def get(self, id: str) -> TransactionData:
        """Transacción completa identificada por `id`."""

        ...

    async def get_status(self, id: str) -> TransactionStatusResponse:
        """Estado de confirmación de la transacción `id`."""

        ...
