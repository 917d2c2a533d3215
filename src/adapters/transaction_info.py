"""Cliente de lectura de transacciones de un gateway Arweave.

Endpoints:
- `GET /price/{byte_size}`  -> fee estimado (texto, precisión arbitraria).
- `GET /tx/{id}`            -> `TransactionData` o envelope de error.
- `GET /tx/{id}/status`     -> `TransactionStatusResponse` o envelope de error.

Por qué requests explícitos:
- Cada operación arma su path, hace un único GET y decodifica la respuesta;
  la rama éxito/error del envelope queda testeable por separado
  (`core.domain.envelope`).
- El transporte es un colaborador inyectado (`httpx.AsyncClient`); el cliente
  no guarda estado mutable y se puede compartir entre tareas concurrentes.
"""

from __future__ import annotations

import logging
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.envelope import ServerError, Success, decode_envelope, decode_error_payload
from core.domain.errors import InvalidRequest, MalformedResponse, ProtocolError, TransportError
from core.domain.models import TransactionData, TransactionStatusResponse
from core.interfaces.transaction_info import TransactionInfoSource

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

PRICE_PATH = "/price/{byte_size}"
TX_PATH = "/tx/{id}"
TX_STATUS_PATH = "/tx/{id}/status"

# httpx normaliza estos segmentos y la petición acabaría en otro endpoint.
_DOT_SEGMENTS = frozenset({"", ".", ".."})


class TransactionInfoClient(TransactionInfoSource):
    """Fachada tipada sobre los endpoints de transacciones del gateway.

    Si se pasa `http_client`, el llamador es dueño de su ciclo de vida. Si no,
    cada operación abre y cierra su propio cliente con `build_async_client`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._settings = settings

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, template: str, **params: str) -> str:
        for key, value in params.items():
            if value in _DOT_SEGMENTS:
                raise InvalidRequest(key, value)
        path = template.format(**{key: quote(value, safe="") for key, value in params.items()})
        return f"{self._base_url}{path}"

    async def _fetch(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            if self._http_client is not None:
                return await self._http_client.get(url)
            async with build_async_client(self._settings) as client:
                return await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("GET %s failed: %s", url, exc)
            raise TransportError(f"GET {url} failed: {type(exc).__name__}: {exc}") from exc

    @staticmethod
    def _status_error(url: str, response: httpx.Response) -> TransportError:
        logger.warning("GET %s returned HTTP %s", url, response.status_code)
        return TransportError(
            f"GET {url} returned HTTP {response.status_code} {response.reason_phrase}".rstrip(),
            status_code=response.status_code,
        )

    async def get_price(self, byte_size: str) -> str:
        """Fee para almacenar `byte_size` bytes, tal cual lo devuelve el gateway.

        No se convierte a número: el valor puede exceder cualquier entero de
        ancho fijo.
        """

        url = self._url(PRICE_PATH, byte_size=byte_size)
        response = await self._fetch(url)
        if not response.is_success:
            raise self._status_error(url, response)
        return response.text

    async def get(self, id: str) -> TransactionData:
        url = self._url(TX_PATH, id=id)
        return await self._fetch_envelope(url, TransactionData)

    get_transaction = get

    async def get_status(self, id: str) -> TransactionStatusResponse:
        url = self._url(TX_STATUS_PATH, id=id)
        return await self._fetch_envelope(url, TransactionStatusResponse)

    async def _fetch_envelope(self, url: str, model: type[T]) -> T:
        response = await self._fetch(url)

        if not response.is_success:
            # Un no-2xx con envelope de error es un error de protocolo, no de red.
            error = decode_error_payload(response.content)
            if error is None:
                raise self._status_error(url, response)
            logger.warning("GET %s: gateway error %r (HTTP %s)", url, error.payload, response.status_code)
            raise ProtocolError(error.payload, status_code=response.status_code)

        envelope = decode_envelope(response.content, model)
        if isinstance(envelope, Success):
            return envelope.payload
        if isinstance(envelope, ServerError):
            logger.warning("GET %s: gateway error %r", url, envelope.payload)
            raise ProtocolError(envelope.payload, status_code=response.status_code)
        logger.warning("GET %s: malformed response body", url)
        raise MalformedResponse(envelope.body)
