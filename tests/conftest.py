from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

BASE_URL = "http://gateway.test"
TX_ID = "arweave_tx_id"


@pytest.fixture
def tx_payload() -> dict[str, Any]:
    return {
        "format": 2,
        "id": TX_ID,
        "last_tx": "last_tx",
        "owner": "owner",
        "tags": [
            {"name": "Content-Type", "value": "text/plain"},
            {"name": "App", "value": "first"},
            {"name": "App", "value": "second"},
        ],
        "target": "target",
        "quantity": "quantity",
        "data": [104, 101, 108, 108, 111, 0, 255],
        "reward": "reward",
        "signature": "signature",
        "data_size": "data_size",
        "data_root": "data_root",
    }


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Factory: `httpx.AsyncClient` answering every request with `handler`."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
