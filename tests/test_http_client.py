from __future__ import annotations

import httpx
import pytest

from adapters.http_client import build_async_client
from adapters.transaction_info import TransactionInfoClient
from core.config import AppSettings

from conftest import BASE_URL


@pytest.mark.asyncio
async def test_builder_applies_settings_and_transport():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="42")

    settings = AppSettings(user_agent="txinfo-test/1.0", http_timeout_seconds=2.5)
    async with build_async_client(settings, transport=httpx.MockTransport(handler)) as http:
        assert http.timeout.read == 2.5
        price = await TransactionInfoClient(BASE_URL, http_client=http).get_price("10")

    assert price == "42"
    assert seen[0].headers["User-Agent"] == "txinfo-test/1.0"


@pytest.mark.asyncio
async def test_builder_merges_extra_headers():
    async with build_async_client(AppSettings(), extra_headers={"X-Trace": "abc"}) as http:
        assert http.headers["X-Trace"] == "abc"
        assert http.headers["User-Agent"]
