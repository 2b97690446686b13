"""
Tests para core/transport.py - Transportes de envío.
"""

import asyncio
import json

import httpx
import pytest

from portfolio_forms.core import (
    CallableTransport,
    HttpTransport,
    MemoryTransport,
    TransportError,
)


ENDPOINT = "https://forms.example.com/f/contact"


def make_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpTransport:
    """Tests para HttpTransport con httpx.MockTransport."""

    def test_posts_json_payload(self):
        received = {}

        def handler(request):
            received["method"] = request.method
            received["url"] = str(request.url)
            received["body"] = json.loads(request.content)
            received["accept"] = request.headers["accept"]
            return httpx.Response(200, json={"ok": True})

        async def run():
            async with make_client(handler) as client:
                await HttpTransport(ENDPOINT, client=client).submit({"name": "Ada"})

        asyncio.run(run())

        assert received == {
            "method": "POST",
            "url": ENDPOINT,
            "body": {"name": "Ada"},
            "accept": "application/json",
        }

    def test_error_status_raises(self):
        def handler(request):
            return httpx.Response(422, json={"error": "invalid"})

        async def run():
            async with make_client(handler) as client:
                await HttpTransport(ENDPOINT, client=client).submit({"name": "Ada"})

        with pytest.raises(TransportError, match="422"):
            asyncio.run(run())

    def test_network_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async def run():
            async with make_client(handler) as client:
                await HttpTransport(ENDPOINT, client=client).submit({})

        with pytest.raises(TransportError):
            asyncio.run(run())

    def test_timeout_raises(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        async def run():
            async with make_client(handler) as client:
                await HttpTransport(ENDPOINT, client=client).submit({})

        with pytest.raises(TransportError, match="Timeout"):
            asyncio.run(run())

    def test_invalid_url_raises(self):
        def handler(request):
            raise httpx.InvalidURL("Invalid port")

        async def run():
            async with make_client(handler) as client:
                await HttpTransport(ENDPOINT, client=client).submit({})

        with pytest.raises(TransportError, match="Invalid port"):
            asyncio.run(run())


class TestMemoryTransport:
    """Tests para MemoryTransport."""

    def test_records_payloads(self):
        transport = MemoryTransport()
        asyncio.run(transport.submit({"a": "1"}))
        assert transport.payloads == [{"a": "1"}]
        assert transport.calls == 1

    def test_failure_still_records(self):
        transport = MemoryTransport(fail=True)
        with pytest.raises(TransportError, match="Submission failed"):
            asyncio.run(transport.submit({"a": "1"}))
        assert transport.calls == 1


class TestCallableTransport:
    """Tests para CallableTransport."""

    def test_false_result_is_failure(self):
        async def reject(payload):
            return False

        with pytest.raises(TransportError):
            asyncio.run(CallableTransport(reject).submit({}))

    def test_none_result_is_success(self):
        async def accept(payload):
            return None

        asyncio.run(CallableTransport(accept).submit({}))

    def test_exception_is_wrapped(self):
        async def offline(payload):
            raise ConnectionError("network down")

        with pytest.raises(TransportError, match="network down") as exc_info:
            asyncio.run(CallableTransport(offline).submit({}))
        assert isinstance(exc_info.value.__cause__, ConnectionError)
