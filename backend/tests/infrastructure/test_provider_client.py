"""Provider HTTP Client — every failure mode becomes UpstreamServiceError."""

import httpx
import pytest

from portal.core.errors import UpstreamServiceError
from portal.infrastructure.http_client import ProviderClient


class ExampleClient(ProviderClient):
    service_name = "Example"


def make_client(handler) -> ExampleClient:
    return ExampleClient("https://api.example.test", transport=httpx.MockTransport(handler))


async def test_returns_json_body():
    client = make_client(lambda request: httpx.Response(200, json={"ok": True}))
    try:
        assert await client.request_json("GET", "/thing") == {"ok": True}
    finally:
        await client.aclose()


async def test_error_status_is_wrapped():
    client = make_client(lambda request: httpx.Response(502, text="bad gateway"))
    try:
        with pytest.raises(UpstreamServiceError) as exc:
            await client.request_json("GET", "/thing", public_message="Failed to fetch")
    finally:
        await client.aclose()
    assert exc.value.status_code == 502
    assert exc.value.service == "Example"
    assert exc.value.to_response()["error"] == "Failed to fetch"


async def test_transport_error_is_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    try:
        with pytest.raises(UpstreamServiceError) as exc:
            await client.request_json("GET", "/thing")
    finally:
        await client.aclose()
    assert exc.value.status_code is None


async def test_timeout_is_wrapped():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    client = make_client(handler)
    try:
        with pytest.raises(UpstreamServiceError, match="timeout"):
            await client.request_json("GET", "/thing")
    finally:
        await client.aclose()


async def test_non_json_body_is_wrapped():
    client = make_client(lambda request: httpx.Response(200, text="<html>"))
    try:
        with pytest.raises(UpstreamServiceError, match="non-JSON"):
            await client.request_json("GET", "/thing")
    finally:
        await client.aclose()
