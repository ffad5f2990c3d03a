from __future__ import annotations

import pytest

from abucoins_sdk import (
    ApplicationError,
    ClientOptions,
    HmacSigningAdapter,
    RequestTimeoutError,
    TransportError,
    build_signature_content,
)
from abucoins_sdk.internal.async_client import AsyncClient


def make_client(exchange, credentials, **extra) -> AsyncClient:
    return AsyncClient(ClientOptions(endpoint=exchange.endpoint, **credentials, **extra))


@pytest.mark.asyncio
async def test_request_carries_signed_headers(exchange, credentials):
    async with make_client(exchange, credentials) as client:
        await client.make_authenticated_request("GET", "/fills?limit=5")

    sent = exchange.requests[0]
    headers = sent["headers"]
    assert sent["method"] == "GET"
    assert sent["path"] == "/fills?limit=5"
    assert headers["AC-ACCESS-KEY"] == "test-key"
    assert headers["AC-ACCESS-PASSPHRASE"] == "test-pass"

    timestamp = int(headers["AC-ACCESS-TIMESTAMP"])
    expected = HmacSigningAdapter().sign(build_signature_content(timestamp, "GET", "/fills?limit=5"), b"secret")
    assert headers["AC-ACCESS-SIGN"] == expected


@pytest.mark.asyncio
async def test_empty_body_is_sent_as_empty_object(exchange, credentials):
    async with make_client(exchange, credentials) as client:
        await client.sign_and_request("GET", "/fills")

    assert exchange.requests[0]["body"] == b"{}"


@pytest.mark.asyncio
async def test_body_bytes_match_signed_content(exchange, credentials):
    exchange.respond("/orders", {"id": "1"})
    body = {"product_id": "BTC-PLN", "size": "1"}
    async with make_client(exchange, credentials) as client:
        data = await client.sign_and_request("POST", "/orders", body)

    assert data == {"id": "1"}
    sent = exchange.requests[0]
    assert sent["body"] == b'{"product_id":"BTC-PLN","size":"1"}'
    timestamp = int(sent["headers"]["AC-ACCESS-TIMESTAMP"])
    content = build_signature_content(timestamp, "POST", "/orders", body)
    assert HmacSigningAdapter().verify(content, sent["headers"]["AC-ACCESS-SIGN"], b"secret")


@pytest.mark.asyncio
async def test_timestamps_are_unix_seconds(exchange, credentials):
    async with make_client(exchange, credentials) as client:
        await client.sign_and_request("GET", "/fills")

    timestamp = exchange.requests[0]["headers"]["AC-ACCESS-TIMESTAMP"]
    assert timestamp.isdigit()
    assert len(timestamp) == 10


@pytest.mark.asyncio
async def test_sign_and_request_returns_message_payload_unchanged(exchange, credentials):
    exchange.respond("/fills", {"message": "invalid request"})
    async with make_client(exchange, credentials) as client:
        data = await client.sign_and_request("GET", "/fills")

    assert data == {"message": "invalid request"}


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [200, 400, 401])
async def test_message_field_raises_application_error(exchange, credentials, status):
    exchange.respond("/fills", {"message": "invalid request"}, status=status)
    async with make_client(exchange, credentials) as client:
        with pytest.raises(ApplicationError) as excinfo:
            await client.make_authenticated_request("GET", "/fills")

    assert excinfo.value.message == "invalid request"
    assert str(excinfo.value) == "invalid request"
    assert excinfo.value.status == status


@pytest.mark.asyncio
async def test_empty_message_is_not_an_error(exchange, credentials):
    exchange.respond("/fills", {"message": "", "ok": True})
    async with make_client(exchange, credentials) as client:
        data = await client.make_authenticated_request("GET", "/fills")

    assert data == {"message": "", "ok": True}


@pytest.mark.asyncio
async def test_error_status_without_message_is_transport_error(exchange, credentials):
    exchange.respond("/fills", {"error": "boom"}, status=502)
    async with make_client(exchange, credentials) as client:
        with pytest.raises(TransportError) as excinfo:
            await client.make_authenticated_request("GET", "/fills")

    assert excinfo.value.status == 502
    assert not isinstance(excinfo.value, RequestTimeoutError)


@pytest.mark.asyncio
async def test_non_json_response_is_transport_error(exchange, credentials):
    exchange.respond("/fills", "<html>Bad Gateway</html>", status=502)
    async with make_client(exchange, credentials) as client:
        with pytest.raises(TransportError) as excinfo:
            await client.sign_and_request("GET", "/fills")

    assert excinfo.value.status == 502
    assert excinfo.value.cause is not None


@pytest.mark.asyncio
async def test_timeout_is_classified_as_transport_timeout(exchange, credentials):
    exchange.delay = 1.0
    async with make_client(exchange, credentials, timeout=100) as client:
        with pytest.raises(RequestTimeoutError) as excinfo:
            await client.make_authenticated_request("GET", "/fills")

    assert isinstance(excinfo.value, TransportError)
    assert not isinstance(excinfo.value, ApplicationError)


@pytest.mark.asyncio
async def test_connection_refused_is_transport_error(credentials):
    client = AsyncClient(ClientOptions(endpoint="http://127.0.0.1:1", **credentials))
    try:
        with pytest.raises(TransportError) as excinfo:
            await client.sign_and_request("GET", "/fills")
    finally:
        await client.close()

    assert excinfo.value.cause is not None
    assert excinfo.value.__cause__ is excinfo.value.cause


@pytest.mark.asyncio
async def test_session_is_created_lazily_and_closed(credentials):
    client = AsyncClient(ClientOptions(**credentials))
    with pytest.raises(RuntimeError):
        client.session

    await client._ensure_session()
    session = client.session
    assert not session.closed

    await client.close()
    assert session.closed


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [b"\xff\xfe", b'{"message": "\xff\xfe"}'])
async def test_undecodable_body_is_transport_error(exchange, credentials, payload):
    exchange.respond("/fills", payload)
    async with make_client(exchange, credentials) as client:
        with pytest.raises(TransportError) as excinfo:
            await client.make_authenticated_request("GET", "/fills")

    assert excinfo.value.status == 200
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)
