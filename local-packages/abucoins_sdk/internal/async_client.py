import asyncio
import json
import time
from typing import Dict, Any, Optional, Tuple, Union, List

import aiohttp
from loguru import logger

from ..errors import ApplicationError, RequestTimeoutError, TransportError
from .hmac_signing_adapter import HmacSigningAdapter
from .options import ClientOptions
from .signing_adapter import SigningAdapter, build_signature_content, serialize_body

JsonResponse = Union[Dict[str, Any], List[Any]]


class AsyncClient:
    """Async base client that signs and sends requests."""

    def __init__(self, options: ClientOptions, signing_adapter: Optional[SigningAdapter] = None):
        """
        Initialize the async internal client.

        Args:
            options: Endpoint, timeout and credentials
            signing_adapter: Optional signing adapter (defaults to HmacSigningAdapter)
        """
        self.options = options
        self.signing_adapter = signing_adapter or HmacSigningAdapter()

        # Session is created on first use, inside the event loop
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure the aiohttp session is created."""
        if self._session is None or self._session.closed:
            timeout_config = aiohttp.ClientTimeout(total=self.options.timeout_seconds)
            self._session = aiohttp.ClientSession(
                timeout=timeout_config,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json"
                }
            )

    async def close(self):
        """Close the HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get the HTTP session, ensuring it's created."""
        if self._session is None or self._session.closed:
            raise RuntimeError("Session not initialized. Use 'async with client:' or call '_ensure_session()'")
        return self._session

    def get_headers(self, signature: str, timestamp: int) -> Dict[str, str]:
        """Build the authentication headers for a signed request."""
        return {
            "AC-ACCESS-KEY": self.options.key,
            "AC-ACCESS-SIGN": signature,
            "AC-ACCESS-TIMESTAMP": str(timestamp),
            "AC-ACCESS-PASSPHRASE": self.options.passphrase,
        }

    def sign(self, timestamp: int, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> str:
        """
        Compute the request signature.

        Args:
            timestamp: Unix time in seconds
            method: HTTP method
            path: Request path including the query string
            body: Request body

        Returns:
            str: The base64 HMAC-SHA256 signature
        """
        content = build_signature_content(timestamp, method, path, body)
        return self.signing_adapter.sign(content, self.options.decoded_secret())

    async def sign_and_request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None
    ) -> JsonResponse:
        """
        Sign a request, send it and decode the JSON response.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path with query string (e.g., '/fills?limit=5')
            body: JSON body; an empty object is sent when omitted

        Returns:
            The decoded JSON response, whatever its shape

        Raises:
            RequestTimeoutError: If the configured timeout elapses
            TransportError: If the request fails or the body is not JSON
        """
        data, _ = await self._request(method, path, body)
        return data

    async def make_authenticated_request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None
    ) -> JsonResponse:
        """
        Sign and send a request, turning error responses into exceptions.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path with query string
            body: JSON body

        Returns:
            The decoded JSON response

        Raises:
            ApplicationError: If the response carries a ``message`` field
            RequestTimeoutError: If the configured timeout elapses
            TransportError: If the request fails or returns an error status
        """
        data, status = await self._request(method, path, body)

        if isinstance(data, dict) and data.get("message"):
            raise ApplicationError(str(data["message"]), status=status)
        if status >= 400:
            raise TransportError(f"request failed with status code: {status}, response: {data}", status=status)

        return data

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]]
    ) -> Tuple[JsonResponse, int]:
        await self._ensure_session()

        timestamp = int(time.time())
        url = f"{self.options.endpoint}{path}"
        signature = self.sign(timestamp, method, path, body)
        headers = self.get_headers(signature, timestamp)

        # Send the exact bytes that were signed
        payload = serialize_body(body).encode("utf-8")

        logger.debug("{} {}", method, path)
        try:
            async with self.session.request(
                method=method,
                url=url,
                data=payload,
                headers=headers
            ) as response:
                status = response.status
                raw = await response.read()
        except asyncio.TimeoutError as e:
            raise RequestTimeoutError(
                f"request timed out after {self.options.timeout} ms: {method} {path}", cause=e
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"HTTP request failed: {str(e)}", cause=e) from e

        logger.debug("{} {} -> {}", method, path, status)
        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise TransportError(
                f"request failed with status code: {status}, response: {raw[:200]!r}", cause=e, status=status
            ) from e

        return data, status
