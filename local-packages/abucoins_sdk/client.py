from typing import Any, Dict, List, Mapping, Optional, Union

from .history.client import Client as HistoryClient, HistoryQuery
from .internal.async_client import AsyncClient, JsonResponse
from .internal.options import ClientOptions
from .internal.signing_adapter import SigningAdapter


class Client:
    """Main Abucoins SDK client."""

    def __init__(self, options: Optional[Union[ClientOptions, Mapping[str, Any]]] = None,
                 signing_adapter: Optional[SigningAdapter] = None, **overrides: Any):
        """
        Initialize the Abucoins SDK client.

        Args:
            options: ClientOptions or a mapping of option names to values
            signing_adapter: Optional signing adapter (defaults to HmacSigningAdapter)
            **overrides: Option values that take precedence over ``options``
                (timeout, endpoint, key, secret, passphrase)
        """
        if isinstance(options, ClientOptions):
            merged = options.model_dump()
        else:
            merged = dict(options or {})
        merged.update(overrides)

        self.options = ClientOptions(**merged)
        self.async_client = AsyncClient(self.options, signing_adapter=signing_adapter)
        self.history = HistoryClient(self.async_client)

    async def __aenter__(self):
        """Async context manager entry."""
        await self.async_client._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the client and cleanup resources."""
        await self.async_client.close()

    async def sign_and_request(self, method: str, path: str,
                               body: Optional[Dict[str, Any]] = None) -> JsonResponse:
        """Send a signed request and return the decoded JSON untouched."""
        return await self.async_client.sign_and_request(method, path, body)

    async def trade_history(self, params: HistoryQuery = None) -> List[Dict[str, Any]]:
        """Get completed trade history (fills)."""
        return await self.history.trade_history(params)

    async def withdrawal_history(self, params: HistoryQuery = None) -> List[Dict[str, Any]]:
        """Get withdrawals history."""
        return await self.history.withdrawal_history(params)

    async def deposit_history(self, params: HistoryQuery = None) -> List[Dict[str, Any]]:
        """Get deposit history."""
        return await self.history.deposit_history(params)
