from typing import Any, Dict, List, Mapping, Optional, Union

from ..internal.async_client import AsyncClient
from ..internal.query import url_with_parameters
from .types import HistoryParams

HistoryQuery = Optional[Union[HistoryParams, Mapping[str, Any]]]

FILLS_PATH = "/fills"
WITHDRAWALS_HISTORY_PATH = "/withdrawals/history"
DEPOSITS_HISTORY_PATH = "/deposits/history"


def _query(params: HistoryQuery) -> Optional[Mapping[str, Any]]:
    if isinstance(params, HistoryParams):
        return params.to_query()
    return params


class Client:
    """Client for the account history endpoints."""

    def __init__(self, async_client: AsyncClient):
        """
        Initialize the history client.

        Args:
            async_client: The async client for common functionality
        """
        self.async_client = async_client

    async def _get(self, path: str, params: HistoryQuery) -> List[Dict[str, Any]]:
        return await self.async_client.make_authenticated_request(
            method="GET",
            path=url_with_parameters(path, _query(params))
        )

    async def trade_history(self, params: HistoryQuery = None) -> List[Dict[str, Any]]:
        """
        Get completed trade history.

        Args:
            params: Optional ``before``, ``after`` and ``limit`` cursors

        Returns:
            List[Dict[str, Any]]: Fill records, as returned by the exchange

        Raises:
            ApplicationError: If the exchange answers with an error message
            TransportError: If the request fails
        """
        return await self._get(FILLS_PATH, params)

    async def withdrawal_history(self, params: HistoryQuery = None) -> List[Dict[str, Any]]:
        """
        Get withdrawals history.

        Args:
            params: Optional ``before``, ``after`` and ``limit`` cursors

        Returns:
            List[Dict[str, Any]]: WithdrawalHistory records
        """
        return await self._get(WITHDRAWALS_HISTORY_PATH, params)

    async def deposit_history(self, params: HistoryQuery = None) -> List[Dict[str, Any]]:
        """
        Get deposit history.

        Args:
            params: Optional ``before``, ``after`` and ``limit`` cursors

        Returns:
            List[Dict[str, Any]]: DepositHistory records
        """
        return await self._get(DEPOSITS_HISTORY_PATH, params)
