from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


@dataclass
class HistoryParams:
    """Query parameters shared by the history endpoints."""
    before: Optional[Union[int, str]] = None  # Request page before (newer) this pagination id
    after: Optional[Union[int, str]] = None  # Request page after (older) this pagination id
    limit: Optional[int] = None  # Results per request, max 1000 (server default 100)

    def to_query(self) -> Dict[str, Any]:
        """Return the parameters that are set, in request order."""
        query: Dict[str, Any] = {}
        if self.before is not None:
            query["before"] = self.before
        if self.after is not None:
            query["after"] = self.after
        if self.limit is not None:
            query["limit"] = self.limit
        return query


class HistoryRecord(BaseModel):
    model_config = ConfigDict(extra="allow")


class Fill(HistoryRecord):
    """A completed trade."""
    trade_id: str
    product_id: str
    price: str
    size: str
    order_id: str
    created_at: str  # UTC
    liquidity: str  # M = maker, T = taker
    fee: str
    side: str  # buy / sell


class DepositHistory(HistoryRecord):
    deposit_id: str
    currency: str
    date: str
    amount: str
    fee: str
    status: str
    url: Optional[str] = None  # blockchain explorer url


class WithdrawalHistory(HistoryRecord):
    withdraw_id: str
    currency: str
    date: str
    amount: str
    fee: str
    status: str
    url: Optional[str] = None  # blockchain explorer url


def parse_fills(data: List[Dict[str, Any]]) -> List[Fill]:
    return [Fill.model_validate(item) for item in data]


def parse_deposits(data: List[Dict[str, Any]]) -> List[DepositHistory]:
    return [DepositHistory.model_validate(item) for item in data]


def parse_withdrawals(data: List[Dict[str, Any]]) -> List[WithdrawalHistory]:
    return [WithdrawalHistory.model_validate(item) for item in data]
