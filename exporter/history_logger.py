from __future__ import annotations

import csv
import os
from typing import Any, Dict, Iterable, List, Optional

from abucoins_sdk import DepositHistory, Fill, WithdrawalHistory

# kind -> (file name, cursor field, columns)
HISTORY_KINDS: Dict[str, tuple[str, str, List[str]]] = {
    "fills": ("fills.csv", "trade_id", list(Fill.model_fields)),
    "deposits": ("deposits.csv", "deposit_id", list(DepositHistory.model_fields)),
    "withdrawals": ("withdrawals.csv", "withdraw_id", list(WithdrawalHistory.model_fields)),
}


class HistoryLogger:
    def __init__(self, base_dir: str = "logs") -> None:
        self.base_dir = base_dir
        os.makedirs(self.base_dir, exist_ok=True)

    def path_for(self, kind: str) -> str:
        file_name, _, _ = HISTORY_KINDS[kind]
        return os.path.join(self.base_dir, file_name)

    def append(self, kind: str, rows: Iterable[Dict[str, Any]]) -> int:
        """Append records to the CSV for ``kind``; returns the number written."""
        _, _, headers = HISTORY_KINDS[kind]
        path = self.path_for(kind)
        file_exists = os.path.exists(path) and os.path.getsize(path) > 0
        count = 0
        with open(path, mode="a", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=headers, extrasaction="ignore")
            if not file_exists:
                writer.writeheader()
            for r in rows:
                writer.writerow({k: "" if r.get(k) is None else r.get(k) for k in headers})
                count += 1
        return count

    @staticmethod
    def last_cursor(kind: str, rows: List[Dict[str, Any]]) -> Optional[str]:
        """Id of the last (oldest) row, usable as ``--after`` for the next page."""
        if not rows:
            return None
        _, cursor_field, _ = HISTORY_KINDS[kind]
        value = rows[-1].get(cursor_field)
        return None if value is None else str(value)
