from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from abucoins_sdk import ClientOptions

DEFAULT_CONFIG_PATH = os.path.join("configs", "abucoins.yaml")


@dataclass
class ExportSettings:
    options: ClientOptions
    out_dir: str = "logs"


def _read_yaml(path: str) -> Dict[str, Any]:
    # 設定ファイルは任意（無ければ空dict）
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def load_settings(config_path: Optional[str] = None, out_dir: Optional[str] = None) -> ExportSettings:
    """Resolve client options from .env, environment variables and the YAML file."""
    load_dotenv()
    cfg = _read_yaml(config_path or DEFAULT_CONFIG_PATH)

    endpoint = os.getenv("ABUCOINS_ENDPOINT") or cfg.get("endpoint")
    timeout_raw = os.getenv("ABUCOINS_TIMEOUT_MS") or cfg.get("timeout_ms")
    key = os.getenv("ABUCOINS_KEY") or cfg.get("key")
    secret = os.getenv("ABUCOINS_SECRET") or cfg.get("secret")
    passphrase = os.getenv("ABUCOINS_PASSPHRASE") or cfg.get("passphrase")

    missing = [
        name for name, value in (
            ("ABUCOINS_KEY", key),
            ("ABUCOINS_SECRET", secret),
            ("ABUCOINS_PASSPHRASE", passphrase),
        ) if not value
    ]
    if missing:
        raise SystemExit(f"{' / '.join(missing)} が未設定です")

    values: Dict[str, Any] = {"key": str(key), "secret": str(secret), "passphrase": str(passphrase)}
    if endpoint:
        values["endpoint"] = str(endpoint)
    if timeout_raw is not None and timeout_raw != "":
        try:
            values["timeout"] = int(timeout_raw)
        except (TypeError, ValueError):
            raise SystemExit(f"ABUCOINS_TIMEOUT_MS が不正です: {timeout_raw!r}")

    try:
        options = ClientOptions(**values)
    except ValidationError as e:
        raise SystemExit(f"設定が不正です: {e}")

    return ExportSettings(
        options=options,
        out_dir=out_dir or os.getenv("ABUCOINS_OUT_DIR") or cfg.get("out_dir") or "logs",
    )
