import base64
import binascii

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_ENDPOINT = "https://api.abucoins.com"


def decode_secret(secret: str) -> bytes:
    """Decode a base64 secret, accepting the URL-safe alphabet and missing padding."""
    normalized = "".join(secret.split()).replace("-", "+").replace("_", "/").rstrip("=")
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)


class ClientOptions(BaseModel):
    """Connection settings and credentials for a client instance."""

    model_config = ConfigDict(frozen=True)

    timeout: int = DEFAULT_TIMEOUT_MS  # milliseconds
    endpoint: str = DEFAULT_ENDPOINT
    key: str = ""
    secret: str = ""  # base64
    passphrase: str = ""

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeout must be a positive number of milliseconds")
        return v

    @field_validator("endpoint")
    @classmethod
    def _check_endpoint(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("endpoint must not be empty")
        return v

    @field_validator("secret")
    @classmethod
    def _check_secret(cls, v: str) -> str:
        try:
            decode_secret(v)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"secret is not valid base64: {e}")
        return v

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0

    def decoded_secret(self) -> bytes:
        return decode_secret(self.secret)
