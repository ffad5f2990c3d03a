import base64
import hashlib
import hmac

from .signing_adapter import SigningAdapter


class HmacSigningAdapter(SigningAdapter):
    """HMAC-SHA256 signatures, base64 encoded."""

    def sign(self, content: str, secret: bytes) -> str:
        digest = hmac.new(secret, content.encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def verify(self, content: str, signature: str, secret: bytes) -> bool:
        return hmac.compare_digest(self.sign(content, secret), signature)
