"""
Signing adapter interface for the Abucoins Python SDK.

This module defines the interface for signing adapters and the functions that
build the content every request signature is computed over.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


def serialize_body(body: Optional[Dict[str, Any]]) -> str:
    """
    Serialize a request body the way the exchange expects to see it.

    Keys keep their insertion order and no whitespace is emitted, which is the
    exact output of JavaScript's ``JSON.stringify``.

    Args:
        body: The request body, or None

    Returns:
        str: The compact JSON text (``{}`` for an empty body)
    """
    return json.dumps(body or {}, separators=(",", ":"), ensure_ascii=False)


def build_signature_content(timestamp: int, method: str, path: str,
                            body: Optional[Dict[str, Any]] = None) -> str:
    """
    Build the signing string for a request.

    Args:
        timestamp: Unix time in seconds
        method: HTTP method (GET, POST, etc.)
        path: Request path including the query string
        body: Request body; omitted from the content when empty

    Returns:
        str: ``timestamp + method + path [+ body]``
    """
    content = f"{timestamp}{method}{path}"
    if body:
        content += serialize_body(body)
    return content


class SigningAdapter(ABC):
    """Interface for signing adapters."""

    @abstractmethod
    def sign(self, content: str, secret: bytes) -> str:
        """
        Sign a signing string with the raw account secret.

        Args:
            content: The signing string
            secret: The decoded secret

        Returns:
            str: The signature to send in the request headers
        """
        pass

    @abstractmethod
    def verify(self, content: str, signature: str, secret: bytes) -> bool:
        """
        Check a signature against a signing string.

        Args:
            content: The signing string
            signature: The signature to check
            secret: The decoded secret

        Returns:
            bool: Whether the signature is valid
        """
        pass
