"""Outbound request builder."""
from typing import Dict

from httpx import Headers, Request


class RequestBuilder:
    """Mutable builder for a single outbound request.

    Collects the target URL and headers and produces an ``httpx.Request``
    that an external transport can send. Nothing here performs I/O.
    """

    def __init__(self, url: str, method: str = "POST") -> None:
        """Initialize builder.

        Args:
            url: Absolute request URL
            method: HTTP method
        """
        self.method = method
        self.url = url
        self.headers = Headers()

    def header(self, name: str, value: str) -> "RequestBuilder":
        """Set a header, replacing any previous value of the same name.

        Names are case-insensitive, so a provider header named
        ``authorization`` replaces a bearer token set earlier.
        """
        self.headers[name] = value
        return self

    def bearer_auth(self, token: str) -> "RequestBuilder":
        """Set ``Authorization: Bearer <token>``."""
        return self.header("Authorization", f"Bearer {token}")

    def header_dict(self) -> Dict[str, str]:
        """Get headers as a plain dictionary."""
        return dict(self.headers.items())

    def build(self) -> Request:
        """Build request.

        Returns:
            Request ready to be sent by an ``httpx`` client
        """
        return Request(self.method, self.url, headers=self.headers)
