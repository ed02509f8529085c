"""Error taxonomy for the public API client.

Every call either returns a fully-typed result or raises exactly one of:

- ``InvalidArgument`` — a caller-supplied parameter is unusable; raised
  before anything is sent.
- ``TransportError`` — the HTTP exchange itself failed. This is httpx's own
  ``HTTPError`` hierarchy, surfaced unchanged.
- ``DecodeError`` — the response body did not have the expected shape.
- ``ApiError`` — the exchange answered with a non-empty ``error`` list.
"""

from __future__ import annotations

import httpx

TransportError = httpx.HTTPError


class KrakenError(Exception):
    """Base class for errors raised by this library."""


class InvalidArgument(KrakenError, ValueError):
    """A request parameter violates a precondition."""


class DecodeError(KrakenError):
    """The response payload does not match the expected shape."""


class ApiError(KrakenError):
    """The exchange reported one or more errors in the response envelope."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        self.message = self.errors[0] if self.errors else ""
        super().__init__(f"Kraken API error: {self.message}")

    @property
    def category(self) -> str:
        """Error class prefix, e.g. ``EQuery`` for ``EQuery:Unknown asset pair``."""
        head, sep, _ = self.message.partition(":")
        return head if sep else ""
