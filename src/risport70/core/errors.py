"""Exception hierarchy for RISPort70 calls.

Every failure of an operation surfaces as a subclass of `RisPortError`, so
callers can catch one type. The underlying httpx exception (when there is one)
is chained as `__cause__`.
"""

from __future__ import annotations

from typing import Any


class RisPortError(Exception):
    """Base class for every error raised by the client."""


class RisPortTransportError(RisPortError):
    """The request never produced a usable response (connection, DNS, TLS)."""


class RisPortTimeoutError(RisPortTransportError):
    """The configured per-call timeout elapsed."""


class RisPortHTTPError(RisPortTransportError):
    """Non-2xx response that did not carry a SOAP fault."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        snippet = (body or "").strip()
        if len(snippet) > 800:
            snippet = snippet[:800] + "..."
        message = f"RISPort70 HTTP error {status_code}"
        if snippet:
            message = f"{message}: {snippet}"
        super().__init__(message)


class ResponseParseError(RisPortError):
    """The response body is not well-formed XML."""


class SoapFaultError(RisPortError):
    """The server answered with a SOAP `Fault` element in the body."""

    def __init__(
        self,
        faultcode: str | None,
        faultstring: str | None,
        detail: Any = None,
        *,
        status_code: int | None = None,
    ) -> None:
        self.faultcode = faultcode or "Unknown"
        self.faultstring = faultstring or "Unknown error"
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"SOAP Fault [{self.faultcode}]: {self.faultstring}")
