"""httpx wrapper.

One builder so every caller gets the same timeout, TLS and header policy.
Tests swap the network out by passing an `httpx.MockTransport`.
"""

from __future__ import annotations

import base64

import httpx

from risport70.core.config import DEFAULT_PORT, SERVICE_PATH

SOAP_CONTENT_TYPE = "text/xml; charset=utf-8"


def basic_auth_token(user: str, password: str) -> str:
    """`base64("<user>:<password>")`, as sent after `Basic `."""

    return base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")


def service_url(host: str, port: int = DEFAULT_PORT) -> str:
    return f"https://{host}:{port}{SERVICE_PATH}"


def build_async_client(
    *,
    timeout_ms: int,
    verify: bool = True,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` for RISPort70 calls.

    No `base_url`: callers post to the full service URL.

    - Timeout applies to connect, read, write and pool acquisition alike.
    - `verify=False` is only ever set by an explicit caller choice.
    - No retries: httpx does none by default and none are added here.
    """

    headers: dict[str, str] = {"Accept": "text/xml"}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_ms / 1000.0),
        verify=verify,
        headers=headers,
        transport=transport,
    )
