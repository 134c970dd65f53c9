"""Async RISPort70 client.

Every operation follows the same pipeline:

1. render the action element from typed criteria,
2. wrap it in the SOAP envelope,
3. POST it with basic auth,
4. parse the XML, strip the namespace prefix, surface faults,
5. return the `Envelope/Body` subtree.

There is no retry, no queue and no lock; concurrent calls share only the
immutable connection settings and the pooled `httpx.AsyncClient`.

Example:

    async with RisPort70("cucm.example.com", "axluser", "secret") as ris:
        body = await ris.get_phone_by_name("SEPEC1D8B2B6DEC")
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, TypeVar

import httpx
from pydantic import BaseModel

from risport70.adapters.http_client import (
    SOAP_CONTENT_TYPE,
    basic_auth_token,
    build_async_client,
    service_url,
)
from risport70.adapters.soap import (
    SELECT_CM_DEVICE,
    SELECT_CM_DEVICE_EXT,
    build_envelope,
    parse_envelope,
    render_cm_selection,
    render_cti_selection,
)
from risport70.core.config import (
    DEFAULT_NAMESPACE_PREFIX,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_MS,
    RisPortSettings,
)
from risport70.core.domain.enums import StripMode
from risport70.core.domain.models import CmSelectionCriteria, CtiSelectionCriteria
from risport70.core.errors import (
    ResponseParseError,
    RisPortHTTPError,
    RisPortTimeoutError,
    RisPortTransportError,
)
from risport70.core.interfaces.service import RealtimeService

logger = logging.getLogger(__name__)

_CriteriaT = TypeVar("_CriteriaT", bound=BaseModel)


def _coerce(model: type[_CriteriaT], criteria: _CriteriaT | Mapping[str, Any]) -> _CriteriaT:
    if isinstance(criteria, model):
        return criteria
    return model.model_validate(dict(criteria))


class RisPort70(RealtimeService):
    """Client for one CUCM RISPort70 endpoint.

    Host, credentials and timeout are fixed at construction; the basic-auth
    token and service URL are derived once and exposed read-only.
    """

    def __init__(
        self,
        host: str,
        user: str,
        password: str,
        timeout: int | None = DEFAULT_TIMEOUT_MS,
        *,
        port: int = DEFAULT_PORT,
        verify: bool = True,
        namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX,
        strip_mode: StripMode | str = StripMode.LEXICAL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._host = host or ""
        self._user = user or ""
        self._timeout = timeout or DEFAULT_TIMEOUT_MS
        self._auth_token = basic_auth_token(self._user, password or "")
        self._url = service_url(self._host, port)
        self._namespace_prefix = namespace_prefix
        self._strip_mode = StripMode(strip_mode)
        self._client = build_async_client(
            timeout_ms=self._timeout,
            verify=verify,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: RisPortSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "RisPort70":
        settings = settings or RisPortSettings()
        return cls(
            settings.host,
            settings.user,
            settings.password,
            settings.timeout_ms,
            port=settings.port,
            verify=settings.verify_tls,
            namespace_prefix=settings.namespace_prefix,
            strip_mode=settings.strip_mode,
            transport=transport,
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def user(self) -> str:
        return self._user

    @property
    def timeout(self) -> int:
        """Per-call timeout in milliseconds."""

        return self._timeout

    @property
    def url(self) -> str:
        return self._url

    @property
    def auth_token(self) -> str:
        return self._auth_token

    @property
    def authorization(self) -> str:
        return f"Basic {self._auth_token}"

    def construct_headers(self, soap_action: str | None = None) -> dict[str, str]:
        """Request headers; `SOAPAction` is only set when an action is given.

        The operations below never pass one: RISPort70 dispatches on the body.
        """

        headers = {
            "Authorization": self.authorization,
            "Content-Type": SOAP_CONTENT_TYPE,
        }
        if soap_action is not None:
            headers["SOAPAction"] = soap_action
        return headers

    async def generic_call(self, soap_body: dict[str, Any], namespace_prefix: str | None = None) -> dict[str, Any]:
        """Send one action element and return the parsed Body.

        Raises:
            RisPortTimeoutError: the timeout elapsed.
            RisPortTransportError: connection, DNS or TLS failure.
            RisPortHTTPError: non-2xx without a SOAP fault.
            SoapFaultError: the server returned a fault (any status).
            ResponseParseError: the response is not a SOAP envelope.
        """

        prefix = self._namespace_prefix if namespace_prefix is None else namespace_prefix
        envelope = build_envelope(soap_body)
        action = next(iter(soap_body), "?")

        logger.debug("RISPort70 %s -> %s", action, self._url)
        try:
            response = await self._client.post(
                self._url,
                content=envelope.encode("utf-8"),
                headers=self.construct_headers(),
            )
        except httpx.TimeoutException as exc:
            raise RisPortTimeoutError(
                f"RISPort70 request to {self._host} timed out after {self._timeout} ms"
            ) from exc
        except httpx.HTTPError as exc:
            raise RisPortTransportError(f"RISPort70 request to {self._host} failed: {exc}") from exc

        logger.debug("RISPort70 %s <- HTTP %s (%d bytes)", action, response.status_code, len(response.content))
        text = response.text

        if not response.is_success:
            if text.strip():
                try:
                    # Raises SoapFaultError when the error body is a fault.
                    parse_envelope(
                        text,
                        namespace_prefix=prefix,
                        strip_mode=self._strip_mode,
                        status_code=response.status_code,
                    )
                except ResponseParseError:
                    pass
            raise RisPortHTTPError(response.status_code, text)

        return parse_envelope(text, namespace_prefix=prefix, strip_mode=self._strip_mode)

    async def get_phone_by_name(self, name: str, namespace_prefix: str | None = None) -> dict[str, Any]:
        """`selectCmDeviceExt` for a single device name, with the fixed defaults."""

        return await self.get_phones_by_name([name], namespace_prefix)

    async def get_phones_by_name(
        self,
        names: Iterable[str],
        namespace_prefix: str | None = None,
    ) -> dict[str, Any]:
        if isinstance(names, str):
            raise TypeError("names must be an iterable of device names, not a str; use get_phone_by_name()")
        criteria = CmSelectionCriteria(items=list(names))
        return await self.generic_call(render_cm_selection(SELECT_CM_DEVICE_EXT, criteria), namespace_prefix)

    async def select_cm_device(
        self,
        criteria: CmSelectionCriteria | Mapping[str, Any],
        namespace_prefix: str | None = None,
    ) -> dict[str, Any]:
        criteria = _coerce(CmSelectionCriteria, criteria)
        return await self.generic_call(render_cm_selection(SELECT_CM_DEVICE, criteria), namespace_prefix)

    async def select_cm_device_ext(
        self,
        criteria: CmSelectionCriteria | Mapping[str, Any],
        namespace_prefix: str | None = None,
    ) -> dict[str, Any]:
        """Like `select_cm_device`, with per-device line/DN detail in the reply."""

        criteria = _coerce(CmSelectionCriteria, criteria)
        return await self.generic_call(render_cm_selection(SELECT_CM_DEVICE_EXT, criteria), namespace_prefix)

    async def select_cti_item(
        self,
        criteria: CtiSelectionCriteria | Mapping[str, Any],
        namespace_prefix: str | None = None,
    ) -> dict[str, Any]:
        criteria = _coerce(CtiSelectionCriteria, criteria)
        return await self.generic_call(render_cti_selection(criteria), namespace_prefix)

    # Vendor operation names.
    getPhoneByName = get_phone_by_name
    getPhonesByName = get_phones_by_name
    selectCMDevice = select_cm_device
    selectCmDeviceExt = select_cm_device_ext
    selectCtiItem = select_cti_item

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RisPort70":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
