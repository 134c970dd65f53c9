"""
Shared pytest fixtures.

Provides canned RISPort70 responses, a request-recording mock transport and a
client factory that never touches the network.
"""

from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio

from risport70 import RisPort70

HOST = "cucm.example.com"
USER = "administrator"
PASSWORD = "C1sco12345"


# ============================================================================
# CANNED RESPONSES
# ============================================================================


SELECT_CM_DEVICE_RESPONSE = """<?xml version='1.0' encoding='UTF-8'?>
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
  <soapenv:Body>
    <ns1:selectCmDeviceResponse xmlns:ns1="http://schemas.cisco.com/ast/soap">
      <ns1:selectCmDeviceReturn>
        <ns1:SelectCmDeviceResult>
          <ns1:TotalDevicesFound>2</ns1:TotalDevicesFound>
          <ns1:CmNodes>
            <ns1:item>
              <ns1:ReturnCode>Ok</ns1:ReturnCode>
              <ns1:Name>cucm-pub</ns1:Name>
              <ns1:CmDevices>
                <ns1:item>
                  <ns1:Name>SEPEC1D8B2B6DEC</ns1:Name>
                  <ns1:DirNumber>1000-Registered</ns1:DirNumber>
                  <ns1:Status>Registered</ns1:Status>
                  <ns1:Description>ns1: lobby phone</ns1:Description>
                </ns1:item>
                <ns1:item>
                  <ns1:Name>SEP70C9C6694624</ns1:Name>
                  <ns1:DirNumber>1001-UnRegistered</ns1:DirNumber>
                  <ns1:Status>UnRegistered</ns1:Status>
                  <ns1:Description>Desk</ns1:Description>
                </ns1:item>
              </ns1:CmDevices>
            </ns1:item>
          </ns1:CmNodes>
        </ns1:SelectCmDeviceResult>
        <ns1:StateInfo>&lt;StateInfo ClusterReplicationState="1"/&gt;</ns1:StateInfo>
      </ns1:selectCmDeviceReturn>
    </ns1:selectCmDeviceResponse>
  </soapenv:Body>
</soapenv:Envelope>
"""

SOAP_FAULT_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
  <soapenv:Body>
    <soapenv:Fault>
      <faultcode>soapenv:Server.generalException</faultcode>
      <faultstring>SelectBy value is invalid</faultstring>
      <detail>
        <ns1:hostname xmlns:ns1="http://xml.apache.org/axis/">cucm-pub</ns1:hostname>
      </detail>
    </soapenv:Fault>
  </soapenv:Body>
</soapenv:Envelope>
"""


@pytest.fixture
def cm_device_response() -> str:
    return SELECT_CM_DEVICE_RESPONSE


@pytest.fixture
def fault_response() -> str:
    return SOAP_FAULT_RESPONSE


# ============================================================================
# TRANSPORT / CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def captured() -> list[httpx.Request]:
    """Requests seen by `ok_handler`, in order."""
    return []


@pytest.fixture
def ok_handler(captured: list[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
    """Record the request and answer with the canned selectCmDevice response."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(
            200,
            text=SELECT_CM_DEVICE_RESPONSE,
            headers={"Content-Type": "text/xml; charset=utf-8"},
        )

    return handler


@pytest_asyncio.fixture
async def make_client() -> AsyncGenerator[Callable[..., RisPort70], None]:
    """Factory for clients backed by `httpx.MockTransport`; closed on teardown."""
    clients: list[RisPort70] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> RisPort70:
        client = RisPort70(
            kwargs.pop("host", HOST),
            kwargs.pop("user", USER),
            kwargs.pop("password", PASSWORD),
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """No RISPORT70_* / legacy variables and no project `.env` in the cwd."""
    for name in (
        "RISPORT70_HOST",
        "RISPORT70_USER",
        "RISPORT70_PASSWORD",
        "RISPORT70_PORT",
        "RISPORT70_TIMEOUT_MS",
        "RISPORT70_VERIFY_TLS",
        "RISPORT70_NAMESPACE_PREFIX",
        "RISPORT70_STRIP_MODE",
        "CUCM",
        "UCUSER",
        "UCPASS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def client_builds(monkeypatch: pytest.MonkeyPatch, ok_handler) -> list[dict]:
    """Record the keyword arguments every RisPort70 passes to build_async_client.

    Clients built without a transport are answered by `ok_handler`.
    """
    from risport70.adapters import risport_client

    builds: list[dict] = []
    real_build = risport_client.build_async_client

    def _build(**kwargs) -> httpx.AsyncClient:
        builds.append(dict(kwargs))
        if kwargs.get("transport") is None:
            kwargs["transport"] = httpx.MockTransport(ok_handler)
        return real_build(**kwargs)

    monkeypatch.setattr(risport_client, "build_async_client", _build)
    return builds
