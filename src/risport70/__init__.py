"""Async client for the Cisco CUCM RISPort70 real-time information service."""

from risport70.adapters.risport_client import RisPort70
from risport70.adapters.soap import trim_response
from risport70.core.config import RisPortSettings
from risport70.core.domain import (
    AppItem,
    CmSelectionCriteria,
    CtiItemStatus,
    CtiMgrClass,
    CtiSelectionCriteria,
    DeviceClass,
    DownloadStatus,
    Model,
    Protocol,
    SelectAppBy,
    SelectBy,
    SipStatus,
    Status,
    StripMode,
)
from risport70.core.errors import (
    ResponseParseError,
    RisPortError,
    RisPortHTTPError,
    RisPortTimeoutError,
    RisPortTransportError,
    SoapFaultError,
)

__version__ = "0.1.0"

__all__ = [
    "AppItem",
    "CmSelectionCriteria",
    "CtiItemStatus",
    "CtiMgrClass",
    "CtiSelectionCriteria",
    "DeviceClass",
    "DownloadStatus",
    "Model",
    "Protocol",
    "ResponseParseError",
    "RisPort70",
    "RisPortError",
    "RisPortHTTPError",
    "RisPortSettings",
    "RisPortTimeoutError",
    "RisPortTransportError",
    "SelectAppBy",
    "SelectBy",
    "SipStatus",
    "SoapFaultError",
    "Status",
    "StripMode",
    "trim_response",
]
