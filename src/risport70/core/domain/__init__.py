"""Domain types: criteria models and the vendor value tables.

Pure data, no HTTP and no XML.
"""

from risport70.core.domain.enums import (
    AppItem,
    CtiItemStatus,
    CtiMgrClass,
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
from risport70.core.domain.models import CmSelectionCriteria, CtiSelectionCriteria

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
    "SelectAppBy",
    "SelectBy",
    "SipStatus",
    "Status",
    "StripMode",
]
