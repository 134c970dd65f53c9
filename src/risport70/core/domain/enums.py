"""Permitted values for RISPort70 selection criteria.

These mirror the vendor documentation
(https://developer.cisco.com/docs/sxml/#!risport70-api-reference). They are
pass-through strings: the client sends `.value` verbatim.
"""

from __future__ import annotations

from enum import Enum


class DeviceClass(str, Enum):
    ANY = "Any"
    PHONE = "Phone"
    GATEWAY = "Gateway"
    H323 = "H323"
    CTI = "Cti"
    VOICE_MAIL = "VoiceMail"
    MEDIA_RESOURCES = "MediaResources"
    HUNT_LIST = "HuntList"
    SIP_TRUNK = "SIPTrunk"
    UNKNOWN = "Unknown"


class Status(str, Enum):
    """Registration status of a device."""

    ANY = "Any"
    REGISTERED = "Registered"
    UNREGISTERED = "UnRegistered"
    REJECTED = "Rejected"
    PARTIALLY_REGISTERED = "PartiallyRegistered"
    UNKNOWN = "Unknown"


class SelectBy(str, Enum):
    """Key that `SelectItems` entries are matched against."""

    NAME = "Name"
    IPV4_ADDRESS = "IPV4Address"
    IPV6_ADDRESS = "IPV6Address"
    DIR_NUMBER = "DirNumber"
    DESCRIPTION = "Description"
    SIP_STATUS = "SIPStatus"


class SipStatus(str, Enum):
    """Item values used together with `SelectBy.SIP_STATUS`."""

    IN_SERVICE = "InService"
    OUT_OF_SERVICE = "OutOfService"
    PARTIAL_SERVICE = "PartialService"
    UNKNOWN = "Unknown"


class Protocol(str, Enum):
    ANY = "Any"
    SCCP = "SCCP"
    SIP = "SIP"
    UNKNOWN = "Unknown"


class DownloadStatus(str, Enum):
    ANY = "Any"
    UPGRADING = "Upgrading"
    SUCCESSFUL = "Successful"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class Model(str, Enum):
    """Device model codes. Only the wildcard is needed by the client itself."""

    ALL = "255"


class CtiMgrClass(str, Enum):
    PROVIDER = "Provider"
    DEVICE = "Device"
    LINE = "Line"


class CtiItemStatus(str, Enum):
    ANY = "Any"
    OPEN = "Open"
    CLOSED = "Closed"
    OPEN_FAILED = "OpenFailed"
    UNKNOWN = "Unknown"


class SelectAppBy(str, Enum):
    APP_ID = "AppId"
    APP_IPV4_ADDRESS = "AppIPV4Address"
    APP_IPV6_ADDRESS = "AppIPV6Address"
    USER_ID = "UserId"


class AppItem(str, Enum):
    """Kinds of application item a CTI selection can report."""

    # As specified by the application.
    APP_NAME = "AppName"
    # Current or last-known address of the application.
    APP_IP_ADDRESS = "AppIPAddress"
    # Unique per CTI connection, disambiguates several connections from one host.
    APP_INSTANCE = "AppInstance"


class StripMode(str, Enum):
    """How the server's namespace prefix is removed from a parsed response."""

    # Substring replacement over the serialized tree; text content included.
    LEXICAL = "lexical"
    # Element and attribute names only.
    STRUCTURAL = "structural"
