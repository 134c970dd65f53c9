"""Selection criteria models (Pydantic v2).

Each model carries one field per vendor parameter. Aliases are the vendor tag
names, so a dict shaped like the raw SOAP criteria validates unchanged:

    CmSelectionCriteria.model_validate({"MaxReturnedDevices": 200, "items": ["SEP..."]})

Enumerated fields accept either the enum or a plain string; the vendor adds
values between CUCM releases and the client does not gatekeep them.

These models describe *what* is asked, not how it is serialized.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from risport70.core.domain.enums import (
    CtiItemStatus,
    CtiMgrClass,
    DeviceClass,
    DownloadStatus,
    Model,
    Protocol,
    SelectAppBy,
    SelectBy,
    Status,
)

DEFAULT_MAX_RETURNED_DEVICES = 10000
DEFAULT_MAX_RETURNED_ITEMS = 1000


class CmSelectionCriteria(BaseModel):
    """Criteria for `selectCmDevice` and `selectCmDeviceExt`.

    Defaults are the fixed values used by the by-name lookups, so
    `CmSelectionCriteria(items=["SEP..."])` is a name query.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    max_returned_devices: int = Field(
        default=DEFAULT_MAX_RETURNED_DEVICES,
        ge=1,
        alias="MaxReturnedDevices",
        description="Upper bound of devices returned by the server.",
    )
    device_class: DeviceClass | str = Field(
        default=DeviceClass.ANY,
        alias="DeviceClass",
    )
    model: Model | int | str = Field(
        default=Model.ALL,
        alias="Model",
        description="Vendor model code; 255 matches every model.",
    )
    status: Status | str = Field(default=Status.ANY, alias="Status")
    node_name: str = Field(
        default="",
        alias="NodeName",
        description="Restrict to one cluster node; empty means every node.",
    )
    select_by: SelectBy | str = Field(default=SelectBy.NAME, alias="SelectBy")
    items: list[str] = Field(
        default_factory=list,
        description="Values matched against `select_by` (names, addresses, DNs...).",
    )
    protocol: Protocol | str = Field(default=Protocol.ANY, alias="Protocol")
    download_status: DownloadStatus | str = Field(
        default=DownloadStatus.ANY,
        alias="DownloadStatus",
    )


class CtiSelectionCriteria(BaseModel):
    """Criteria for `selectCtiItem`."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    max_returned_items: int = Field(
        default=DEFAULT_MAX_RETURNED_ITEMS,
        ge=1,
        alias="MaxReturnedItems",
    )
    cti_mgr_class: CtiMgrClass | str = Field(
        default=CtiMgrClass.PROVIDER,
        alias="CtiMgrClass",
    )
    status: CtiItemStatus | str = Field(
        default=CtiItemStatus.ANY,
        alias="CtiItemStatus",
        description="Rendered as the `Status` element.",
    )
    node_name: str = Field(default="", alias="NodeName")
    select_app_by: SelectAppBy | str = Field(
        default=SelectAppBy.APP_ID,
        alias="SelectAppBy",
    )
    app_items: list[str] = Field(default_factory=list, alias="AppItems")
    dev_names: list[str] = Field(default_factory=list, alias="DevNames")
    dir_numbers: list[str] = Field(default_factory=list, alias="DirNumbers")
