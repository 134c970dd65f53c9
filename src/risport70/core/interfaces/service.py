"""Contract of the real-time information service.

A structural `Protocol` so the CLI (and tests) can work against anything that
answers the five RISPort70 operations, not only the HTTP client.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from risport70.core.domain.models import CmSelectionCriteria, CtiSelectionCriteria


@runtime_checkable
class RealtimeService(Protocol):
    """Minimal contract for a RISPort70 endpoint.

    Every method is asynchronous and resolves to the SOAP Body subtree.
    """

    async def get_phone_by_name(self, name: str, namespace_prefix: str | None = None) -> dict[str, Any]:
        ...

    async def get_phones_by_name(self, names: Iterable[str], namespace_prefix: str | None = None) -> dict[str, Any]:
        ...

    async def select_cm_device(
        self,
        criteria: CmSelectionCriteria | Mapping[str, Any],
        namespace_prefix: str | None = None,
    ) -> dict[str, Any]:
        ...

    async def select_cm_device_ext(
        self,
        criteria: CmSelectionCriteria | Mapping[str, Any],
        namespace_prefix: str | None = None,
    ) -> dict[str, Any]:
        ...

    async def select_cti_item(
        self,
        criteria: CtiSelectionCriteria | Mapping[str, Any],
        namespace_prefix: str | None = None,
    ) -> dict[str, Any]:
        ...
