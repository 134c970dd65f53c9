"""SOAP 1.1 envelope rendering and response parsing for RISPort70.

Requests are built as dict trees and serialized with `xmltodict.unparse`, so
every interpolated value is XML-escaped. Responses are parsed with
`xmltodict.parse` into plain dicts: keys mirror element names, attributes are
`@`-prefixed, text next to attributes lives under `#text`, and repeated
siblings become lists.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable
from xml.parsers.expat import ExpatError

import xmltodict

from risport70.core.domain.enums import StripMode
from risport70.core.domain.models import CmSelectionCriteria, CtiSelectionCriteria
from risport70.core.errors import ResponseParseError, SoapFaultError

SOAPENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
RIS_NS = "http://schemas.cisco.com/ast/soap"

SELECT_CM_DEVICE = "selectCmDevice"
SELECT_CM_DEVICE_EXT = "selectCmDeviceExt"
SELECT_CTI_ITEM = "selectCtiItem"


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _item_list(tag: str, values: Iterable[Any]) -> dict[str, Any]:
    """`<soap:item><soap:{tag}>v</soap:{tag}></soap:item>` per value, in order."""

    return {"soap:item": [{f"soap:{tag}": _text(v)} for v in values]}


def render_cm_selection(action: str, criteria: CmSelectionCriteria) -> dict[str, Any]:
    """Body fragment for `selectCmDevice` / `selectCmDeviceExt`.

    Element order follows the WSDL sequence.
    """

    return {
        f"soap:{action}": {
            "soap:StateInfo": None,
            "soap:CmSelectionCriteria": {
                "soap:MaxReturnedDevices": _text(criteria.max_returned_devices),
                "soap:DeviceClass": _text(criteria.device_class),
                "soap:Model": _text(criteria.model),
                "soap:Status": _text(criteria.status),
                "soap:NodeName": _text(criteria.node_name),
                "soap:SelectBy": _text(criteria.select_by),
                "soap:SelectItems": _item_list("Item", criteria.items),
                "soap:Protocol": _text(criteria.protocol),
                "soap:DownloadStatus": _text(criteria.download_status),
            },
        }
    }


def render_cti_selection(criteria: CtiSelectionCriteria) -> dict[str, Any]:
    """Body fragment for `selectCtiItem`."""

    return {
        f"soap:{SELECT_CTI_ITEM}": {
            "soap:StateInfo": None,
            "soap:CtiSelectionCriteria": {
                "soap:MaxReturnedItems": _text(criteria.max_returned_items),
                "soap:CtiMgrClass": _text(criteria.cti_mgr_class),
                "soap:Status": _text(criteria.status),
                "soap:NodeName": _text(criteria.node_name),
                "soap:SelectAppBy": _text(criteria.select_app_by),
                "soap:AppItems": _item_list("AppItem", criteria.app_items),
                "soap:DevNames": _item_list("DevName", criteria.dev_names),
                "soap:DirNumbers": _item_list("DirNumber", criteria.dir_numbers),
            },
        }
    }


def build_envelope(body: dict[str, Any]) -> str:
    """Wrap a body fragment in the SOAP envelope (empty header, two namespaces)."""

    document = {
        "soapenv:Envelope": {
            "@xmlns:soapenv": SOAPENV_NS,
            "@xmlns:soap": RIS_NS,
            "soapenv:Header": None,
            "soapenv:Body": body,
        }
    }
    return xmltodict.unparse(document, full_document=False)


def local_name(key: str) -> str:
    return key.rsplit(":", 1)[-1]


def child_by_local_name(node: Any, name: str) -> Any:
    """First child element of `node` whose name, minus any prefix, is `name`."""

    if not isinstance(node, dict):
        return None
    for key, value in node.items():
        if key.startswith(("@", "#")):
            continue
        if local_name(key) == name:
            return value
    return None


def strip_prefix_lexical(tree: Any, prefix: str) -> Any:
    """Remove every occurrence of `prefix` from the serialized tree.

    Operates on JSON text, so element text and attribute values lose the
    prefix too.
    """

    if not prefix:
        return tree
    try:
        return json.loads(json.dumps(tree, ensure_ascii=False).replace(prefix, ""))
    except ValueError as exc:
        raise ResponseParseError(f"Prefix {prefix!r} cannot be stripped lexically: {exc}") from exc


def _strip_key(key: str, prefix: str) -> str:
    if key.startswith("@"):
        return "@" + _strip_key(key[1:], prefix)
    if key.startswith(prefix):
        return key[len(prefix):]
    return key


def strip_prefix_structural(tree: Any, prefix: str) -> Any:
    """Remove `prefix` from element and attribute names only."""

    if not prefix:
        return tree
    if isinstance(tree, dict):
        return {_strip_key(k, prefix): strip_prefix_structural(v, prefix) for k, v in tree.items()}
    if isinstance(tree, list):
        return [strip_prefix_structural(v, prefix) for v in tree]
    return tree


def parse_xml(text: str) -> dict[str, Any]:
    try:
        return xmltodict.parse(text)
    except ExpatError as exc:
        raise ResponseParseError(f"Response is not well-formed XML: {exc}") from exc


def _node_text(node: Any) -> str | None:
    if isinstance(node, dict):
        node = node.get("#text")
    return node if isinstance(node, str) else None


def raise_for_fault(body: Any, *, status_code: int | None = None) -> None:
    fault = child_by_local_name(body, "Fault")
    if fault is None:
        return
    raise SoapFaultError(
        _node_text(child_by_local_name(fault, "faultcode")),
        _node_text(child_by_local_name(fault, "faultstring")),
        child_by_local_name(fault, "detail"),
        status_code=status_code,
    )


def parse_envelope(
    text: str,
    *,
    namespace_prefix: str,
    strip_mode: StripMode = StripMode.LEXICAL,
    status_code: int | None = None,
) -> dict[str, Any]:
    """Raw response XML -> `Envelope/Body` subtree with the prefix removed.

    Raises:
        ResponseParseError: not XML, or no SOAP Envelope/Body.
        SoapFaultError: the Body holds a `Fault`.
    """

    tree = parse_xml(text)
    if strip_mode is StripMode.STRUCTURAL:
        tree = strip_prefix_structural(tree, namespace_prefix)
    else:
        tree = strip_prefix_lexical(tree, namespace_prefix)

    envelope = child_by_local_name(tree, "Envelope")
    if envelope is None:
        raise ResponseParseError("Response has no SOAP Envelope")
    if not isinstance(envelope, dict) or not any(local_name(k) == "Body" for k in envelope):
        raise ResponseParseError("Response has no SOAP Body")

    body = child_by_local_name(envelope, "Body") or {}
    raise_for_fault(body, status_code=status_code)
    return body


def trim_response(tree: Any, response_tag: str, field: str, return_tag: str = "return") -> Any:
    """Drill into `<response_tag>/<return_tag>/<field>` of a response.

    Accepts a full parsed envelope or an already extracted Body. Segments are
    matched by local name. Returns `None` when any segment is missing.
    """

    node = tree
    envelope = child_by_local_name(node, "Envelope")
    if envelope is not None:
        node = child_by_local_name(envelope, "Body")
    for segment in (response_tag, return_tag, field):
        node = child_by_local_name(node, segment)
        if node is None:
            return None
    return node
