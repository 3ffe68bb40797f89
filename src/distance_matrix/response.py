"""
Response decoding and result mapping.

Both output formats are decoded to the same dict shape as the JSON API::

    {
        "status": "OK",
        "origin_addresses": ["Vancouver, BC, Canada", ...],
        "destination_addresses": ["San Francisco, CA, USA", ...],
        "rows": [
            {"elements": [{"status": "OK", "duration": {"text": ...}, "distance": {"text": ...}}, ...]},
            ...
        ],
    }

``rows[i]["elements"][j]`` is the pair (origin i, destination j). Labels and
matrix are joined by index only; the labels are resolved addresses and may
repeat.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any

import requests

from distance_matrix.errors import EmptyPayloadError, ServiceStatusError
from distance_matrix.options import OutputFormat
from distance_matrix.schemas import NOT_AVAILABLE, DistanceResult

logger = logging.getLogger(__name__)

STATUS_OK = "OK"
XML_ROOT_TAG = "DistanceMatrixResponse"
MATRIX_KEYS = ("origin_addresses", "destination_addresses", "rows")


# =============================================================================
# Decoding
# =============================================================================


def decode_json(resp: requests.Response) -> dict[str, Any]:
    """Decode a JSON response."""
    if not resp.content or not resp.content.strip():
        raise EmptyPayloadError("empty response body")
    try:
        payload = resp.json()
    except requests.JSONDecodeError as exc:
        raise EmptyPayloadError(f"response body is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise EmptyPayloadError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def _xml_measure(node: ET.Element | None) -> dict[str, Any] | None:
    if node is None:
        return None
    measure: dict[str, Any] = {"text": node.findtext("text", "")}
    value = node.findtext("value")
    if value is not None and value.lstrip("-").isdigit():
        measure["value"] = int(value)
    return measure


def _xml_element(node: ET.Element) -> dict[str, Any]:
    element: dict[str, Any] = {"status": node.findtext("status", "")}
    for name in ("duration", "distance"):
        measure = _xml_measure(node.find(name))
        if measure is not None:
            element[name] = measure
    return element


def decode_xml(body: str | bytes) -> dict[str, Any]:
    """Decode an XML ``DistanceMatrixResponse`` body to the JSON shape."""
    if not body or not body.strip():
        raise EmptyPayloadError("empty response body")
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise EmptyPayloadError(f"response body is not valid XML: {exc}") from exc
    if root.tag != XML_ROOT_TAG:
        raise EmptyPayloadError(f"expected a <{XML_ROOT_TAG}> document, got <{root.tag}>")

    payload: dict[str, Any] = {
        "origin_addresses": [node.text or "" for node in root.findall("origin_address")],
        "destination_addresses": [
            node.text or "" for node in root.findall("destination_address")
        ],
        "rows": [
            {"elements": [_xml_element(node) for node in row.findall("element")]}
            for row in root.findall("row")
        ],
    }
    status = root.findtext("status")
    if status is not None:
        payload["status"] = status
    error_message = root.findtext("error_message")
    if error_message is not None:
        payload["error_message"] = error_message
    return payload


def decode_response(resp: requests.Response, output: OutputFormat) -> dict[str, Any]:
    """Decode ``resp`` according to the configured output format."""
    if output is OutputFormat.XML:
        return decode_xml(resp.content)
    return decode_json(resp)


def check_status(payload: dict[str, Any]) -> None:
    """Raise ServiceStatusError if the request as a whole was refused.

    Payloads without a top-level status are let through.
    """
    status = payload.get("status")
    if status is not None and status != STATUS_OK:
        raise ServiceStatusError(status, payload.get("error_message"))


def check_matrix(payload: dict[str, Any]) -> None:
    """Raise EmptyPayloadError unless ``payload`` carries a distance matrix."""
    for key in MATRIX_KEYS:
        if not isinstance(payload.get(key), list):
            raise EmptyPayloadError(f"response has no distance matrix: missing {key!r}")


# =============================================================================
# Mapping
# =============================================================================


def _text(element: dict[str, Any], name: str) -> str:
    measure = element.get(name)
    if not isinstance(measure, dict):
        return NOT_AVAILABLE
    return measure.get("text") or NOT_AVAILABLE


def _entry(items: list[Any], index: int) -> dict[str, Any]:
    # Missing and null entries read as empty
    item = items[index] if index < len(items) else None
    return item if isinstance(item, dict) else {}


def map_results(payload: dict[str, Any]) -> list[DistanceResult]:
    """
    Flatten the origin x destination matrix into one result per pair.

    Results are row-major: all destinations of the first origin, then all
    destinations of the second, and so on. Elements whose status is not
    ``OK`` (or that are missing or null in the matrix) get ``"N/A"`` for
    both duration and distance.
    """
    rows = payload.get("rows") or []
    destinations = payload.get("destination_addresses") or []

    results = []
    for o_index, origin in enumerate(payload.get("origin_addresses") or []):
        elements = _entry(rows, o_index).get("elements")
        if not isinstance(elements, list):
            elements = []
        for d_index, destination in enumerate(destinations):
            element = _entry(elements, d_index)
            if element.get("status") == STATUS_OK:
                duration = _text(element, "duration")
                distance = _text(element, "distance")
            else:
                logger.debug(
                    "No route from %r to %r: %s", origin, destination, element.get("status")
                )
                duration = distance = NOT_AVAILABLE
            results.append(
                DistanceResult(
                    origin=origin,
                    destination=destination,
                    duration=duration,
                    distance=distance,
                )
            )
    return results
