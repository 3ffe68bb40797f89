"""
Request building: origins + destinations + options -> request URL.

Origins are the address origins followed by the coordinate origins, each in
input order; destinations likewise. The serialized query always has the
same parameter order, so identical inputs give identical URLs::

    {base}/{json|xml}?key=...&sensor=...[&avoid=...]&units=...&mode=...&language=...
        &origins=o1|o2&destinations=d1|d2
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import quote, urlencode

from distance_matrix.errors import ValidationError
from distance_matrix.locations import LocationDescriptor, collect_addresses, collect_coordinates
from distance_matrix.options import OptionSet

# Kept literal in the query: pipe separates locations, comma separates
# lat/lng, plus is the service's space.
_SAFE_CHARS = "|,+"

_REDACTED_KEY = "REDACTED"


@dataclass(frozen=True)
class DistanceRequest:
    """One distance matrix request, ready to serialize."""

    origins: tuple[LocationDescriptor, ...]
    destinations: tuple[LocationDescriptor, ...]
    options: OptionSet

    @property
    def element_count(self) -> int:
        """Number of origin/destination pairs the service will bill."""
        return len(self.origins) * len(self.destinations)

    def query_params(self, api_key: str) -> list[tuple[str, str]]:
        return [
            ("key", api_key),
            *self.options.query_params(),
            ("origins", "|".join(o.query_value for o in self.origins)),
            ("destinations", "|".join(d.query_value for d in self.destinations)),
        ]

    def url(self, api_key: str, base_url: str) -> str:
        """Full request URL, including the output format path segment."""
        query = urlencode(self.query_params(api_key), safe=_SAFE_CHARS, quote_via=quote)
        return f"{base_url.rstrip('/')}/{self.options.output.value}?{query}"

    def redacted_url(self, base_url: str) -> str:
        """Same as ``url`` with the API key masked, for logs."""
        return self.url(_REDACTED_KEY, base_url)


def build_request(
    options: OptionSet,
    *,
    o_addr: str | Sequence[str] | None = None,
    o_latlng: str | Sequence[str] | None = None,
    d_addr: str | Sequence[str] | None = None,
    d_latlng: str | Sequence[str] | None = None,
) -> DistanceRequest:
    """
    Validate origins/destinations and pair them with ``options``.

    Args:
        options: Validated request options.
        o_addr: Origin address(es).
        o_latlng: Origin ``"lat,lng"`` coordinate(s).
        d_addr: Destination address(es).
        d_latlng: Destination ``"lat,lng"`` coordinate(s).

    Raises:
        ValidationError: No usable origin (checked first) or destination,
            a malformed single coordinate, or a non-string address.
    """
    origins: list[LocationDescriptor] = [
        *collect_addresses(o_addr, "origins"),
        *collect_coordinates(o_latlng, "origins"),
    ]
    if not origins:
        raise ValidationError("missing mandatory param: origins")

    destinations: list[LocationDescriptor] = [
        *collect_addresses(d_addr, "destinations"),
        *collect_coordinates(d_latlng, "destinations"),
    ]
    if not destinations:
        raise ValidationError("missing mandatory param: destinations")

    return DistanceRequest(
        origins=tuple(origins),
        destinations=tuple(destinations),
        options=options,
    )
