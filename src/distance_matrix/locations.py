"""
Origin and destination descriptors.

A location is either a free-text ``Address`` or a ``Coordinate`` pair. The
two are never confused: a string with a comma that is not a valid
``lat,lng`` pair is rejected as a coordinate rather than passed on as an
address.

Malformed coordinates are handled by one of two policies, depending on how
they arrive:

- a single string (``o_latlng="-1.50,"``) raises ``ValidationError``;
- an element of a list (``o_latlng=["-1.50,", "49.2,-123.1"]``) emits a
  ``MalformedElementWarning`` naming the literal and is dropped; the rest of
  the list is kept.
"""

from __future__ import annotations

import os
import re
import sys
import warnings
from collections.abc import Sequence
from dataclasses import dataclass

from distance_matrix.errors import MalformedElementWarning, ValidationError

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep

# Integer or decimal, optional leading minus, at least one digit before the point.
_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


@dataclass(frozen=True)
class Address:
    """A free-form address, e.g. ``"Vancouver+BC"``."""

    text: str

    @property
    def query_value(self) -> str:
        return self.text


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair, keeping the literal it was parsed from."""

    lat: float
    lng: float
    literal: str

    @property
    def query_value(self) -> str:
        return self.literal


LocationDescriptor = Address | Coordinate


def parse_coordinate(raw: str) -> Coordinate | None:
    """Parse ``"lat,lng"`` into a Coordinate. Returns None if malformed.

    The string must hold exactly one comma with a number on each side;
    whitespace is not allowed.
    """
    if not isinstance(raw, str) or raw.count(",") != 1:
        return None
    lat, lng = raw.split(",", 1)
    if not (_NUMBER.fullmatch(lat) and _NUMBER.fullmatch(lng)):
        return None
    return Coordinate(lat=float(lat), lng=float(lng), literal=raw)


def is_coordinate(raw: str) -> bool:
    return parse_coordinate(raw) is not None


def collect_addresses(value: str | Sequence[str] | None, side: str) -> list[Address]:
    """Normalize a scalar or sequence of addresses.

    Args:
        value: One address, a sequence of addresses, or None.
        side: ``"origins"`` or ``"destinations"``, used in error messages.
    """
    if value is None:
        return []
    items = [value] if isinstance(value, str) else list(value)
    addresses = []
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise ValidationError(f"invalid address for {side}: {item!r}")
        addresses.append(Address(item))
    return addresses


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside this package, for ``warnings.warn``.

    Counted from the function that calls this one.
    """
    level = 1
    frame = sys._getframe(1)
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(
        _PACKAGE_DIR
    ):
        frame = frame.f_back
        level += 1
    return level


def collect_coordinates(value: str | Sequence[str] | None, side: str) -> list[Coordinate]:
    """Normalize a scalar or sequence of ``"lat,lng"`` strings.

    A malformed scalar raises ``ValidationError``; malformed sequence
    elements are warned about and dropped.
    """
    if value is None:
        return []

    if isinstance(value, str):
        coordinate = parse_coordinate(value)
        if coordinate is None:
            raise ValidationError(f"invalid coordinate for {side}: {value!r}")
        return [coordinate]

    coordinates = []
    for item in value:
        coordinate = parse_coordinate(item)
        if coordinate is None:
            warnings.warn(
                f"dropping malformed coordinate for {side}: {item!r}",
                MalformedElementWarning,
                stacklevel=_caller_stacklevel(),
            )
            continue
        coordinates.append(coordinate)
    return coordinates
