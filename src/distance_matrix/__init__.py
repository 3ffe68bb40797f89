"""Distance Matrix - travel distance and time between sets of locations.

Architecture::

    options.py     Closed vocabularies (mode, units, avoid, ...) + OptionSet
    locations.py   Address / Coordinate descriptors, malformed-input policy
    request.py     Origins + destinations + options -> request URL
    response.py    JSON/XML decoding, matrix -> DistanceResult list
    client.py      DistanceMatrix facade (the one network call)
    config.py      Environment settings (DISTANCE_MATRIX_*)
    services/      Shared HTTP session
    cli.py         ``distance-matrix`` command

Data flow: caller input -> OptionSet (at construction) -> build_request
-> HTTP GET -> decode_response -> check_status -> check_matrix -> map_results
-> list[DistanceResult]
"""

__version__ = "0.1.0"

from distance_matrix.client import DistanceMatrix
from distance_matrix.config import Settings
from distance_matrix.errors import (
    ConfigurationError,
    DistanceMatrixError,
    EmptyPayloadError,
    MalformedElementWarning,
    ServiceStatusError,
    TransportError,
    ValidationError,
)
from distance_matrix.locations import Address, Coordinate
from distance_matrix.options import Avoid, Language, Mode, OptionSet, OutputFormat, Sensor, Units
from distance_matrix.schemas import DistanceResult

__all__ = [
    "Address",
    "Avoid",
    "ConfigurationError",
    "Coordinate",
    "DistanceMatrix",
    "DistanceMatrixError",
    "DistanceResult",
    "EmptyPayloadError",
    "Language",
    "MalformedElementWarning",
    "Mode",
    "OptionSet",
    "OutputFormat",
    "Sensor",
    "ServiceStatusError",
    "Settings",
    "TransportError",
    "Units",
    "ValidationError",
    "__version__",
]
