"""
Google Distance Matrix API client.

API docs: https://developers.google.com/maps/documentation/distance-matrix

The service returns travel distance and time for every origin/destination
pair, based on the recommended route between them. Usage limits are
enforced by the service, not by this client; only the per-request limit is
checked, and exceeding it logs a warning:

  - ``MAX_ELEMENTS_PER_REQUEST``: 100 elements per request
  - ``MAX_ELEMENTS_PER_10_SECONDS``: 100 elements per 10 seconds
  - ``MAX_ELEMENTS_PER_DAY``: 2500 elements per 24 hours

Example::

    from distance_matrix import DistanceMatrix

    client = DistanceMatrix(api_key="...", units="imperial")
    for result in client.get_distance(o_addr=["Vancouver+BC"], d_addr=["Victoria+BC"]):
        print(result.as_string())
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import requests

from distance_matrix.config import BASE_URL, get_settings
from distance_matrix.errors import ConfigurationError, TransportError
from distance_matrix.options import OptionSet
from distance_matrix.request import DistanceRequest, build_request
from distance_matrix.response import check_matrix, check_status, decode_response, map_results
from distance_matrix.services.http import create_session, session as default_session

if TYPE_CHECKING:
    from distance_matrix.config import Settings
    from distance_matrix.schemas import DistanceResult

logger = logging.getLogger(__name__)

# Service quotas, in origin x destination elements.
MAX_ELEMENTS_PER_REQUEST = 100
MAX_ELEMENTS_PER_10_SECONDS = 100
MAX_ELEMENTS_PER_DAY = 2500




class DistanceMatrix:
    """Client for the distance matrix endpoint.

    Options are validated once, here, and stay fixed for the lifetime of
    the instance. Each ``get_distance`` call is independent.

    Args:
        api_key: Service API key. Required.
        mode: ``driving`` (default), ``walking`` or ``bicycling``.
        units: ``metric`` (default) or ``imperial``.
        avoid: ``tolls``, ``highways`` or None for no restriction.
        language: Language code for the results (default ``en``).
        sensor: Whether the locations come from a device sensor.
        output: ``json`` (default) or ``xml``.
        session: HTTP session to use (defaults to the shared session).
        base_url: Endpoint without the output format segment.

    Raises:
        ConfigurationError: Missing API key or an option outside its vocabulary.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        mode: str = "driving",
        units: str = "metric",
        avoid: str | None = None,
        language: str = "en",
        sensor: bool | str = False,
        output: str = "json",
        session: requests.Session | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        if not api_key or not str(api_key).strip():
            raise ConfigurationError("api_key", api_key, message="missing mandatory param: api_key")
        self.api_key = api_key
        self.options = OptionSet(
            mode=mode,
            units=units,
            avoid=avoid,
            language=language,
            sensor=sensor,
            output=output,
        )
        self.session = session if session is not None else default_session
        self.base_url = base_url

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> DistanceMatrix:
        """Build a client from environment settings; keyword overrides win."""
        if settings is None:
            settings = get_settings()

        kwargs: dict[str, Any] = {
            "api_key": settings.api_key,
            "base_url": settings.base_url,
            **settings.option_values(),
        }
        if "session" not in overrides:
            kwargs["session"] = create_session(timeout=settings.timeout)
        kwargs.update(overrides)
        return cls(**kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(options={self.options!r})"

    def build_request(
        self,
        o_addr: str | Sequence[str] | None = None,
        o_latlng: str | Sequence[str] | None = None,
        d_addr: str | Sequence[str] | None = None,
        d_latlng: str | Sequence[str] | None = None,
    ) -> DistanceRequest:
        """Validate inputs against this client's options without sending anything."""
        return build_request(
            self.options, o_addr=o_addr, o_latlng=o_latlng, d_addr=d_addr, d_latlng=d_latlng
        )

    def url(self, request: DistanceRequest) -> str:
        return request.url(self.api_key, self.base_url)

    def get_distance(
        self,
        o_addr: str | Sequence[str] | None = None,
        o_latlng: str | Sequence[str] | None = None,
        d_addr: str | Sequence[str] | None = None,
        d_latlng: str | Sequence[str] | None = None,
    ) -> list[DistanceResult]:
        """
        Fetch travel duration and distance for every origin/destination pair.

        Origins are ``o_addr`` followed by ``o_latlng``; destinations are
        ``d_addr`` followed by ``d_latlng``. Each accepts one string or a
        sequence of strings. Coordinates are ``"lat,lng"`` with no spaces.

        Returns:
            One ``DistanceResult`` per pair, row-major (origin-major).

        Raises:
            ValidationError: Missing/invalid origins or destinations. Nothing is sent.
            TransportError: Network failure, HTTP error, or a refused request.
            EmptyPayloadError: The response body could not be decoded or has no matrix.
        """
        request = self.build_request(o_addr, o_latlng, d_addr, d_latlng)
        if request.element_count > MAX_ELEMENTS_PER_REQUEST:
            logger.warning(
                "Request has %d elements; the service allows %d per request",
                request.element_count,
                MAX_ELEMENTS_PER_REQUEST,
            )

        logger.debug("GET %s", request.redacted_url(self.base_url))
        try:
            resp = self.session.get(self.url(request))
            resp.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise TransportError(
                f"distance matrix request failed with HTTP {status_code}",
                status_code=status_code,
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(f"distance matrix request failed: {exc}") from exc

        payload = decode_response(resp, self.options.output)
        check_status(payload)
        check_matrix(payload)
        results = map_results(payload)
        logger.debug("Got %d results for %d elements", len(results), request.element_count)
        return results
