"""
Shared HTTP client for talking to the distance matrix service.

Provides a pre-configured ``requests.Session`` with a default timeout and a
project User-Agent. The default retry policy is *no* retries: failures are
surfaced to the caller as ``TransportError`` and the service quotas are not
burned on repeats. Pass a ``Retry`` to ``create_session`` to opt in.

Usage::

    from distance_matrix.services.http import session

    resp = session.get("https://maps.googleapis.com/maps/api/distancematrix/json?...")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from distance_matrix import __version__

#: Default retry strategy: fail fast, let ``resp.raise_for_status()`` report.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"distance-matrix/{__version__} (python-requests)"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send so every request gets a timeout unless the caller passed one.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, used by clients that are not given their own.
session: requests.Session = create_session()
