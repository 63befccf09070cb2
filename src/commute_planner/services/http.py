"""
Shared HTTP client for the geocoding and routing backends.

Provides a pre-configured ``requests.Session`` with a default timeout, an
identifying User-Agent (Nominatim rejects anonymous clients) and a urllib3
retry adapter. Retries default to zero: every geocode or route call is a
single outbound request, and failures are reported to the caller instead.

Usage::

    from commute_planner.services.http import session

    resp = session.get("https://router.project-osrm.org/route/v1/...")
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from commute_planner import __version__

USER_AGENT = f"commute-planner/{__version__}"

DEFAULT_TIMEOUT = 15  # seconds


def build_retry(total: int = 0) -> Retry:
    """Retry strategy for transient errors (timeouts, resets, 429/502/503/504)."""
    return Retry(
        total=total,
        backoff_factor=1,  # 0s, 1s, 2s, 4s between retries
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,  # callers inspect the status themselves
    )


#: One attempt per request.
DEFAULT_RETRY = build_retry(0)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: Value of the ``User-Agent`` header.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent
    s.headers["Accept"] = "application/json"

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session; import and use directly.
session: requests.Session = create_session()
