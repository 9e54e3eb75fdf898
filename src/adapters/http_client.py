"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect policy in one place.
- Makes testing easy: a `transport` (e.g. `httpx.MockTransport`) can be
  injected instead of touching the network.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with sane defaults.

    The client is synchronous: the program makes exactly one blocking request.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
