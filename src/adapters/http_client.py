"""httpx wrapper.

- Standardizes timeouts, headers and JSON decoding for every upstream.
- Tests swap the network for an `httpx.MockTransport` through `transport`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import UpstreamError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the project defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_json(client: httpx.AsyncClient, url: str, **params: Any) -> Any:
    """GET `url` and decode its JSON body.

    Raises `UpstreamError` on transport failures, non-2xx statuses and
    bodies that are not JSON.
    """

    try:
        response = await client.get(url, params=params or None)
    except httpx.HTTPError as exc:
        raise UpstreamError(f"request failed: {exc}", url=url) from exc

    if response.status_code < 200 or response.status_code >= 300:
        raise UpstreamError(
            f"HTTP {response.status_code}",
            url=str(response.url),
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamError("response is not JSON", url=str(response.url)) from exc
