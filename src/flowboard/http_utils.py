"""HTTP utilities for JSON requests with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
from typing import Any, Final

import httpx

from flowboard.config import (
    FLOWBOARD_FETCH_BACKOFF_S,
    FLOWBOARD_FETCH_MAX_RETRIES,
    FLOWBOARD_FETCH_TIMEOUT_S,
    FLOWBOARD_USER_AGENT,
)
from flowboard.exceptions import RemoteStoreError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def request_json_with_retries(
    method: str,
    url: str,
    *,
    json_body: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
    error_class: type[RemoteStoreError] = RemoteStoreError,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> Any:
    """Send a JSON request, retrying transient failures.

    Args:
        method: HTTP method, e.g. "GET" or "PUT".
        url: The URL to call.
        json_body: Optional JSON payload for the request body.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        error_class: Exception raised when the request keeps failing or the
            response body is not JSON.
        on_404: Custom exception class to raise on 404. Defaults to error_class.
        on_404_message: Custom error message for 404 responses.

    Returns:
        The decoded JSON response body.

    Raises:
        RemoteStoreError (error_class, or on_404 for 404 responses): If the
            request fails after all retries, or at once for a 4xx response
            outside RETRY_STATUS_CODES.
    """
    timeout = httpx.Timeout(FLOWBOARD_FETCH_TIMEOUT_S)
    headers = {"User-Agent": FLOWBOARD_USER_AGENT, "Accept": "application/json"}
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or error_class

    async def do_request(http_client: httpx.AsyncClient) -> Any:
        nonlocal last_exc

        for attempt in range(FLOWBOARD_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.request(method, url, json=json_body)

                if response.status_code == 404:
                    message = on_404_message or f"Resource not found at {url}"
                    raise not_found_exc_class(message)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = error_class(f"HTTP {response.status_code} from {method} {url}")
                elif 400 <= response.status_code < 500:
                    raise error_class(f"HTTP {response.status_code} from {method} {url}")
                else:
                    response.raise_for_status()
                    try:
                        return response.json()
                    except ValueError as exc:
                        raise error_class(f"Invalid JSON from {method} {url}: {exc}") from exc
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < FLOWBOARD_FETCH_MAX_RETRIES:
                backoff = FLOWBOARD_FETCH_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        raise error_class(f"{method} {url} failed: {last_exc}")

    if client is not None:
        return await do_request(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_request(new_client)
