"""Shared GET-and-decode helper for the Open-Meteo clients."""

import logging
from typing import Any

import httpx

from glasscast import __version__
from glasscast.models.errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"glasscast/{__version__}"


async def get_json(
    url: str,
    params: dict[str, Any],
    timeout: float,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Any:
    """GET a JSON document.

    Raises NetworkError on transport failure or an error status, DecodeError
    when the body is not JSON. No retries.
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
    except httpx.RequestError as e:
        logger.error("GET %s failed: %s", url, e)
        raise NetworkError(f"Request failed: {e}") from e

    if resp.status_code >= 400:
        logger.error("GET %s returned %d: %s", url, resp.status_code, resp.text)
        raise NetworkError(f"HTTP {resp.status_code}", resp.status_code)

    try:
        return resp.json()
    except ValueError as e:
        logger.error("GET %s returned a non-JSON body", url)
        raise DecodeError("Malformed response body") from e
