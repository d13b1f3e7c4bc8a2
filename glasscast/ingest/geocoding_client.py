"""Open-Meteo geocoding client: place text to coordinates."""

import logging

from glasscast.config.defaults import GEOCODING_URL
from glasscast.ingest.fetch import get_json
from glasscast.models.errors import DecodeError, NotFoundError
from glasscast.models.location import Location

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
SUGGESTION_LIMIT = 5


class GeocodingClient:
    def __init__(
        self,
        base_url: str = GEOCODING_URL,
        timeout: float = 10.0,
        language: str = "en",
        min_query_length: int = MIN_QUERY_LENGTH,
        suggestion_limit: int = SUGGESTION_LIMIT,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.language = language
        self.min_query_length = min_query_length
        self.suggestion_limit = suggestion_limit

    async def suggest(self, query: str) -> list[Location]:
        """Return up to `suggestion_limit` candidate matches, best first.

        Queries shorter than `min_query_length` return [] without a request.
        """
        if len(query) < self.min_query_length:
            return []
        results = await self._search(query, self.suggestion_limit)
        return [_parse_location(r) for r in results[: self.suggestion_limit]]

    async def resolve(self, query: str) -> Location:
        """Return the single best match for `query`."""
        results = await self._search(query, 1)
        if not results:
            logger.info("No geocoding match for %r", query)
            raise NotFoundError("City not found.")
        return _parse_location(results[0])

    async def _search(self, query: str, count: int) -> list[dict]:
        data = await get_json(
            self.base_url,
            params={
                "name": query,
                "count": count,
                "language": self.language,
                "format": "json",
            },
            timeout=self.timeout,
        )
        if not isinstance(data, dict):
            raise DecodeError("Malformed geocoding response")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise DecodeError("Malformed geocoding response")
        return results


def _parse_location(raw: dict) -> Location:
    try:
        return Location(
            name=str(raw["name"]),
            latitude=float(raw["latitude"]),
            longitude=float(raw["longitude"]),
            region=raw.get("admin1"),
            country_code=raw.get("country_code"),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError(f"Malformed geocoding result: {e}") from e
