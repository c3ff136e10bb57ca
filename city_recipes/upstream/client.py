from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from .config import DEFAULT_UPSTREAM_CONFIG, UpstreamConfig

logger = logging.getLogger(__name__)


def create_http_client(config: UpstreamConfig = DEFAULT_UPSTREAM_CONFIG) -> httpx.AsyncClient:
    """Build the shared async HTTP client pointed at the upstream API."""
    return httpx.AsyncClient(
        base_url=config.base_url,
        timeout=config.timeout,
        follow_redirects=True,
    )


class CityDataGateway:
    """Read-only access to upstream city insights and weather predictions."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: UpstreamConfig = DEFAULT_UPSTREAM_CONFIG,
    ) -> None:
        self._client = client
        self._config = config

    async def _get_insights(self, city_id: str) -> httpx.Response | None:
        response = await self._client.get(
            f"/cities/{quote(city_id, safe='')}/insights",
            params={"apiKey": self._config.api_key},
        )
        if not response.is_success:
            # Every non-success status collapses to "not found"
            logger.warning(
                "Upstream insights for city %r answered %s, treating as not found",
                city_id,
                response.status_code,
            )
            return None
        return response

    async def city_exists(self, city_id: str) -> bool:
        return await self._get_insights(city_id) is not None

    async def fetch_city_insights(self, city_id: str) -> dict[str, Any] | None:
        """
        Fetch the insights payload for a city.

        Returns ``None`` for any non-success upstream status, which callers
        treat as "city not found". Network errors propagate.
        """
        response = await self._get_insights(city_id)
        return None if response is None else response.json()

    async def fetch_weather_predictions(self, city_id: str) -> list[dict[str, Any]]:
        """
        Fetch the daily predictions for a city, nearest day first.

        An empty list means no forecast is available; it is never an error.
        """
        response = await self._client.get(
            "/weather-predictions",
            params={"cityIdentifier": city_id, "apiKey": self._config.api_key},
        )
        if not response.is_success:
            logger.warning(
                "Upstream weather for city %r answered %s, using empty forecast",
                city_id,
                response.status_code,
            )
            return []

        if not response.content:
            return []
        try:
            payload = response.json()
        except ValueError:
            logger.warning(
                "Upstream weather for city %r is not JSON, using empty forecast",
                city_id,
            )
            return []
        if not isinstance(payload, list) or not payload:
            return []
        first = payload[0]
        predictions = first.get("predictions") if isinstance(first, dict) else None
        return predictions if isinstance(predictions, list) else []
