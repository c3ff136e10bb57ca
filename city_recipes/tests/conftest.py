from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from city_recipes.app import app, get_gateway, get_store
from city_recipes.recipes.store import RecipeStore

PARIS_INSIGHTS = {
    "coordinates": [{"latitude": 48.8566, "longitude": 2.3522}],
    "population": 2148000,
    "knownFor": [
        {"content": "Eiffel Tower", "source": "wiki"},
        {"content": "Louvre Museum", "source": "wiki"},
    ],
}

PARIS_PREDICTIONS = [
    {"when": "2025-01-01", "minTemperature": 3, "maxTemperature": 9.5},
    {"when": "2025-01-02", "minTemperature": -1, "maxTemperature": 6},
    {"when": "2025-01-03", "minTemperature": 0, "maxTemperature": 4},
]


class FakeGateway:
    """Stands in for ``CityDataGateway`` with canned upstream payloads."""

    def __init__(
        self,
        cities: dict[str, dict[str, Any]] | None = None,
        weather: dict[str, list[dict[str, Any]]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.cities = cities or {}
        self.weather = weather or {}
        self.error = error

    def _raise_if_broken(self) -> None:
        if self.error is not None:
            raise self.error

    async def city_exists(self, city_id: str) -> bool:
        self._raise_if_broken()
        return city_id in self.cities

    async def fetch_city_insights(self, city_id: str) -> dict[str, Any] | None:
        self._raise_if_broken()
        return self.cities.get(city_id)

    async def fetch_weather_predictions(self, city_id: str) -> list[dict[str, Any]]:
        self._raise_if_broken()
        return self.weather.get(city_id, [])


@pytest.fixture
def store() -> RecipeStore:
    return RecipeStore()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway(
        cities={"42": PARIS_INSIGHTS, "7": PARIS_INSIGHTS},
        weather={"42": PARIS_PREDICTIONS},
    )


@pytest.fixture
def client(store, gateway):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()
