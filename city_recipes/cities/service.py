from __future__ import annotations

import re
from typing import Any

from ..errors import ErrorKind
from ..recipes.models import Recipe, validate_content
from ..recipes.store import RecipeStore
from ..upstream.client import CityDataGateway
from .models import CityInfoResponse, ForecastDay, WeatherPrediction

# Leading integer, the way a lenient parser reads "12", " 12", "12abc"
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _temperature(prediction: Any, key: str) -> float:
    if not isinstance(prediction, dict):
        return 0
    value = prediction.get(key)
    return 0 if value is None else value


def _build_forecast(predictions: list[Any]) -> list[WeatherPrediction]:
    """Always two entries, today then tomorrow, zero-filled when data is missing."""
    forecast = []
    for index, day in enumerate((ForecastDay.today, ForecastDay.tomorrow)):
        prediction = predictions[index] if index < len(predictions) else None
        forecast.append(
            WeatherPrediction(
                when=day,
                min=_temperature(prediction, "minTemperature"),
                max=_temperature(prediction, "maxTemperature"),
            )
        )
    return forecast


def parse_recipe_id(raw: str) -> int | None:
    """Read the leading integer of a path segment, ``None`` if there is none."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


async def get_city_info(
    city_id: str,
    store: RecipeStore,
    gateway: CityDataGateway,
) -> CityInfoResponse | ErrorKind:
    insights = await gateway.fetch_city_insights(city_id)
    if insights is None:
        return ErrorKind.city_not_found

    # Upstream shape is trusted: a missing key surfaces as an internal error
    coord = insights["coordinates"][0]
    known_for = [fact["content"] for fact in insights["knownFor"]]

    predictions = await gateway.fetch_weather_predictions(city_id)

    return CityInfoResponse(
        coordinates=(coord["latitude"], coord["longitude"]),
        population=insights["population"],
        known_for=known_for,
        weather_predictions=_build_forecast(predictions),
        recipes=store.list_recipes(city_id),
    )


async def create_recipe(
    city_id: str,
    payload: Any,
    store: RecipeStore,
    gateway: CityDataGateway,
) -> Recipe | ErrorKind:
    if not await gateway.city_exists(city_id):
        return ErrorKind.city_not_found

    content = payload.get("content") if isinstance(payload, dict) else None
    error = validate_content(content)
    if error is not None:
        return error

    return store.add(city_id, content)


async def delete_recipe(
    city_id: str,
    raw_recipe_id: str,
    store: RecipeStore,
    gateway: CityDataGateway,
) -> ErrorKind | None:
    """Delete one recipe. Returns ``None`` on success."""
    if not await gateway.city_exists(city_id):
        return ErrorKind.city_not_found

    if not store.has_collection(city_id):
        return ErrorKind.no_recipes_for_city

    recipe_id = parse_recipe_id(raw_recipe_id)
    if recipe_id is None or not store.remove(city_id, recipe_id):
        return ErrorKind.recipe_not_found

    return None
