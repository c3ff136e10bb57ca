from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..recipes.models import Recipe


class ForecastDay(str, Enum):
    today = "today"
    tomorrow = "tomorrow"


class WeatherPrediction(BaseModel):
    when: ForecastDay
    min: float = 0
    max: float = 0


class CityInfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    coordinates: tuple[float, float] = Field(..., description="Latitude, longitude")
    population: int
    known_for: list[str] = Field(default_factory=list, alias="knownFor")
    weather_predictions: list[WeatherPrediction] = Field(
        ..., alias="weatherPredictions", min_length=2, max_length=2
    )
    recipes: list[Recipe] = Field(default_factory=list)
