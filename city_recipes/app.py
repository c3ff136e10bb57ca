from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request, Response

from .cities.models import CityInfoResponse
from .cities.service import create_recipe, delete_recipe, get_city_info
from .errors import ErrorKind, ErrorResponse, error_response
from .recipes.models import Recipe
from .recipes.store import RecipeStore
from .upstream.client import CityDataGateway, create_http_client
from .upstream.config import DEFAULT_UPSTREAM_CONFIG

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one upstream HTTP client for the lifetime of the app."""
    async with create_http_client(DEFAULT_UPSTREAM_CONFIG) as client:
        app.state.gateway = CityDataGateway(client, DEFAULT_UPSTREAM_CONFIG)
        yield


app = FastAPI(
    title="City Recipes API",
    description="City insights, weather predictions and recipes per city",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/",
    openapi_url="/json",
    redoc_url=None,
    openapi_tags=[
        {"name": "Cities", "description": "City snapshot from upstream data"},
        {"name": "Recipes", "description": "User-submitted recipes per city"},
    ],
)
app.state.recipe_store = RecipeStore()

_ERROR_RESPONSES = {404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def get_store(request: Request) -> RecipeStore:
    return request.app.state.recipe_store


def get_gateway(request: Request) -> CityDataGateway:
    return request.app.state.gateway


async def _read_json_body(request: Request) -> Any:
    """Parsed JSON body, or ``None`` when the body is empty or not JSON."""
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health", include_in_schema=False)
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── City endpoints ───────────────────────────────────────────────────────


@app.get(
    "/cities/{city_id}/infos",
    response_model=CityInfoResponse,
    tags=["Cities"],
    responses=_ERROR_RESPONSES,
)
async def city_infos(
    city_id: str,
    store: RecipeStore = Depends(get_store),
    gateway: CityDataGateway = Depends(get_gateway),
):
    """Coordinates, population, facts, two-day forecast and recipes of a city."""
    try:
        result = await get_city_info(city_id, store, gateway)
    except Exception:
        logger.exception("Building infos for city %r failed", city_id)
        return error_response(ErrorKind.internal_error)

    if isinstance(result, ErrorKind):
        return error_response(result)
    return result


# ── Recipe endpoints ─────────────────────────────────────────────────────


@app.post(
    "/cities/{city_id}/recipes",
    response_model=Recipe,
    status_code=201,
    tags=["Recipes"],
    responses={400: {"model": ErrorResponse}, **_ERROR_RESPONSES},
)
async def add_recipe(
    city_id: str,
    request: Request,
    store: RecipeStore = Depends(get_store),
    gateway: CityDataGateway = Depends(get_gateway),
):
    """Store a recipe (10 to 2000 characters of ``content``) for a city."""
    try:
        payload = await _read_json_body(request)
        result = await create_recipe(city_id, payload, store, gateway)
    except Exception:
        logger.exception("Creating recipe for city %r failed", city_id)
        return error_response(ErrorKind.internal_error)

    if isinstance(result, ErrorKind):
        return error_response(result)
    return result


@app.delete(
    "/cities/{city_id}/recipes/{recipe_id}",
    status_code=204,
    response_class=Response,
    tags=["Recipes"],
    responses=_ERROR_RESPONSES,
)
async def remove_recipe(
    city_id: str,
    recipe_id: str,
    store: RecipeStore = Depends(get_store),
    gateway: CityDataGateway = Depends(get_gateway),
):
    """Delete one recipe of a city by its id."""
    try:
        error = await delete_recipe(city_id, recipe_id, store, gateway)
    except Exception:
        logger.exception("Deleting recipe %r of city %r failed", recipe_id, city_id)
        return error_response(ErrorKind.internal_error)

    if error is not None:
        return error_response(error)
    return Response(status_code=204)
