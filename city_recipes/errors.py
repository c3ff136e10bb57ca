from __future__ import annotations

from enum import Enum

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Expected failure of a request, with the status and message it maps to."""

    city_not_found = "city_not_found"
    content_required = "content_required"
    content_too_short = "content_too_short"
    content_too_long = "content_too_long"
    no_recipes_for_city = "no_recipes_for_city"
    recipe_not_found = "recipe_not_found"
    internal_error = "internal_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.city_not_found: 404,
    ErrorKind.content_required: 400,
    ErrorKind.content_too_short: 400,
    ErrorKind.content_too_long: 400,
    ErrorKind.no_recipes_for_city: 404,
    ErrorKind.recipe_not_found: 404,
    ErrorKind.internal_error: 500,
}

_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.city_not_found: "City not found",
    ErrorKind.content_required: "Content is required",
    ErrorKind.content_too_short: "Content too short (min 10 characters)",
    ErrorKind.content_too_long: "Content too long (max 2000 characters)",
    ErrorKind.no_recipes_for_city: "No recipes for this city",
    ErrorKind.recipe_not_found: "Recipe not found",
    ErrorKind.internal_error: "Internal Server Error",
}


class ErrorResponse(BaseModel):
    error: str


def error_response(kind: ErrorKind) -> JSONResponse:
    """Render an error kind as ``{"error": message}`` with its status code."""
    return JSONResponse(status_code=kind.status_code, content={"error": kind.message})
