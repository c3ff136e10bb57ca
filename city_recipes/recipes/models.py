from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..errors import ErrorKind

CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 2000


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    content: str


def validate_content(content: Any) -> ErrorKind | None:
    """Return the first content rule that fails, or ``None`` when valid."""
    if not content or not isinstance(content, str):
        return ErrorKind.content_required
    if len(content) < CONTENT_MIN_LENGTH:
        return ErrorKind.content_too_short
    if len(content) > CONTENT_MAX_LENGTH:
        return ErrorKind.content_too_long
    return None
