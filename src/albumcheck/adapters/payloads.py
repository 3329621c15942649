"""Decode JSON response bodies into pydantic models."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from albumcheck.domain.errors import PayloadError

if TYPE_CHECKING:
    import httpx


def parse_json(response: httpx.Response, *, source: str) -> object:
    try:
        return response.json()
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PayloadError(f"{source} response is not valid JSON") from exc


def validate_payload[M: BaseModel](model: type[M], payload: object, *, source: str) -> M:
    """Validate ``payload`` against ``model``.

    The error message lists field locations and reasons only. Payload values and list
    indices never end up in it, so the text cannot trip error classification.
    """

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{_location(error['loc'])}: {error['msg']}"
            for error in exc.errors(include_input=False, include_url=False)
        )
        raise PayloadError(f"unexpected {source} payload: {problems}") from exc


def _location(loc: tuple[int | str, ...]) -> str:
    return ".".join(part for part in loc if isinstance(part, str)) or "<root>"
