"""Pydantic models describing the Subsonic ``search3`` payload."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SubsonicBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AlbumPayload(SubsonicBaseModel):
    name: str
    artist: str = ""


class SearchResult3(SubsonicBaseModel):
    album: list[AlbumPayload] = Field(default_factory=list)


class ErrorPayload(SubsonicBaseModel):
    code: int
    message: str = ""


class SubsonicEnvelope(SubsonicBaseModel):
    status: Literal["ok", "failed"] = "ok"
    version: str | None = None
    error: ErrorPayload | None = None
    search_result3: SearchResult3 = Field(default_factory=SearchResult3, alias="searchResult3")


class SearchResponse(SubsonicBaseModel):
    subsonic_response: SubsonicEnvelope = Field(alias="subsonic-response")


AlbumPayloadInput = AlbumPayload | Mapping[str, object]
