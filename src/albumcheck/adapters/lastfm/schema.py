"""Pydantic models describing the Last.fm top-albums payload."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class LastFmBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ArtistPayload(LastFmBaseModel):
    name: str


class AlbumPayload(LastFmBaseModel):
    name: str
    artist: ArtistPayload
    url: str


class TopAlbums(LastFmBaseModel):
    album: list[AlbumPayload]


class TopAlbumsResponse(LastFmBaseModel):
    topalbums: TopAlbums


class ErrorResponse(LastFmBaseModel):
    error: int
    message: str = Field(default="")


AlbumPayloadInput = AlbumPayload | Mapping[str, object]
