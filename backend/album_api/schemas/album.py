"""Album Schemas: Pydantic models for the create payload and album responses.

Invariants:
    - AlbumCreate is strict: a field of the wrong JSON type is a shape error,
      not a coerced value ("795" and 7.95 are rejected for price)
    - Missing or null fields take their zero value ("" or 0) so validation can report them
    - price must fit a signed 64-bit integer, larger numbers are a shape error
    - Unknown fields are ignored
    - AlbumResponse field order is id, title, artist, price
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from album_api.core.domain_types import Album, AlbumId


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class AlbumCreate(BaseModel):
    """Create payload: same shape as an album, every field optional."""
    model_config = ConfigDict(strict=True, extra="ignore")

    id: str = ""
    title: str = ""
    artist: str = ""
    price: int = Field(0, ge=INT64_MIN, le=INT64_MAX)

    @field_validator("id", "title", "artist", "price", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """JSON null means "not given": the field keeps its zero value."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @classmethod
    def from_body(cls, raw: bytes) -> "AlbumCreate":
        """Parse a raw request body; a top-level null is an empty object."""
        if raw.strip() == b"null":
            raw = b"{}"
        return cls.model_validate_json(raw)

    def to_album(self) -> Album:
        return Album(
            id=AlbumId(self.id), title=self.title,
            artist=self.artist, price=self.price,
        )


class AlbumResponse(BaseModel):
    """Album as sent on the wire. Routes drop price when it is zero."""
    id: str
    title: str
    artist: str
    price: int = 0

    @classmethod
    def from_album(cls, album: Album) -> "AlbumResponse":
        return cls(
            id=album.id, title=album.title,
            artist=album.artist, price=album.price,
        )
