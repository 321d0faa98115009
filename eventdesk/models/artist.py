# models/artist.py
from typing import TYPE_CHECKING, Optional

from pydantic import ConfigDict, field_validator
from sqlmodel import Field, Relationship, SQLModel

from .validators import reject_null

if TYPE_CHECKING:
    from .event import Event


class ArtistBase(SQLModel):
    name: str
    surname: Optional[str] = None
    genre: Optional[str] = None
    contact_info: Optional[str] = None
    available_date: Optional[str] = None
    event_id: int = Field(foreign_key="event.id", index=True)


class Artist(ArtistBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    event: Optional["Event"] = Relationship(back_populates="artists")


class ArtistCreate(ArtistBase):
    model_config = ConfigDict(extra="forbid")


class ArtistUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    surname: Optional[str] = None
    genre: Optional[str] = None
    contact_info: Optional[str] = None
    available_date: Optional[str] = None
    event_id: Optional[int] = None

    @field_validator("name", "event_id")
    @classmethod
    def validate_required(cls, v):
        return reject_null(v)


class ArtistRead(ArtistBase):
    id: int
