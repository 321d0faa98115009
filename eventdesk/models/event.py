from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from pydantic import ConfigDict, field_validator
from sqlmodel import Field, Relationship, SQLModel

from eventdesk.database.types import UTCDateTime
from .validators import parse_event_date, reject_null

if TYPE_CHECKING:
    from .artist import Artist
    from .resource import Resource


class EventBase(SQLModel):
    name: str
    location: Optional[str] = None
    forecast: Optional[str] = None
    start_date: datetime = Field(sa_type=UTCDateTime)
    end_date: datetime = Field(sa_type=UTCDateTime)
    budget: Optional[float] = None


class Event(EventBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # passive_deletes="all": ORM не обнуляет event_id у дочерних записей,
    # судьбу зависимостей решает политика удаления и внешний ключ
    artists: List["Artist"] = Relationship(
        back_populates="event",
        sa_relationship_kwargs={"passive_deletes": "all"}
    )
    resources: List["Resource"] = Relationship(
        back_populates="event",
        sa_relationship_kwargs={"passive_deletes": "all"}
    )


class EventCreate(EventBase):
    model_config = ConfigDict(extra="forbid")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return parse_event_date(v)


class EventUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    location: Optional[str] = None
    forecast: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[float] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return parse_event_date(v)

    @field_validator("name", "start_date", "end_date")
    @classmethod
    def validate_required(cls, v):
        return reject_null(v)


class EventRead(EventBase):
    id: int
