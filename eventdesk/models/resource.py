from typing import TYPE_CHECKING, Optional

from pydantic import ConfigDict, field_validator
from sqlmodel import Field, Relationship, SQLModel

from .validators import reject_null

if TYPE_CHECKING:
    from .event import Event


class ResourceBase(SQLModel):
    name: str
    rented: bool = Field(default=False)
    quantity: Optional[int] = None


class Resource(ResourceBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="event.id", index=True)

    event: Optional["Event"] = Relationship(back_populates="resources")


class ResourceCreate(SQLModel):
    """Создание ресурса через общую коллекцию /resources, rented обязателен"""
    model_config = ConfigDict(extra="forbid")

    name: str
    rented: bool
    quantity: Optional[int] = None
    event_id: int


class EventResourceCreate(ResourceBase):
    """Создание ресурса внутри мероприятия, event_id подставляет сервер"""
    model_config = ConfigDict(extra="forbid")


class ResourceUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    rented: Optional[bool] = None
    quantity: Optional[int] = None
    event_id: Optional[int] = None

    @field_validator("name", "rented", "event_id")
    @classmethod
    def validate_required(cls, v):
        return reject_null(v)


class ResourceRead(ResourceBase):
    id: int
    event_id: int
