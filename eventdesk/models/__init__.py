from .event import Event, EventCreate, EventUpdate, EventRead
from .artist import Artist, ArtistCreate, ArtistUpdate, ArtistRead
from .resource import Resource, ResourceCreate, EventResourceCreate, ResourceUpdate, ResourceRead
from .relations import EventReadWithRelations, ArtistReadWithEvent, ResourceReadWithEvent
from .user import User, LoginRequest, TokenResponse, TokenData


__all__ = [
    "Event",
    "EventCreate",
    "EventUpdate",
    "EventRead",
    "EventReadWithRelations",
    "Artist",
    "ArtistCreate",
    "ArtistUpdate",
    "ArtistRead",
    "ArtistReadWithEvent",
    "Resource",
    "ResourceCreate",
    "EventResourceCreate",
    "ResourceUpdate",
    "ResourceRead",
    "ResourceReadWithEvent",
    "User",
    "LoginRequest",
    "TokenResponse",
    "TokenData",
]
