from typing import List, Optional

from .artist import ArtistRead
from .event import EventRead
from .resource import ResourceRead


class EventReadWithRelations(EventRead):
    artists: List[ArtistRead] = []
    resources: List[ResourceRead] = []


class ArtistReadWithEvent(ArtistRead):
    event: Optional[EventRead] = None


class ResourceReadWithEvent(ResourceRead):
    event: Optional[EventRead] = None
