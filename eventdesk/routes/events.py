from typing import List, Optional

from fastapi import APIRouter, Depends, status

from eventdesk.auth.authenticate import authenticate
from eventdesk.database.database import get_session
from eventdesk.models import (
    EventCreate,
    EventRead,
    EventReadWithRelations,
    EventResourceCreate,
    EventUpdate,
    ResourceRead,
)
from eventdesk.services.crud import event as EventService

events_route = APIRouter(prefix="/events", dependencies=[Depends(authenticate)])


# ====== Мероприятия ======

@events_route.get("", response_model=List[EventReadWithRelations])
async def get_events(session=Depends(get_session)):
    """Все мероприятия вместе с артистами и ресурсами"""
    return EventService.get_all_events(session)


@events_route.get("/{event_id}", response_model=Optional[EventReadWithRelations])
async def get_event(event_id: int, session=Depends(get_session)):
    """Мероприятие по id, null если его нет"""
    return EventService.get_event_by_id(session, event_id)


@events_route.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(body: EventCreate, session=Depends(get_session)):
    return EventService.create_event(session, body)


@events_route.put("/{event_id}", response_model=EventRead)
async def update_event(event_id: int, body: EventUpdate, session=Depends(get_session)):
    return EventService.update_event(session, event_id, body)


@events_route.delete("/{event_id}", response_model=EventRead)
async def delete_event(event_id: int, session=Depends(get_session)):
    return EventService.delete_event(session, event_id)


# ====== Ресурсы мероприятия ======

@events_route.get("/{event_id}/resources", response_model=List[ResourceRead])
async def get_event_resources(event_id: int, session=Depends(get_session)):
    return EventService.get_event_resources(session, event_id)


@events_route.post("/{event_id}/resources", response_model=ResourceRead, status_code=status.HTTP_201_CREATED)
async def add_event_resource(event_id: int, body: EventResourceCreate, session=Depends(get_session)):
    return EventService.add_event_resource(session, event_id, body)


@events_route.delete("/{event_id}/resources/{resource_id}", response_model=ResourceRead)
async def remove_event_resource(event_id: int, resource_id: int, session=Depends(get_session)):
    return EventService.remove_event_resource(session, event_id, resource_id)
