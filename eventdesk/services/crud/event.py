# services/crud/event.py
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from eventdesk.database.config import get_settings
from eventdesk.models import (
    Artist,
    Event,
    EventCreate,
    EventRead,
    EventResourceCreate,
    EventUpdate,
    Resource,
    ResourceRead,
)
from eventdesk.services.logging.logging import get_logger

logger = get_logger(logger_name=__name__)


def _with_relations(statement):
    return statement.options(selectinload(Event.artists), selectinload(Event.resources))


def get_all_events(session: Session) -> List[Event]:
    return session.exec(_with_relations(select(Event))).all()


def get_event_by_id(session: Session, event_id: int) -> Optional[Event]:
    return session.exec(_with_relations(select(Event).where(Event.id == event_id))).first()


def create_event(session: Session, data: EventCreate) -> Event:
    event = Event(**data.model_dump())
    session.add(event)
    session.commit()
    session.refresh(event)
    logger.info(f"Создано мероприятие {event.id}")
    return event


def update_event(session: Session, event_id: int, data: EventUpdate) -> Event:
    """
    Частично обновляет мероприятие: меняются только переданные поля.

    Raises:
        NoResultFound: если мероприятия с таким id нет
    """
    event = session.exec(select(Event).where(Event.id == event_id)).one()
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(event, key, value)
    session.add(event)
    session.commit()
    session.refresh(event)
    logger.info(f"Обновлено мероприятие {event_id}")
    return event


def delete_event(session: Session, event_id: int) -> EventRead:
    """
    Удаляет мероприятие и возвращает снимок удаленной записи.

    При политике "cascade" сначала удаляются артисты и ресурсы мероприятия.
    При политике "restrict" зависимости не трогаются, и внешний ключ
    отклоняет удаление, если они есть.

    Raises:
        NoResultFound: если мероприятия с таким id нет
        IntegrityError: если политика "restrict" и у мероприятия есть зависимости
    """
    event = session.exec(select(Event).where(Event.id == event_id)).one()
    deleted = EventRead.model_validate(event)

    if get_settings().EVENT_DELETE_POLICY == "cascade":
        session.exec(delete(Artist).where(Artist.event_id == event_id))
        session.exec(delete(Resource).where(Resource.event_id == event_id))

    session.delete(event)
    session.commit()
    logger.info(f"Удалено мероприятие {event_id}")
    return deleted


def get_event_resources(session: Session, event_id: int) -> List[Resource]:
    return session.exec(select(Resource).where(Resource.event_id == event_id)).all()


def add_event_resource(session: Session, event_id: int, data: EventResourceCreate) -> Resource:
    resource = Resource(**data.model_dump(), event_id=event_id)
    session.add(resource)
    session.commit()
    session.refresh(resource)
    logger.info(f"Добавлен ресурс {resource.id} в мероприятие {event_id}")
    return resource


def remove_event_resource(session: Session, event_id: int, resource_id: int) -> ResourceRead:
    # Ресурс из чужого мероприятия считается ненайденным
    resource = session.exec(
        select(Resource)
        .where(Resource.id == resource_id)
        .where(Resource.event_id == event_id)
    ).one()
    deleted = ResourceRead.model_validate(resource)
    session.delete(resource)
    session.commit()
    logger.info(f"Удален ресурс {resource_id} из мероприятия {event_id}")
    return deleted
