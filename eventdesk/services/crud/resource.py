# services/crud/resource.py
from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from eventdesk.models import Resource, ResourceCreate, ResourceRead, ResourceUpdate
from eventdesk.services.logging.logging import get_logger

logger = get_logger(logger_name=__name__)


def get_all_resources(session: Session) -> List[Resource]:
    return session.exec(select(Resource).options(selectinload(Resource.event))).all()


def get_resource_by_id(session: Session, resource_id: int) -> Optional[Resource]:
    return session.exec(
        select(Resource)
        .where(Resource.id == resource_id)
        .options(selectinload(Resource.event))
    ).first()


def create_resource(session: Session, data: ResourceCreate) -> Resource:
    resource = Resource(**data.model_dump())
    session.add(resource)
    session.commit()
    session.refresh(resource)
    logger.info(f"Создан ресурс {resource.id} для мероприятия {resource.event_id}")
    return resource


def update_resource(session: Session, resource_id: int, data: ResourceUpdate) -> Resource:
    resource = session.exec(select(Resource).where(Resource.id == resource_id)).one()
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(resource, key, value)
    session.add(resource)
    session.commit()
    session.refresh(resource)
    logger.info(f"Обновлен ресурс {resource_id}")
    return resource


def delete_resource(session: Session, resource_id: int) -> ResourceRead:
    resource = session.exec(select(Resource).where(Resource.id == resource_id)).one()
    deleted = ResourceRead.model_validate(resource)
    session.delete(resource)
    session.commit()
    logger.info(f"Удален ресурс {resource_id}")
    return deleted
