# services/crud/artist.py
from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from eventdesk.models import Artist, ArtistCreate, ArtistRead, ArtistUpdate
from eventdesk.services.logging.logging import get_logger

logger = get_logger(logger_name=__name__)


def get_all_artists(session: Session) -> List[Artist]:
    return session.exec(select(Artist).options(selectinload(Artist.event))).all()


def get_artist_by_id(session: Session, artist_id: int) -> Optional[Artist]:
    return session.exec(
        select(Artist)
        .where(Artist.id == artist_id)
        .options(selectinload(Artist.event))
    ).first()


def create_artist(session: Session, data: ArtistCreate) -> Artist:
    artist = Artist(**data.model_dump())
    session.add(artist)
    session.commit()
    session.refresh(artist)
    logger.info(f"Создан артист {artist.id} для мероприятия {artist.event_id}")
    return artist


def update_artist(session: Session, artist_id: int, data: ArtistUpdate) -> Artist:
    artist = session.exec(select(Artist).where(Artist.id == artist_id)).one()
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(artist, key, value)
    session.add(artist)
    session.commit()
    session.refresh(artist)
    logger.info(f"Обновлен артист {artist_id}")
    return artist


def delete_artist(session: Session, artist_id: int) -> ArtistRead:
    artist = session.exec(select(Artist).where(Artist.id == artist_id)).one()
    deleted = ArtistRead.model_validate(artist)
    session.delete(artist)
    session.commit()
    logger.info(f"Удален артист {artist_id}")
    return deleted
