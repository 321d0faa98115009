from typing import List, Optional

from fastapi import APIRouter, Depends, status

from eventdesk.auth.authenticate import authenticate
from eventdesk.database.database import get_session
from eventdesk.models import ArtistCreate, ArtistRead, ArtistReadWithEvent, ArtistUpdate
from eventdesk.services.crud import artist as ArtistService

artists_route = APIRouter(prefix="/artists", dependencies=[Depends(authenticate)])


@artists_route.get("", response_model=List[ArtistReadWithEvent])
async def get_artists(session=Depends(get_session)):
    return ArtistService.get_all_artists(session)


@artists_route.get("/{artist_id}", response_model=Optional[ArtistReadWithEvent])
async def get_artist(artist_id: int, session=Depends(get_session)):
    return ArtistService.get_artist_by_id(session, artist_id)


@artists_route.post("", response_model=ArtistRead, status_code=status.HTTP_201_CREATED)
async def create_artist(body: ArtistCreate, session=Depends(get_session)):
    return ArtistService.create_artist(session, body)


@artists_route.put("/{artist_id}", response_model=ArtistRead)
async def update_artist(artist_id: int, body: ArtistUpdate, session=Depends(get_session)):
    return ArtistService.update_artist(session, artist_id, body)


@artists_route.delete("/{artist_id}", response_model=ArtistRead)
async def delete_artist(artist_id: int, session=Depends(get_session)):
    return ArtistService.delete_artist(session, artist_id)
