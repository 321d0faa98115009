from typing import List, Optional

from fastapi import APIRouter, Depends, status

from eventdesk.auth.authenticate import authenticate
from eventdesk.database.database import get_session
from eventdesk.models import ResourceCreate, ResourceRead, ResourceReadWithEvent, ResourceUpdate
from eventdesk.services.crud import resource as ResourceService

resources_route = APIRouter(prefix="/resources", dependencies=[Depends(authenticate)])


@resources_route.get("", response_model=List[ResourceReadWithEvent])
async def get_resources(session=Depends(get_session)):
    return ResourceService.get_all_resources(session)


@resources_route.get("/{resource_id}", response_model=Optional[ResourceReadWithEvent])
async def get_resource(resource_id: int, session=Depends(get_session)):
    return ResourceService.get_resource_by_id(session, resource_id)


@resources_route.post("", response_model=ResourceRead, status_code=status.HTTP_201_CREATED)
async def create_resource(body: ResourceCreate, session=Depends(get_session)):
    return ResourceService.create_resource(session, body)


@resources_route.put("/{resource_id}", response_model=ResourceRead)
async def update_resource(resource_id: int, body: ResourceUpdate, session=Depends(get_session)):
    return ResourceService.update_resource(session, resource_id, body)


@resources_route.delete("/{resource_id}", response_model=ResourceRead)
async def delete_resource(resource_id: int, session=Depends(get_session)):
    return ResourceService.delete_resource(session, resource_id)
