from typing import Optional

from asyncpg import Connection
from fastapi import APIRouter, Depends, Query, status

from posyandu.api.v1.deps import EntityId, get_current_kader, get_db_connection
from posyandu.repositories.ibu_repo import IbuRepository
from posyandu.schemas.auth_schema import AuthenticatedKader
from posyandu.schemas.common_schema import CreatedOut, MessageOut
from posyandu.schemas.ibu_schema import IbuIn, IbuOption, IbuOut
from posyandu.services.crud_service import CrudService
from posyandu.services.messages import IBU

router = APIRouter(prefix="/ibu", tags=["ibu"], dependencies=[Depends(get_current_kader)])


def get_ibu_repo(conn: Connection = Depends(get_db_connection)) -> IbuRepository:
    return IbuRepository(conn)


def get_ibu_service(repo: IbuRepository = Depends(get_ibu_repo)) -> CrudService:
    return CrudService(repo, IBU)


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED)
async def create_ibu(
        body: IbuIn,
        current_kader: AuthenticatedKader = Depends(get_current_kader),
        service: CrudService = Depends(get_ibu_service),
):
    values = body.model_dump()
    values["id_kader_pendaftar"] = current_kader.id
    new_id = await service.create(values)
    return CreatedOut(message=IBU.created, id=new_id)


@router.get("", response_model=list[IbuOut])
async def list_ibu(search: Optional[str] = Query(None), service: CrudService = Depends(get_ibu_service)):
    return await service.list(search=search)


@router.get("/simple", response_model=list[IbuOption])
async def list_ibu_options(service: CrudService = Depends(get_ibu_service)):
    with service.storage_errors():
        return await service.repo.list_options()


@router.get("/{ibu_id}", response_model=IbuOut)
async def get_ibu(ibu_id: EntityId, service: CrudService = Depends(get_ibu_service)):
    return await service.get(ibu_id)


@router.put("/{ibu_id}", response_model=MessageOut)
async def update_ibu(ibu_id: EntityId, body: IbuIn, service: CrudService = Depends(get_ibu_service)):
    await service.update(ibu_id, body.model_dump())
    return MessageOut(message=IBU.updated)


@router.delete("/{ibu_id}", response_model=MessageOut)
async def delete_ibu(ibu_id: EntityId, service: CrudService = Depends(get_ibu_service)):
    await service.delete(ibu_id)
    return MessageOut(message=IBU.deleted)
