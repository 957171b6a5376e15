from typing import Optional

from asyncpg import Connection
from fastapi import APIRouter, Depends, Query, status

from posyandu.api.v1.deps import EntityId, get_current_kader, get_db_connection, positive_int_or_none
from posyandu.repositories.anak_repo import AnakRepository
from posyandu.schemas.anak_schema import AnakIn, AnakOut, AnakSimple
from posyandu.schemas.common_schema import CreatedOut, MessageOut
from posyandu.services.crud_service import CrudService
from posyandu.services.messages import ANAK

router = APIRouter(prefix="/anak", tags=["anak"], dependencies=[Depends(get_current_kader)])


def get_anak_repo(conn: Connection = Depends(get_db_connection)) -> AnakRepository:
    return AnakRepository(conn)


def get_anak_service(repo: AnakRepository = Depends(get_anak_repo)) -> CrudService:
    return CrudService(repo, ANAK)


def anak_values(body: AnakIn) -> dict:
    values = body.model_dump()
    values["jenis_kelamin"] = body.jenis_kelamin.value
    return values


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED)
async def create_anak(body: AnakIn, service: CrudService = Depends(get_anak_service)):
    new_id = await service.create(anak_values(body))
    return CreatedOut(message=ANAK.created, id=new_id)


@router.get("", response_model=list[AnakOut])
async def list_anak(
        search: Optional[str] = Query(None),
        id_ibu: Optional[str] = Query(None),
        service: CrudService = Depends(get_anak_service),
):
    return await service.list(search=search, parent_id=positive_int_or_none(id_ibu))


@router.get("/simple", response_model=list[AnakSimple])
async def list_anak_simple(service: CrudService = Depends(get_anak_service)):
    with service.storage_errors():
        return await service.repo.list_simple()


@router.get("/{anak_id}", response_model=AnakOut)
async def get_anak(anak_id: EntityId, service: CrudService = Depends(get_anak_service)):
    return await service.get(anak_id)


@router.put("/{anak_id}", response_model=MessageOut)
async def update_anak(anak_id: EntityId, body: AnakIn, service: CrudService = Depends(get_anak_service)):
    await service.update(anak_id, anak_values(body))
    return MessageOut(message=ANAK.updated)


@router.delete("/{anak_id}", response_model=MessageOut)
async def delete_anak(anak_id: EntityId, service: CrudService = Depends(get_anak_service)):
    await service.delete(anak_id)
    return MessageOut(message=ANAK.deleted)
