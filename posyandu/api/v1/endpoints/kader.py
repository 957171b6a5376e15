from typing import Optional

from asyncpg import Connection
from fastapi import APIRouter, Depends, Query, status

from posyandu.api.v1.deps import EntityId, get_current_kader, get_db_connection
from posyandu.repositories.kader_repo import KaderRepository
from posyandu.schemas.common_schema import CreatedOut, MessageOut
from posyandu.schemas.kader_schema import ChangePasswordIn, KaderCreate, KaderOut, KaderUpdate
from posyandu.services.kader_service import KaderService

router = APIRouter(prefix="/kader", tags=["kader"])


def get_kader_repo(conn: Connection = Depends(get_db_connection)) -> KaderRepository:
    return KaderRepository(conn)


def get_kader_service(repo: KaderRepository = Depends(get_kader_repo)) -> KaderService:
    return KaderService(repo)


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED)
async def register_kader(body: KaderCreate, service: KaderService = Depends(get_kader_service)):
    new_id = await service.register(body)
    return CreatedOut(message=service.messages.created, id=new_id)


@router.get("", response_model=list[KaderOut], dependencies=[Depends(get_current_kader)])
async def list_kader(
        search: Optional[str] = Query(None),
        service: KaderService = Depends(get_kader_service),
):
    return await service.list(search=search)


@router.get("/{kader_id}", response_model=KaderOut, dependencies=[Depends(get_current_kader)])
async def get_kader(kader_id: EntityId, service: KaderService = Depends(get_kader_service)):
    return await service.get(kader_id)


@router.put("/{kader_id}", response_model=MessageOut, dependencies=[Depends(get_current_kader)])
async def update_kader(kader_id: EntityId, body: KaderUpdate, service: KaderService = Depends(get_kader_service)):
    await service.update_profile(kader_id, body)
    return MessageOut(message=service.messages.updated)


@router.put("/{kader_id}/password", response_model=MessageOut, dependencies=[Depends(get_current_kader)])
async def change_password(
        kader_id: EntityId,
        body: ChangePasswordIn,
        service: KaderService = Depends(get_kader_service),
):
    await service.change_password(kader_id, body)
    return MessageOut(message="Password berhasil diperbarui!")


@router.delete("/{kader_id}", response_model=MessageOut, dependencies=[Depends(get_current_kader)])
async def delete_kader(kader_id: EntityId, service: KaderService = Depends(get_kader_service)):
    await service.delete(kader_id)
    return MessageOut(message=service.messages.deleted)
