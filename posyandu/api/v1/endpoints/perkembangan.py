from typing import Optional

from asyncpg import Connection
from fastapi import APIRouter, Depends, Query, status

from posyandu.api.v1.deps import EntityId, get_current_kader, get_db_connection, positive_int_or_none
from posyandu.repositories.perkembangan_repo import PerkembanganRepository
from posyandu.schemas.auth_schema import AuthenticatedKader
from posyandu.schemas.common_schema import CreatedOut, MessageOut
from posyandu.schemas.perkembangan_schema import PerkembanganIn, PerkembanganOut
from posyandu.services.crud_service import CrudService
from posyandu.services.messages import PERKEMBANGAN

router = APIRouter(prefix="/perkembangan", tags=["perkembangan"], dependencies=[Depends(get_current_kader)])


def get_perkembangan_repo(conn: Connection = Depends(get_db_connection)) -> PerkembanganRepository:
    return PerkembanganRepository(conn)


def get_perkembangan_service(repo: PerkembanganRepository = Depends(get_perkembangan_repo)) -> CrudService:
    return CrudService(repo, PERKEMBANGAN)


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED)
async def create_perkembangan(
        body: PerkembanganIn,
        current_kader: AuthenticatedKader = Depends(get_current_kader),
        service: CrudService = Depends(get_perkembangan_service),
):
    values = body.model_dump()
    values["id_kader_pencatat"] = current_kader.id
    new_id = await service.create(values)
    return CreatedOut(message=PERKEMBANGAN.created, id=new_id)


@router.get("", response_model=list[PerkembanganOut])
async def list_perkembangan(
        search: Optional[str] = Query(None),
        id_anak: Optional[str] = Query(None),
        service: CrudService = Depends(get_perkembangan_service),
):
    return await service.list(search=search, parent_id=positive_int_or_none(id_anak))


@router.get("/{perkembangan_id}", response_model=PerkembanganOut)
async def get_perkembangan(perkembangan_id: EntityId, service: CrudService = Depends(get_perkembangan_service)):
    return await service.get(perkembangan_id)


@router.put("/{perkembangan_id}", response_model=MessageOut)
async def update_perkembangan(
        perkembangan_id: EntityId,
        body: PerkembanganIn,
        service: CrudService = Depends(get_perkembangan_service),
):
    # the recording kader is fixed at creation time
    await service.update(perkembangan_id, body.model_dump())
    return MessageOut(message=PERKEMBANGAN.updated)


@router.delete("/{perkembangan_id}", response_model=MessageOut)
async def delete_perkembangan(perkembangan_id: EntityId, service: CrudService = Depends(get_perkembangan_service)):
    await service.delete(perkembangan_id)
    return MessageOut(message=PERKEMBANGAN.deleted)
