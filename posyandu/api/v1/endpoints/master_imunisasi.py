from typing import Optional

from asyncpg import Connection
from fastapi import APIRouter, Depends, Query, status

from posyandu.api.v1.deps import EntityId, get_current_kader, get_db_connection
from posyandu.repositories.imunisasi_repo import MasterImunisasiRepository
from posyandu.schemas.common_schema import CreatedOut, MessageOut
from posyandu.schemas.imunisasi_schema import MasterImunisasiIn, MasterImunisasiOut, MasterImunisasiSimple
from posyandu.services.crud_service import CrudService
from posyandu.services.messages import MASTER_IMUNISASI

router = APIRouter(
    prefix="/master-imunisasi",
    tags=["master-imunisasi"],
    dependencies=[Depends(get_current_kader)],
)


def get_master_repo(conn: Connection = Depends(get_db_connection)) -> MasterImunisasiRepository:
    return MasterImunisasiRepository(conn)


def get_master_service(repo: MasterImunisasiRepository = Depends(get_master_repo)) -> CrudService:
    return CrudService(repo, MASTER_IMUNISASI)


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED)
async def create_master_imunisasi(body: MasterImunisasiIn, service: CrudService = Depends(get_master_service)):
    new_id = await service.create(body.model_dump())
    return CreatedOut(message=MASTER_IMUNISASI.created, id=new_id)


@router.get("", response_model=list[MasterImunisasiOut])
async def list_master_imunisasi(
        search: Optional[str] = Query(None),
        service: CrudService = Depends(get_master_service),
):
    return await service.list(search=search)


@router.get("/simple", response_model=list[MasterImunisasiSimple])
async def list_master_imunisasi_simple(service: CrudService = Depends(get_master_service)):
    with service.storage_errors():
        return await service.repo.list_simple()


@router.get("/{master_id}", response_model=MasterImunisasiOut)
async def get_master_imunisasi(master_id: EntityId, service: CrudService = Depends(get_master_service)):
    return await service.get(master_id)


@router.put("/{master_id}", response_model=MessageOut)
async def update_master_imunisasi(
        master_id: EntityId,
        body: MasterImunisasiIn,
        service: CrudService = Depends(get_master_service),
):
    await service.update(master_id, body.model_dump())
    return MessageOut(message=MASTER_IMUNISASI.updated)


@router.delete("/{master_id}", response_model=MessageOut)
async def delete_master_imunisasi(master_id: EntityId, service: CrudService = Depends(get_master_service)):
    await service.delete(master_id)
    return MessageOut(message=MASTER_IMUNISASI.deleted)
