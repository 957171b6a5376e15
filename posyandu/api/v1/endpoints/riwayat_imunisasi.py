from typing import Optional

from asyncpg import Connection
from fastapi import APIRouter, Depends, Query, status

from posyandu.api.v1.deps import EntityId, get_current_kader, get_db_connection, positive_int_or_none
from posyandu.repositories.imunisasi_repo import RiwayatImunisasiRepository
from posyandu.schemas.auth_schema import AuthenticatedKader
from posyandu.schemas.common_schema import CreatedOut, MessageOut
from posyandu.schemas.imunisasi_schema import RiwayatImunisasiIn, RiwayatImunisasiOut
from posyandu.services.crud_service import CrudService
from posyandu.services.messages import RIWAYAT_IMUNISASI

router = APIRouter(
    prefix="/riwayat-imunisasi",
    tags=["riwayat-imunisasi"],
    dependencies=[Depends(get_current_kader)],
)


def get_riwayat_repo(conn: Connection = Depends(get_db_connection)) -> RiwayatImunisasiRepository:
    return RiwayatImunisasiRepository(conn)


def get_riwayat_service(repo: RiwayatImunisasiRepository = Depends(get_riwayat_repo)) -> CrudService:
    return CrudService(repo, RIWAYAT_IMUNISASI)


@router.post("", response_model=CreatedOut, status_code=status.HTTP_201_CREATED)
async def create_riwayat_imunisasi(
        body: RiwayatImunisasiIn,
        current_kader: AuthenticatedKader = Depends(get_current_kader),
        service: CrudService = Depends(get_riwayat_service),
):
    values = body.model_dump()
    values["id_kader_pencatat"] = current_kader.id
    new_id = await service.create(values)
    return CreatedOut(message=RIWAYAT_IMUNISASI.created, id=new_id)


@router.get("", response_model=list[RiwayatImunisasiOut])
async def list_riwayat_imunisasi(
        search: Optional[str] = Query(None),
        id_anak: Optional[str] = Query(None),
        service: CrudService = Depends(get_riwayat_service),
):
    return await service.list(search=search, parent_id=positive_int_or_none(id_anak))


@router.get("/{riwayat_id}", response_model=RiwayatImunisasiOut)
async def get_riwayat_imunisasi(riwayat_id: EntityId, service: CrudService = Depends(get_riwayat_service)):
    return await service.get(riwayat_id)


@router.put("/{riwayat_id}", response_model=MessageOut)
async def update_riwayat_imunisasi(
        riwayat_id: EntityId,
        body: RiwayatImunisasiIn,
        current_kader: AuthenticatedKader = Depends(get_current_kader),
        service: CrudService = Depends(get_riwayat_service),
):
    values = body.model_dump()
    values["id_kader_updater"] = current_kader.id
    await service.update(riwayat_id, values)
    return MessageOut(message=RIWAYAT_IMUNISASI.updated)


@router.delete("/{riwayat_id}", response_model=MessageOut)
async def delete_riwayat_imunisasi(riwayat_id: EntityId, service: CrudService = Depends(get_riwayat_service)):
    await service.delete(riwayat_id)
    return MessageOut(message=RIWAYAT_IMUNISASI.deleted)
