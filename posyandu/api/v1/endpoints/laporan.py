from typing import Optional

from asyncpg import Connection
from fastapi import APIRouter, Depends, Query

from posyandu.api.v1.deps import get_current_kader, get_db_connection
from posyandu.repositories.laporan_repo import LaporanRepository
from posyandu.services.laporan_service import LaporanService

router = APIRouter(prefix="/laporan", tags=["laporan"], dependencies=[Depends(get_current_kader)])


def get_laporan_repo(conn: Connection = Depends(get_db_connection)) -> LaporanRepository:
    return LaporanRepository(conn)


def get_laporan_service(repo: LaporanRepository = Depends(get_laporan_repo)) -> LaporanService:
    return LaporanService(repo)


@router.get("/{tipe}")
async def get_laporan(
        tipe: str,
        start: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
        end: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
        service: LaporanService = Depends(get_laporan_service),
):
    return await service.generate(tipe, start, end)
