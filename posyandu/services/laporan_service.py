import logging
from datetime import date, datetime, timedelta
from typing import Optional

import asyncpg
from pydantic import BaseModel

from posyandu.core.exceptions import BadRequestException, InternalServerErrorException
from posyandu.repositories.laporan_repo import REPORT_QUERIES, LaporanRepository
from posyandu.schemas.anak_schema import AnakOut
from posyandu.schemas.ibu_schema import IbuOut
from posyandu.schemas.imunisasi_schema import RiwayatImunisasiOut
from posyandu.schemas.perkembangan_schema import LaporanPerkembanganOut

logger = logging.getLogger(__name__)

REPORT_MODELS: dict[str, type[BaseModel]] = {
    "wali": IbuOut,
    "anak": AnakOut,
    "perkembangan": LaporanPerkembanganOut,
    "imunisasi": RiwayatImunisasiOut,
}


def parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise BadRequestException("Format tanggal tidak valid (YYYY-MM-DD)")


class LaporanService:
    def __init__(self, repo: LaporanRepository):
        self.repo = repo

    async def generate(self, tipe: str, start: Optional[str] = None, end: Optional[str] = None) -> list[BaseModel]:
        if tipe not in REPORT_QUERIES:
            raise BadRequestException("Tipe laporan tidak valid.")

        start_day = parse_day(start)
        end_day = parse_day(end)
        # the end date is inclusive: everything before the following midnight
        end_exclusive = None
        if end_day and end_day < date.max:
            end_exclusive = end_day + timedelta(days=1)

        logger.info("Fetching report %s, start=%s, end=%s", tipe, start_day, end_day)
        try:
            records = await self.repo.fetch_report(tipe, start_day, end_exclusive)
        except asyncpg.PostgresError:
            logger.exception("Storage error while fetching report %s", tipe)
            raise InternalServerErrorException("Gagal mengambil data.")

        model = REPORT_MODELS[tipe]
        return [model.model_validate(record) for record in records]
