from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Optional

from asyncpg import Connection

from posyandu.repositories.anak_repo import AnakRepository
from posyandu.repositories.base_repo import rows
from posyandu.repositories.ibu_repo import IbuRepository
from posyandu.repositories.imunisasi_repo import RIWAYAT_SELECT
from posyandu.repositories.perkembangan_repo import PERKEMBANGAN_SELECT


@dataclass(frozen=True)
class ReportQuery:
    select_sql: str
    date_column: str
    # registration timestamps are timestamptz; exam/administration dates are DATE
    is_timestamp: bool
    order_by: str


REPORT_QUERIES: dict[str, ReportQuery] = {
    "wali": ReportQuery(IbuRepository.select_sql, "created_at", True, "created_at DESC, id DESC"),
    "anak": ReportQuery(AnakRepository.select_sql, "a.created_at", True, "a.created_at DESC, a.id DESC"),
    "perkembangan": ReportQuery(
        PERKEMBANGAN_SELECT,
        "p.tanggal_pemeriksaan",
        False,
        "p.tanggal_pemeriksaan DESC, a.nama_anak ASC, p.id DESC",
    ),
    "imunisasi": ReportQuery(
        RIWAYAT_SELECT,
        "r.tanggal_imunisasi",
        False,
        "r.tanggal_imunisasi DESC, a.nama_anak ASC, r.id DESC",
    ),
}


def _bound(day: date, is_timestamp: bool) -> date | datetime:
    if is_timestamp:
        return datetime.combine(day, time.min).replace(tzinfo=timezone.utc)
    return day


class LaporanRepository:
    """Read-only, date-filtered projections used for reporting."""

    def __init__(self, conn: Connection):
        self.conn = conn

    async def fetch_report(
        self,
        tipe: str,
        start: Optional[date] = None,
        end_exclusive: Optional[date] = None,
    ) -> list[dict]:
        query = REPORT_QUERIES[tipe]
        clauses: list[str] = []
        args: list[Any] = []

        if start:
            args.append(_bound(start, query.is_timestamp))
            clauses.append(f"{query.date_column} >= ${len(args)}")
        if end_exclusive:
            args.append(_bound(end_exclusive, query.is_timestamp))
            clauses.append(f"{query.date_column} < ${len(args)}")

        sql = query.select_sql
        if clauses:
            sql += f" WHERE {' AND '.join(clauses)}"
        sql += f" ORDER BY {query.order_by};"
        return rows(await self.conn.fetch(sql, *args))
