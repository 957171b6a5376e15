from typing import Optional

from posyandu.repositories.base_repo import BaseRepository

KADER_COLUMNS = "id, nama_lengkap, nik, no_telepon, username, created_at, updated_at"


class KaderRepository(BaseRepository):
    table = "kader"
    select_sql = f"SELECT {KADER_COLUMNS} FROM kader"
    search_columns = ("nama_lengkap", "nik", "username")
    order_by = "nama_lengkap ASC, id ASC"
    writable_columns = ("nama_lengkap", "nik", "no_telepon", "username", "password")

    async def get_credentials(self, username: str) -> Optional[dict]:
        sql = f"SELECT {KADER_COLUMNS}, password FROM kader WHERE username = $1;"
        record = await self.conn.fetchrow(sql, username)
        return dict(record) if record else None

    async def get_password_hash(self, kader_id: int) -> Optional[str]:
        sql = "SELECT password FROM kader WHERE id = $1;"
        return await self.conn.fetchval(sql, kader_id)

    async def update_password(self, kader_id: int, hashed_password: str) -> bool:
        sql = "UPDATE kader SET password = $1, updated_at = NOW() WHERE id = $2 RETURNING id;"
        updated_id = await self.conn.fetchval(sql, hashed_password, kader_id)
        return updated_id is not None

