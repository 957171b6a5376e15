from posyandu.repositories.base_repo import BaseRepository, rows


class IbuRepository(BaseRepository):
    table = "ibu"
    select_sql = """
        SELECT id, nama_lengkap, nik, no_telepon, alamat, id_kader_pendaftar, created_at, updated_at
        FROM ibu"""
    search_columns = ("nama_lengkap", "nik")
    order_by = "nama_lengkap ASC, id ASC"
    writable_columns = ("nama_lengkap", "nik", "no_telepon", "alamat", "id_kader_pendaftar")

    async def list_options(self) -> list[dict]:
        records = await self.conn.fetch("SELECT id, nama_lengkap FROM ibu ORDER BY nama_lengkap ASC, id ASC;")
        return rows(records)
