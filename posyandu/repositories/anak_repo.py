from posyandu.repositories.base_repo import BaseRepository, rows


class AnakRepository(BaseRepository):
    table = "anak"
    select_sql = """
        SELECT
            a.id, a.id_ibu, a.nama_anak, a.nik_anak, a.tanggal_lahir, a.jenis_kelamin,
            a.anak_ke, a.berat_lahir_kg, a.tinggi_lahir_cm, a.created_at, a.updated_at,
            i.nama_lengkap AS nama_ibu,
            i.nik AS nik_ibu
        FROM anak a
        LEFT JOIN ibu i ON a.id_ibu = i.id"""
    id_column = "a.id"
    search_columns = ("a.nama_anak", "a.nik_anak", "i.nama_lengkap")
    parent_column = "a.id_ibu"
    order_by = "a.nama_anak ASC, a.id ASC"
    writable_columns = (
        "id_ibu",
        "nama_anak",
        "nik_anak",
        "tanggal_lahir",
        "jenis_kelamin",
        "anak_ke",
        "berat_lahir_kg",
        "tinggi_lahir_cm",
    )

    async def list_simple(self) -> list[dict]:
        sql = "SELECT id, nama_anak, nik_anak FROM anak ORDER BY nama_anak ASC, id ASC;"
        return rows(await self.conn.fetch(sql))
