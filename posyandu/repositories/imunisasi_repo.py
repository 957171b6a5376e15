from posyandu.repositories.base_repo import BaseRepository, rows

RIWAYAT_SELECT = """
        SELECT
            r.id, r.id_anak, r.id_master_imunisasi, r.id_kader_pencatat, r.id_kader_updater,
            r.tanggal_imunisasi, r.catatan, r.created_at, r.updated_at,
            a.nama_anak, a.nik_anak,
            m.nama_imunisasi,
            kp.nama_lengkap AS nama_kader,
            ku.nama_lengkap AS nama_kader_updater
        FROM riwayat_imunisasi r
        JOIN anak a ON r.id_anak = a.id
        JOIN master_imunisasi m ON r.id_master_imunisasi = m.id
        LEFT JOIN kader kp ON r.id_kader_pencatat = kp.id
        LEFT JOIN kader ku ON r.id_kader_updater = ku.id"""


class MasterImunisasiRepository(BaseRepository):
    table = "master_imunisasi"
    select_sql = """
        SELECT id, nama_imunisasi, usia_ideal_bulan, deskripsi, created_at, updated_at
        FROM master_imunisasi"""
    search_columns = ("nama_imunisasi", "deskripsi")
    order_by = "usia_ideal_bulan ASC, nama_imunisasi ASC"
    writable_columns = ("nama_imunisasi", "usia_ideal_bulan", "deskripsi")

    async def list_simple(self) -> list[dict]:
        sql = """
            SELECT id, nama_imunisasi, usia_ideal_bulan
            FROM master_imunisasi
            ORDER BY usia_ideal_bulan ASC, nama_imunisasi ASC;
        """
        return rows(await self.conn.fetch(sql))


class RiwayatImunisasiRepository(BaseRepository):
    table = "riwayat_imunisasi"
    select_sql = RIWAYAT_SELECT
    id_column = "r.id"
    search_columns = ("a.nama_anak", "a.nik_anak", "m.nama_imunisasi")
    parent_column = "r.id_anak"
    order_by = "r.tanggal_imunisasi DESC, a.nama_anak ASC, r.id DESC"
    writable_columns = (
        "id_anak",
        "id_master_imunisasi",
        "tanggal_imunisasi",
        "catatan",
        "id_kader_pencatat",
        "id_kader_updater",
    )
