from posyandu.repositories.base_repo import BaseRepository

PERKEMBANGAN_SELECT = """
        SELECT
            p.id, p.id_anak, p.tanggal_pemeriksaan, p.bb_kg, p.tb_cm, p.lk_cm, p.ll_cm,
            p.status_gizi, p.saran, p.id_kader_pencatat, p.created_at, p.updated_at,
            a.nama_anak, k.nama_lengkap AS nama_kader, a.nik_anak,
            i.nama_lengkap AS nama_ibu, i.nik AS nik_ibu
        FROM perkembangan p
        JOIN anak a ON p.id_anak = a.id
        JOIN ibu i ON a.id_ibu = i.id
        LEFT JOIN kader k ON p.id_kader_pencatat = k.id"""


class PerkembanganRepository(BaseRepository):
    table = "perkembangan"
    select_sql = PERKEMBANGAN_SELECT
    id_column = "p.id"
    search_columns = ("a.nama_anak", "a.nik_anak", "k.nama_lengkap", "i.nama_lengkap")
    parent_column = "p.id_anak"
    order_by = "p.tanggal_pemeriksaan DESC, a.nama_anak ASC, p.id DESC"
    writable_columns = (
        "id_anak",
        "tanggal_pemeriksaan",
        "bb_kg",
        "tb_cm",
        "lk_cm",
        "ll_cm",
        "status_gizi",
        "saran",
        "id_kader_pencatat",
    )
