from posyandu.services.crud_service import EntityMessages

KADER = EntityMessages(
    entity="kader",
    created="Kader baru berhasil didaftarkan!",
    updated="Data kader berhasil diperbarui!",
    deleted="Data kader berhasil dihapus!",
    not_found="Data kader tidak ditemukan.",
    internal="Gagal menyimpan data kader.",
    unique={
        "kader_username_key": "Username ini sudah digunakan.",
        "kader_nik_key": "NIK ini sudah terdaftar.",
    },
    delete_blocked={
        "ibu_id_kader_pendaftar_fkey": "Kader tidak bisa dihapus karena masih terhubung dengan data ibu.",
        "perkembangan_id_kader_pencatat_fkey": (
            "Kader tidak bisa dihapus karena masih terhubung dengan data perkembangan."
        ),
        "riwayat_imunisasi_id_kader_pencatat_fkey": (
            "Kader tidak bisa dihapus karena masih terhubung dengan data imunisasi."
        ),
        "riwayat_imunisasi_id_kader_updater_fkey": (
            "Kader tidak bisa dihapus karena masih terhubung dengan data imunisasi."
        ),
    },
    delete_blocked_default=(
        "Kader tidak bisa dihapus karena masih terhubung dengan data lain (misal: data ibu/perkembangan)."
    ),
)

IBU = EntityMessages(
    entity="ibu",
    created="Data ibu berhasil didaftarkan!",
    updated="Data ibu berhasil diperbarui!",
    deleted="Data ibu berhasil dihapus!",
    not_found="Ibu tidak ditemukan.",
    internal="Gagal menyimpan data ibu.",
    unique={"ibu_nik_key": "NIK ini sudah terdaftar."},
    missing_parent={"ibu_id_kader_pendaftar_fkey": "Kader pendaftar tidak ditemukan."},
    delete_blocked={"anak_id_ibu_fkey": "Ibu tidak bisa dihapus karena masih terhubung dengan data anak."},
)

ANAK = EntityMessages(
    entity="anak",
    created="Data anak berhasil didaftarkan!",
    updated="Data anak berhasil diperbarui!",
    deleted="Data anak berhasil dihapus!",
    not_found="Data anak tidak ditemukan.",
    internal="Gagal menyimpan data anak.",
    unique={"anak_nik_anak_key": "NIK anak ini sudah terdaftar."},
    missing_parent={"anak_id_ibu_fkey": "ID Ibu tidak ditemukan."},
    missing_parent_default="ID Ibu tidak ditemukan.",
    delete_blocked_default="Anak tidak bisa dihapus karena masih terhubung dengan data perkembangan/imunisasi.",
)

PERKEMBANGAN = EntityMessages(
    entity="perkembangan",
    created="Data perkembangan berhasil dicatat!",
    updated="Data perkembangan berhasil diperbarui!",
    deleted="Data perkembangan berhasil dihapus!",
    not_found="Data perkembangan tidak ditemukan.",
    internal="Gagal menyimpan data perkembangan.",
    missing_parent={
        "perkembangan_id_anak_fkey": "ID Anak tidak ditemukan.",
        "perkembangan_id_kader_pencatat_fkey": "Kader pencatat tidak ditemukan.",
    },
)

MASTER_IMUNISASI = EntityMessages(
    entity="master_imunisasi",
    created="Master imunisasi berhasil ditambahkan!",
    updated="Master imunisasi berhasil diperbarui!",
    deleted="Master imunisasi berhasil dihapus!",
    not_found="Master imunisasi tidak ditemukan.",
    internal="Gagal menyimpan master imunisasi.",
    unique={"master_imunisasi_nama_imunisasi_key": "Nama imunisasi ini sudah digunakan."},
    delete_blocked_default="Master imunisasi tidak bisa dihapus karena terhubung dengan riwayat.",
)

RIWAYAT_IMUNISASI = EntityMessages(
    entity="riwayat_imunisasi",
    created="Riwayat imunisasi berhasil dicatat!",
    updated="Riwayat imunisasi berhasil diperbarui!",
    deleted="Riwayat imunisasi berhasil dihapus!",
    not_found="Riwayat imunisasi tidak ditemukan.",
    internal="Gagal menyimpan riwayat imunisasi.",
    missing_parent={
        "riwayat_imunisasi_id_anak_fkey": "ID Anak tidak ditemukan.",
        "riwayat_imunisasi_id_master_imunisasi_fkey": "ID Master Imunisasi tidak ditemukan.",
        "riwayat_imunisasi_id_kader_pencatat_fkey": "Kader pencatat tidak ditemukan.",
        "riwayat_imunisasi_id_kader_updater_fkey": "Kader pengubah tidak ditemukan.",
    },
    missing_parent_default="Relasi data tidak valid.",
)
