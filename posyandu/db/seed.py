# posyandu/db/seed.py
"""Fill a development database with realistic posyandu data.

Run with ``python -m posyandu.db.seed`` after ``alembic upgrade head``.
"""
import asyncio
import random
from datetime import date, timedelta

from faker import Faker
from tqdm import tqdm

from posyandu.core.security import hash_password
from posyandu.db.session import close_db_pool, get_pool
from posyandu.repositories.anak_repo import AnakRepository
from posyandu.repositories.ibu_repo import IbuRepository
from posyandu.repositories.imunisasi_repo import MasterImunisasiRepository
from posyandu.repositories.kader_repo import KaderRepository

fake = Faker("id_ID")

NUM_KADER = 10
NUM_IBU = 200
MAX_ANAK_PER_IBU = 3
MAX_CHECKUPS_PER_ANAK = 12
BATCH_SIZE = 2000
DEFAULT_PASSWORD = "posyandu123"

# Jadwal imunisasi dasar (nama, usia ideal dalam bulan)
IMUNISASI_DASAR = [
    ("Hepatitis B0", 0, "Diberikan kurang dari 24 jam setelah lahir."),
    ("BCG", 1, "Pencegahan tuberkulosis."),
    ("Polio 1", 1, "Polio tetes (OPV) dosis pertama."),
    ("DPT-HB-Hib 1", 2, None),
    ("Polio 2", 2, None),
    ("PCV 1", 2, "Pencegahan pneumonia."),
    ("Rotavirus 1", 2, None),
    ("DPT-HB-Hib 2", 3, None),
    ("Polio 3", 3, None),
    ("PCV 2", 3, None),
    ("Rotavirus 2", 3, None),
    ("DPT-HB-Hib 3", 4, None),
    ("Polio 4", 4, None),
    ("IPV 1", 4, "Polio suntik."),
    ("Rotavirus 3", 4, None),
    ("Campak-Rubella", 9, None),
    ("IPV 2", 9, None),
    ("JE", 10, "Japanese encephalitis, daerah endemis."),
    ("PCV 3", 12, None),
    ("DPT-HB-Hib Lanjutan", 18, None),
    ("Campak-Rubella Lanjutan", 18, None),
]

STATUS_GIZI = ["Gizi Baik", "Gizi Baik", "Gizi Baik", "Gizi Kurang", "Gizi Lebih", "Gizi Buruk"]


def nik() -> str:
    return fake.unique.numerify("32##############")


def random_birth_date(max_age_months: int = 60) -> date:
    return date.today() - timedelta(days=random.randint(0, 30 * max_age_months))


async def seed():
    pool = await get_pool()

    async with pool.acquire() as conn:
        print("Membuat kader...")
        kader_repo = KaderRepository(conn)
        hashed_password = hash_password(DEFAULT_PASSWORD)
        kader_ids = []
        for i in range(NUM_KADER):
            kader_ids.append(await kader_repo.create({
                "nama_lengkap": fake.name(),
                "nik": nik(),
                "no_telepon": fake.phone_number(),
                "username": f"kader{i + 1}",
                "password": hashed_password,
            }))

        print("Membuat master imunisasi...")
        master_repo = MasterImunisasiRepository(conn)
        master = []
        for nama, usia, deskripsi in IMUNISASI_DASAR:
            master_id = await master_repo.create({
                "nama_imunisasi": nama,
                "usia_ideal_bulan": usia,
                "deskripsi": deskripsi,
            })
            master.append((master_id, usia))

        print("Membuat data ibu dan anak...")
        ibu_repo = IbuRepository(conn)
        anak_repo = AnakRepository(conn)
        anak_list = []
        for _ in tqdm(range(NUM_IBU), desc="Ibu"):
            ibu_id = await ibu_repo.create({
                "nama_lengkap": fake.name_female(),
                "nik": nik(),
                "no_telepon": fake.phone_number(),
                "alamat": fake.address(),
                "id_kader_pendaftar": random.choice(kader_ids),
            })
            for urutan in range(1, random.randint(1, MAX_ANAK_PER_IBU) + 1):
                jenis_kelamin = random.choice(["L", "P"])
                nama = fake.first_name_male() if jenis_kelamin == "L" else fake.first_name_female()
                tanggal_lahir = random_birth_date()
                anak_id = await anak_repo.create({
                    "id_ibu": ibu_id,
                    "nama_anak": nama,
                    "nik_anak": nik() if random.random() < 0.7 else None,
                    "tanggal_lahir": tanggal_lahir,
                    "jenis_kelamin": jenis_kelamin,
                    "anak_ke": urutan,
                    "berat_lahir_kg": round(random.uniform(2.3, 4.2), 2),
                    "tinggi_lahir_cm": round(random.uniform(45, 53), 1),
                })
                anak_list.append((anak_id, tanggal_lahir))

        print("Membuat riwayat perkembangan dan imunisasi...")
        perkembangan_sql = """
        INSERT INTO perkembangan
        (id_anak, tanggal_pemeriksaan, bb_kg, tb_cm, lk_cm, ll_cm, status_gizi, saran, id_kader_pencatat)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        """
        riwayat_sql = """
        INSERT INTO riwayat_imunisasi
        (id_anak, id_master_imunisasi, tanggal_imunisasi, catatan, id_kader_pencatat)
        VALUES ($1, $2, $3, $4, $5)
        """
        perkembangan_batch = []
        riwayat_batch = []
        today = date.today()

        for anak_id, tanggal_lahir in tqdm(anak_list, desc="Anak"):
            usia_bulan = (today - tanggal_lahir).days // 30
            for bulan in range(1, min(usia_bulan, MAX_CHECKUPS_PER_ANAK) + 1):
                perkembangan_batch.append((
                    anak_id,
                    tanggal_lahir + timedelta(days=30 * bulan),
                    round(3.2 + 0.45 * bulan + random.uniform(-0.5, 0.5), 2),
                    round(50 + 1.8 * bulan + random.uniform(-1.5, 1.5), 1),
                    round(35 + 0.9 * bulan + random.uniform(-1, 1), 1),
                    round(11 + 0.3 * bulan + random.uniform(-0.5, 0.5), 1),
                    random.choice(STATUS_GIZI),
                    fake.sentence(nb_words=8),
                    random.choice(kader_ids),
                ))
            for master_id, usia in master:
                if usia <= usia_bulan:
                    riwayat_batch.append((
                        anak_id,
                        master_id,
                        tanggal_lahir + timedelta(days=30 * usia + random.randint(0, 14)),
                        None,
                        random.choice(kader_ids),
                    ))

            if len(perkembangan_batch) >= BATCH_SIZE:
                await conn.executemany(perkembangan_sql, perkembangan_batch)
                perkembangan_batch.clear()
            if len(riwayat_batch) >= BATCH_SIZE:
                await conn.executemany(riwayat_sql, riwayat_batch)
                riwayat_batch.clear()

        if perkembangan_batch:
            await conn.executemany(perkembangan_sql, perkembangan_batch)
        if riwayat_batch:
            await conn.executemany(riwayat_sql, riwayat_batch)

        print(f"Seed selesai. Login dengan kader1 / {DEFAULT_PASSWORD}")

    await close_db_pool()


if __name__ == "__main__":
    asyncio.run(seed())
