# posyandu/api/v1/routers.py
from fastapi import APIRouter

from posyandu.api.v1.endpoints import (
    anak,
    auth,
    ibu,
    kader,
    laporan,
    master_imunisasi,
    perkembangan,
    riwayat_imunisasi,
)
from posyandu.core.config import settings

router = APIRouter(prefix=settings.API_PREFIX)

router.include_router(auth.router)
router.include_router(kader.router)
router.include_router(ibu.router)
router.include_router(anak.router)
router.include_router(perkembangan.router)
router.include_router(master_imunisasi.router)
router.include_router(riwayat_imunisasi.router)
router.include_router(laporan.router)
