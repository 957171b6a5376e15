from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from posyandu.schemas.common_schema import EntityRef, Name, OptionalText


class MasterImunisasiIn(BaseModel):
    nama_imunisasi: Name
    usia_ideal_bulan: int = Field(default=0, ge=0)
    deskripsi: OptionalText = None


class MasterImunisasiOut(BaseModel):
    id: int
    nama_imunisasi: str
    usia_ideal_bulan: int
    deskripsi: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class MasterImunisasiSimple(BaseModel):
    id: int
    nama_imunisasi: str
    usia_ideal_bulan: int


class RiwayatImunisasiIn(BaseModel):
    id_anak: EntityRef
    id_master_imunisasi: EntityRef
    tanggal_imunisasi: date
    catatan: OptionalText = None


class RiwayatImunisasiOut(BaseModel):
    id: int
    id_anak: int
    id_master_imunisasi: int
    id_kader_pencatat: int
    id_kader_updater: Optional[int] = None
    tanggal_imunisasi: date
    catatan: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    nama_anak: Optional[str] = None
    nik_anak: Optional[str] = None
    nama_imunisasi: Optional[str] = None
    nama_kader: Optional[str] = None
    nama_kader_updater: Optional[str] = None

    model_config = {
        "from_attributes": True
    }
