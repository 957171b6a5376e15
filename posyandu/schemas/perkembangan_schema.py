from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from posyandu.schemas.common_schema import EntityRef, OptionalText, optional_text

Measurement = Optional[float]
StatusGizi = optional_text(50)


class PerkembanganIn(BaseModel):
    id_anak: EntityRef
    tanggal_pemeriksaan: date
    bb_kg: Measurement = Field(default=None, ge=0)
    tb_cm: Measurement = Field(default=None, ge=0)
    lk_cm: Measurement = Field(default=None, ge=0)
    ll_cm: Measurement = Field(default=None, ge=0)
    status_gizi: StatusGizi = None
    saran: OptionalText = None


class PerkembanganOut(BaseModel):
    id: int
    id_anak: int
    tanggal_pemeriksaan: date
    bb_kg: Measurement = None
    tb_cm: Measurement = None
    lk_cm: Measurement = None
    ll_cm: Measurement = None
    status_gizi: Optional[str] = None
    saran: Optional[str] = None
    id_kader_pencatat: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    nama_anak: Optional[str] = None
    nama_kader: Optional[str] = None
    nik_anak: Optional[str] = None
    nama_ibu: Optional[str] = None

    model_config = {
        "from_attributes": True
    }


class LaporanPerkembanganOut(PerkembanganOut):
    nik_ibu: Optional[str] = None
