from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from posyandu.db.models.anak_model import JenisKelamin
from posyandu.schemas.common_schema import EntityRef, Name, OptionalNIK


class AnakIn(BaseModel):
    id_ibu: EntityRef
    nama_anak: Name
    nik_anak: OptionalNIK = None
    tanggal_lahir: date
    jenis_kelamin: JenisKelamin
    anak_ke: Optional[int] = Field(default=None, ge=1)
    berat_lahir_kg: Optional[float] = Field(default=None, ge=0)
    tinggi_lahir_cm: Optional[float] = Field(default=None, ge=0)


class AnakOut(BaseModel):
    id: int
    id_ibu: int
    nama_anak: str
    nik_anak: Optional[str] = None
    tanggal_lahir: date
    jenis_kelamin: JenisKelamin
    anak_ke: Optional[int] = None
    berat_lahir_kg: Optional[float] = None
    tinggi_lahir_cm: Optional[float] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    nama_ibu: Optional[str] = None
    nik_ibu: Optional[str] = None

    model_config = {
        "from_attributes": True
    }


class AnakSimple(BaseModel):
    id: int
    nama_anak: str
    nik_anak: Optional[str] = None
