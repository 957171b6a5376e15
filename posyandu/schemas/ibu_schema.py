from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from posyandu.schemas.common_schema import NIK, Name, Phone, RequiredText


class IbuIn(BaseModel):
    """Payload for registering or updating a mother (wali)."""
    nama_lengkap: Name
    nik: NIK
    no_telepon: Phone
    alamat: RequiredText


class IbuOut(BaseModel):
    id: int
    nama_lengkap: Optional[str] = None
    nik: Optional[str] = None
    no_telepon: Optional[str] = None
    alamat: Optional[str] = None
    id_kader_pendaftar: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class IbuOption(BaseModel):
    id: int
    nama_lengkap: Optional[str] = None
