from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from posyandu.schemas.common_schema import Name, OptionalNIK, OptionalPhone, required_text

Username = required_text(50)


class KaderBase(BaseModel):
    nama_lengkap: Name
    nik: OptionalNIK = None
    no_telepon: OptionalPhone = None
    username: Username


class KaderCreate(KaderBase):
    password: str


class KaderUpdate(KaderBase):
    pass


class ChangePasswordIn(BaseModel):
    current_password: Optional[str] = None
    new_password: str


class KaderOut(BaseModel):
    id: int
    nama_lengkap: str
    nik: Optional[str] = None
    no_telepon: Optional[str] = None
    username: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
