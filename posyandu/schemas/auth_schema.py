from pydantic import BaseModel

from posyandu.schemas.common_schema import RequiredText


class LoginIn(BaseModel):
    username: RequiredText
    password: str


class KaderSummary(BaseModel):
    id: int
    nama_lengkap: str
    username: str

    model_config = {
        "from_attributes": True
    }


class LoginOut(BaseModel):
    message: str = "Login berhasil!"
    user: KaderSummary
    token: str
    token_type: str = "bearer"


class AuthenticatedKader(BaseModel):
    """Identity resolved from a verified bearer token."""
    id: int
