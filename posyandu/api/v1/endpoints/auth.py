from asyncpg import Connection
from fastapi import APIRouter, Depends

from posyandu.api.v1.deps import get_current_kader, get_db_connection
from posyandu.repositories.kader_repo import KaderRepository
from posyandu.schemas.auth_schema import AuthenticatedKader, LoginIn, LoginOut
from posyandu.schemas.kader_schema import KaderOut
from posyandu.services.auth_services import AuthService

router = APIRouter(tags=["auth"])


def get_auth_service(conn: Connection = Depends(get_db_connection)) -> AuthService:
    return AuthService(KaderRepository(conn))


@router.post("/login", response_model=LoginOut)
async def login(body: LoginIn, auth_service: AuthService = Depends(get_auth_service)):
    return await auth_service.login(body.username, body.password)


@router.get("/me", response_model=KaderOut)
async def read_me(
        current_kader: AuthenticatedKader = Depends(get_current_kader),
        auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.current_profile(current_kader.id)
