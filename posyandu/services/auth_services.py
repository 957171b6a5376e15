import logging

from posyandu.core.exceptions import InvalidCredentialsException, NotFoundException
from posyandu.core.security import create_access_token, dummy_verify, verify_password
from posyandu.repositories.kader_repo import KaderRepository
from posyandu.schemas.auth_schema import KaderSummary, LoginOut

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, kader_repo: KaderRepository):
        self.kader_repo = kader_repo

    async def authenticate(self, username: str, password: str) -> dict:
        kader = await self.kader_repo.get_credentials(username)
        if not kader:
            # keep response timing close to the wrong-password path
            dummy_verify()
            logger.info("Login failed for username %s: unknown username", username)
            raise InvalidCredentialsException()
        if not verify_password(password, kader.get("password", "")):
            logger.info("Login failed for username %s: wrong password", username)
            raise InvalidCredentialsException()
        return kader

    def create_token_for_kader(self, kader: dict) -> str:
        return create_access_token(subject=kader["id"])

    async def login(self, username: str, password: str) -> LoginOut:
        kader = await self.authenticate(username, password)
        token = self.create_token_for_kader(kader)
        logger.info("Kader %s (id=%s) logged in", kader["username"], kader["id"])
        return LoginOut(user=KaderSummary(**kader), token=token)

    async def current_profile(self, kader_id: int) -> dict:
        kader = await self.kader_repo.get_by_id(kader_id)
        if kader is None:
            raise NotFoundException("Data kader tidak ditemukan.")
        return kader
