import logging

from posyandu.core.config import settings
from posyandu.core.exceptions import BadRequestException, NotFoundException
from posyandu.core.security import hash_password, verify_password
from posyandu.repositories.kader_repo import KaderRepository
from posyandu.schemas.kader_schema import ChangePasswordIn, KaderCreate, KaderUpdate
from posyandu.services.crud_service import CrudService
from posyandu.services.messages import KADER

logger = logging.getLogger(__name__)


def check_password_length(password: str, field_name: str = "Password") -> None:
    if not password:
        raise BadRequestException(f"{field_name} wajib diisi.")
    if len(password) < settings.MIN_PASSWORD_LENGTH:
        raise BadRequestException(f"{field_name} minimal {settings.MIN_PASSWORD_LENGTH} karakter.")


class KaderService(CrudService):
    repo: KaderRepository

    def __init__(self, repo: KaderRepository):
        super().__init__(repo, KADER)

    async def register(self, kader_in: KaderCreate) -> int:
        check_password_length(kader_in.password)
        values = kader_in.model_dump(exclude={"password"})
        values["password"] = hash_password(kader_in.password)
        return await self.create(values)

    async def update_profile(self, kader_id: int, kader_in: KaderUpdate) -> None:
        await self.update(kader_id, kader_in.model_dump())

    async def change_password(self, kader_id: int, body: ChangePasswordIn) -> None:
        check_password_length(body.new_password, "Password baru")

        with self.storage_errors():
            stored_hash = await self.repo.get_password_hash(kader_id)
        if stored_hash is None:
            raise NotFoundException(self.messages.not_found)

        if settings.PASSWORD_CHANGE_REQUIRES_CURRENT:
            if not body.current_password:
                raise BadRequestException("Password saat ini wajib diisi.")
            if not verify_password(body.current_password, stored_hash):
                logger.info("Password change for kader id=%s rejected: wrong current password", kader_id)
                raise BadRequestException("Password saat ini salah.")

        with self.storage_errors():
            updated = await self.repo.update_password(kader_id, hash_password(body.new_password))
        if not updated:
            raise NotFoundException(self.messages.not_found)
        logger.info("Password changed for kader id=%s", kader_id)
