# posyandu/services/crud_service.py

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

import asyncpg

from posyandu.core.exceptions import (
    ConflictException,
    InternalServerErrorException,
    NotFoundException,
)
from posyandu.db.errors import ConstraintViolation, ViolationKind
from posyandu.repositories.base_repo import BaseRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityMessages:
    """User-facing texts for one entity, keyed by constraint name where relevant."""

    entity: str
    created: str
    updated: str
    deleted: str
    not_found: str
    internal: str
    unique: dict[str, str] = field(default_factory=dict)
    missing_parent: dict[str, str] = field(default_factory=dict)
    delete_blocked: dict[str, str] = field(default_factory=dict)
    unique_default: str = "Data unik sudah ada."
    missing_parent_default: str = "Data relasi tidak ditemukan."
    delete_blocked_default: str = "Data tidak bisa dihapus karena masih terhubung dengan data lain."


class CrudService:
    def __init__(self, repo: BaseRepository, messages: EntityMessages):
        self.repo = repo
        self.messages = messages

    async def list(self, search: Optional[str] = None, parent_id: Optional[int] = None) -> list[dict]:
        with self.storage_errors():
            return await self.repo.list(search=search, parent_id=parent_id)

    async def get(self, entity_id: int) -> dict:
        with self.storage_errors():
            record = await self.repo.get_by_id(entity_id)
        if record is None:
            raise NotFoundException(self.messages.not_found)
        return record

    async def create(self, values: dict) -> int:
        with self.storage_errors():
            new_id = await self.repo.create(values)
        logger.info("Created %s id=%s", self.messages.entity, new_id)
        return new_id

    async def update(self, entity_id: int, values: dict) -> None:
        with self.storage_errors():
            found = await self.repo.update(entity_id, values)
        if not found:
            raise NotFoundException(self.messages.not_found)
        logger.info("Updated %s id=%s", self.messages.entity, entity_id)

    async def delete(self, entity_id: int) -> None:
        with self.storage_errors(deleting=True):
            found = await self.repo.delete(entity_id)
        if not found:
            raise NotFoundException(self.messages.not_found)
        logger.info("Deleted %s id=%s", self.messages.entity, entity_id)

    @contextmanager
    def storage_errors(self, deleting: bool = False) -> Iterator[None]:
        try:
            yield
        except ConstraintViolation as e:
            logger.info("%s write rejected by constraint %s", self.messages.entity, e.constraint or e.kind.value)
            raise self.translate(e, deleting) from e
        except asyncpg.PostgresError:
            logger.exception("Storage error on %s", self.messages.entity)
            raise InternalServerErrorException(self.messages.internal)

    def translate(self, violation: ConstraintViolation, deleting: bool = False):
        m = self.messages
        if violation.kind == ViolationKind.UNIQUE:
            return ConflictException(m.unique.get(violation.constraint, m.unique_default))
        # A foreign key error on delete means dependants still point at the row;
        # on insert/update it means the referenced parent does not exist.
        if deleting:
            return ConflictException(m.delete_blocked.get(violation.constraint, m.delete_blocked_default))
        return NotFoundException(m.missing_parent.get(violation.constraint, m.missing_parent_default))
