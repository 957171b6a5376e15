"""Typed view of the constraint errors PostgreSQL reports through asyncpg."""

import enum
from contextlib import contextmanager
from typing import Iterator, Optional

from asyncpg import ForeignKeyViolationError, UniqueViolationError


class ViolationKind(str, enum.Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"


class ConstraintViolation(Exception):
    """A write rejected by a unique or foreign-key constraint."""

    def __init__(self, kind: ViolationKind, constraint: Optional[str] = None):
        super().__init__(f"{kind.value} violation on {constraint or '<unknown>'}")
        self.kind = kind
        self.constraint = constraint or ""


@contextmanager
def constraint_guard() -> Iterator[None]:
    try:
        yield
    except UniqueViolationError as e:
        raise ConstraintViolation(ViolationKind.UNIQUE, e.constraint_name) from e
    except ForeignKeyViolationError as e:
        raise ConstraintViolation(ViolationKind.FOREIGN_KEY, e.constraint_name) from e
