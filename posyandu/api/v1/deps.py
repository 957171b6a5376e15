from typing import Annotated, Optional

from fastapi import Header, Path

from posyandu.core.exceptions import MalformedAuthHeaderException, MissingAuthHeaderException
from posyandu.core.security import verify_token
from posyandu.db.session import get_db_connection  # noqa: F401  re-exported for endpoint modules
from posyandu.schemas.auth_schema import AuthenticatedKader
from posyandu.schemas.common_schema import MAX_ID

# Path ids outside the INTEGER key range are rejected before any query runs.
EntityId = Annotated[int, Path(gt=0, le=MAX_ID)]


async def get_current_kader(authorization: Optional[str] = Header(default=None)) -> AuthenticatedKader:
    """Resolve the bearer token on the request to the kader it was issued to.

    The header is checked before any token parsing: it has to be present and
    of the form ``Bearer <token>``.
    """
    if not authorization:
        raise MissingAuthHeaderException()

    parts = authorization.split()
    if len(parts) != 2 or parts[0] != "Bearer":
        raise MalformedAuthHeaderException()

    kader_id = verify_token(parts[1])
    return AuthenticatedKader(id=kader_id)


def positive_int_or_none(value: Optional[str]) -> Optional[int]:
    """Lenient parse for optional id filters in query strings."""
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if 0 < number <= MAX_ID else None
