import hashlib
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jws, jwt
from jose.exceptions import ExpiredSignatureError, JWSError, JWTClaimsError, JWTError
from passlib.context import CryptContext

from posyandu.core.config import settings
from posyandu.core.exceptions import (
    SignatureInvalidException,
    TokenExpiredException,
    TokenInvalidException,
    TokenMalformedException,
    TokenNotYetValidException,
)

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _digest(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def hash_password(password: str) -> str:
    return pwd_context.hash(_digest(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(_digest(plain_password), hashed_password)
    except ValueError:
        # stored value is not a hash passlib recognises
        return False


def dummy_verify() -> None:
    """Spend the same time as a real verification when the username is unknown."""
    pwd_context.dummy_verify()


def create_access_token(
    subject: int,
    expires_delta: Optional[timedelta] = None,
    issued_at: Optional[datetime] = None,
) -> str:
    now = issued_at or datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": str(subject),
        "kader_id": int(subject),
        "iat": now,
        "nbf": now,
        "exp": now + expires_delta,
        "iss": settings.JWT_ISSUER,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Validate a bearer token and return its claims.

    Each failure kind is raised as its own 401 exception so the server log
    can tell them apart.
    """
    try:
        unverified_claims = jwt.get_unverified_claims(token)
        header = jwt.get_unverified_header(token)
    except JWTError:
        logger.info("Token rejected: malformed")
        raise TokenMalformedException()

    try:
        jws.verify(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWSError:
        if header.get("alg") != settings.ALGORITHM:
            logger.info("Token rejected: unexpected algorithm %s", header.get("alg"))
            raise TokenInvalidException()
        logger.info("Token rejected: invalid signature")
        raise SignatureInvalidException()

    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            issuer=settings.JWT_ISSUER,
            options={"require_exp": True, "require_sub": True},
        )
    except ExpiredSignatureError:
        logger.info("Token rejected: expired")
        raise TokenExpiredException()
    except JWTClaimsError as e:
        if _not_yet_valid(unverified_claims):
            logger.info("Token rejected: not yet valid")
            raise TokenNotYetValidException()
        logger.info("Token rejected: %s", e)
        raise TokenInvalidException()
    except JWTError as e:
        logger.info("Token rejected: %s", e)
        raise TokenInvalidException()


def verify_token(token: str) -> int:
    """Return the kader id a valid token was issued to."""
    payload = decode_access_token(token)
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise TokenInvalidException()


def _not_yet_valid(claims: dict) -> bool:
    try:
        nbf = int(claims.get("nbf"))
    except (TypeError, ValueError):
        return False
    return nbf > int(datetime.now(timezone.utc).timestamp())
