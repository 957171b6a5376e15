from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from posyandu.core.config import settings
from posyandu.core.exceptions import (
    SignatureInvalidException,
    TokenExpiredException,
    TokenInvalidException,
    TokenMalformedException,
    TokenNotYetValidException,
)
from posyandu.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
    verify_token,
)


def test_hash_is_salted_and_verifies():
    first = hash_password("secret1")
    second = hash_password("secret1")

    assert first != second
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)
    assert not verify_password("secret2", first)


def test_long_passwords_are_not_truncated():
    base = "x" * 80
    hashed = hash_password(base + "a")

    assert not verify_password(base + "b", hashed)


def test_verify_password_rejects_garbage_hash():
    assert not verify_password("secret1", "")
    assert not verify_password("secret1", "not-a-bcrypt-hash")


def test_token_round_trip_carries_kader_id():
    token = create_access_token(42)
    claims = decode_access_token(token)

    assert verify_token(token) == 42
    assert claims["sub"] == "42"
    assert claims["kader_id"] == 42
    assert claims["iss"] == settings.JWT_ISSUER
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_expired_token_is_rejected():
    token = create_access_token(7, issued_at=datetime.now(timezone.utc) - timedelta(hours=25))

    with pytest.raises(TokenExpiredException):
        verify_token(token)


def test_token_not_yet_valid_is_rejected():
    token = create_access_token(7, issued_at=datetime.now(timezone.utc) + timedelta(hours=1))

    with pytest.raises(TokenNotYetValidException):
        verify_token(token)


def test_token_signed_with_other_secret_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "7", "iat": now, "nbf": now, "exp": now + timedelta(hours=1), "iss": settings.JWT_ISSUER},
        "a-completely-different-secret",
        algorithm="HS256",
    )

    with pytest.raises(SignatureInvalidException):
        verify_token(token)


def test_token_with_unexpected_algorithm_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "7", "iat": now, "nbf": now, "exp": now + timedelta(hours=1), "iss": settings.JWT_ISSUER},
        settings.JWT_SECRET_KEY,
        algorithm="HS512",
    )

    with pytest.raises(TokenInvalidException):
        verify_token(token)


def test_token_from_other_issuer_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "7", "iat": now, "nbf": now, "exp": now + timedelta(hours=1), "iss": "someone-else"},
        settings.JWT_SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )

    with pytest.raises(TokenInvalidException):
        verify_token(token)


@pytest.mark.parametrize("token", ["", "abc", "not.a.jwt"])
def test_garbled_token_is_malformed(token):
    with pytest.raises(TokenMalformedException):
        verify_token(token)
