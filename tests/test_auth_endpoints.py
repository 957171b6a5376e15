from datetime import datetime, timedelta, timezone

import pytest

from posyandu.core.config import settings
from posyandu.core.security import create_access_token


def register(client, **overrides):
    payload = {"username": "k1", "password": "secret1", "nama_lengkap": "A"}
    payload.update(overrides)
    return client.post("/api/kader", json=payload)


def test_register_then_login(client, store):
    response = register(client)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Kader baru berhasil didaftarkan!"
    new_id = body["id"]

    # only the hash is stored
    assert store.kader.rows[new_id]["password"] != "secret1"

    response = client.post("/api/login", json={"username": "k1", "password": "secret1"})
    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["user"] == {"id": new_id, "nama_lengkap": "A", "username": "k1"}


def test_wrong_password_and_unknown_user_look_the_same(client):
    register(client)

    wrong_password = client.post("/api/login", json={"username": "k1", "password": "wrong"})
    unknown_user = client.post("/api/login", json={"username": "nobody", "password": "secret1"})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"error": "Username atau Password salah"}


def test_login_requires_both_fields(client):
    response = client.post("/api/login", json={"username": "k1"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_register_duplicate_username_conflicts(client):
    assert register(client).status_code == 201

    response = register(client, nama_lengkap="B")

    assert response.status_code == 409
    assert response.json() == {"error": "Username ini sudah digunakan."}


def test_register_rejects_short_password(client):
    response = register(client, password="abc")

    assert response.status_code == 400
    assert "minimal" in response.json()["error"]


def test_register_with_empty_nik_stores_null(client, store):
    response = register(client, nik="")
    assert response.status_code == 201
    assert store.kader.rows[response.json()["id"]]["nik"] is None

    # a second kader without NIK does not trip the uniqueness check
    assert register(client, username="k2", nik="").status_code == 201


def test_register_rejects_nik_longer_than_16(client):
    response = register(client, nik="1" * 17)

    assert response.status_code == 400


def test_me_returns_authenticated_kader(client, auth_headers):
    response = client.get("/api/me", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 1
    assert body["username"] == "siti"
    assert "password" not in body


def test_me_for_deleted_kader_is_not_found(client):
    headers = {"Authorization": f"Bearer {create_access_token(99)}"}

    response = client.get("/api/me", headers=headers)

    assert response.status_code == 404


def test_missing_authorization_header(client):
    response = client.get("/api/ibu")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json() == {"error": "Akses Ditolak. Header Authorization tidak ada."}


@pytest.mark.parametrize("value", ["Token abc", "Bearer", "Bearer a b", "bearer abc"])
def test_malformed_authorization_header(client, value):
    response = client.get("/api/ibu", headers={"Authorization": value})

    assert response.status_code == 401
    assert response.json() == {"error": "Akses Ditolak. Format header Authorization salah."}


def test_expired_token_is_refused(client, kader_id):
    token = create_access_token(kader_id, issued_at=datetime.now(timezone.utc) - timedelta(hours=25))

    response = client.get("/api/ibu", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"error": "Token sudah kadaluarsa atau belum aktif."}


def test_garbled_token_is_refused(client):
    response = client.get("/api/ibu", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401
    assert response.json() == {"error": "Token tidak berformat benar."}


def test_auth_is_checked_before_the_body(client):
    response = client.post("/api/ibu", json={})

    assert response.status_code == 401


def test_change_password_requires_current_password(client, store, auth_headers, kader_id):
    url = f"/api/kader/{kader_id}/password"

    missing = client.put(url, json={"new_password": "barubaru"}, headers=auth_headers)
    wrong = client.put(url, json={"current_password": "salah", "new_password": "barubaru"}, headers=auth_headers)
    ok = client.put(url, json={"current_password": "rahasia1", "new_password": "barubaru"}, headers=auth_headers)

    assert missing.status_code == 400
    assert wrong.status_code == 400
    assert wrong.json() == {"error": "Password saat ini salah."}
    assert ok.status_code == 200
    assert ok.json() == {"message": "Password berhasil diperbarui!"}

    login = client.post("/api/login", json={"username": "siti", "password": "barubaru"})
    assert login.status_code == 200


def test_change_password_enforces_minimum_length(client, auth_headers, kader_id):
    response = client.put(
        f"/api/kader/{kader_id}/password",
        json={"current_password": "rahasia1", "new_password": "123"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Password baru minimal 6 karakter."}


def test_change_password_for_missing_kader(client, auth_headers):
    response = client.put(
        "/api/kader/99/password",
        json={"current_password": "rahasia1", "new_password": "barubaru"},
        headers=auth_headers,
    )

    assert response.status_code == 404


def test_register_accepts_sixteen_character_nik(client, store):
    response = register(client, nik="3201234567890123")

    assert response.status_code == 201
    assert store.kader.rows[response.json()["id"]]["nik"] == "3201234567890123"


def test_register_rejects_username_longer_than_column(client, store):
    response = register(client, username="u" * 51)

    assert response.status_code == 400
    assert store.kader.rows == {}


def test_change_password_without_current_when_policy_allows(client, monkeypatch, auth_headers, kader_id):
    monkeypatch.setattr(settings, "PASSWORD_CHANGE_REQUIRES_CURRENT", False)

    response = client.put(
        f"/api/kader/{kader_id}/password",
        json={"new_password": "barubaru"},
        headers=auth_headers,
    )
    short = client.put(
        f"/api/kader/{kader_id}/password",
        json={"new_password": "123"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert short.status_code == 400
    assert client.post("/api/login", json={"username": "siti", "password": "barubaru"}).status_code == 200
