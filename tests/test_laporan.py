from datetime import date, datetime, timezone

import pytest


def test_wali_report_filters_on_registration_time(client, store, auth_headers):
    response = client.get(
        "/api/laporan/wali",
        params={"start": "2024-01-01", "end": "2024-01-31"},
        headers=auth_headers,
    )

    conn = store.laporan_conn
    assert response.status_code == 200
    assert response.json() == []
    assert "created_at >= $1 AND created_at < $2" in conn.last_sql
    assert "ORDER BY created_at DESC, id DESC" in conn.last_sql
    # the end day is inclusive
    assert conn.last_args == (
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        datetime(2024, 2, 1, tzinfo=timezone.utc),
    )


def test_perkembangan_report_filters_on_exam_date(client, store, auth_headers):
    client.get("/api/laporan/perkembangan", params={"start": "2024-03-01", "end": "2024-03-31"}, headers=auth_headers)

    conn = store.laporan_conn
    assert "p.tanggal_pemeriksaan >= $1 AND p.tanggal_pemeriksaan < $2" in conn.last_sql
    assert conn.last_args == (date(2024, 3, 1), date(2024, 4, 1))


def test_open_ended_report(client, store, auth_headers):
    client.get("/api/laporan/anak", params={"end": "2024-12-31"}, headers=auth_headers)

    conn = store.laporan_conn
    assert "a.created_at < $1" in conn.last_sql
    assert ">=" not in conn.last_sql
    assert conn.last_args == (datetime(2025, 1, 1, tzinfo=timezone.utc),)


def test_report_without_dates_returns_everything(client, store, auth_headers):
    client.get("/api/laporan/imunisasi", headers=auth_headers)

    assert "WHERE" not in store.laporan_conn.last_sql
    assert store.laporan_conn.last_args == ()


def test_imunisasi_report_rows(client, store, auth_headers):
    store.laporan_conn._fetch = [{
        "id": 3,
        "id_anak": 1,
        "id_master_imunisasi": 2,
        "id_kader_pencatat": 1,
        "id_kader_updater": None,
        "tanggal_imunisasi": date(2024, 5, 2),
        "catatan": None,
        "created_at": datetime(2024, 5, 2, 8, 30, tzinfo=timezone.utc),
        "updated_at": None,
        "nama_anak": "Budi",
        "nik_anak": None,
        "nama_imunisasi": "BCG",
        "nama_kader": "Siti Aminah",
        "nama_kader_updater": None,
    }]

    rows = client.get("/api/laporan/imunisasi", headers=auth_headers).json()

    assert len(rows) == 1
    assert rows[0]["nama_imunisasi"] == "BCG"
    assert rows[0]["tanggal_imunisasi"] == "2024-05-02"


def test_unknown_report_type(client, auth_headers):
    response = client.get("/api/laporan/keuangan", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Tipe laporan tidak valid."}


@pytest.mark.parametrize("params", [{"start": "01-01-2024"}, {"end": "2024-13-01"}])
def test_bad_report_dates(client, store, auth_headers, params):
    response = client.get("/api/laporan/wali", params=params, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Format tanggal tidak valid (YYYY-MM-DD)"}
    assert store.laporan_conn.calls == []


def test_report_requires_authentication(client):
    assert client.get("/api/laporan/wali").status_code == 401


def test_report_ending_on_last_calendar_day(client, store, auth_headers):
    response = client.get(
        "/api/laporan/anak",
        params={"start": "2024-01-01", "end": "9999-12-31"},
        headers=auth_headers,
    )

    conn = store.laporan_conn
    assert response.status_code == 200
    assert "a.created_at >= $1" in conn.last_sql
    assert "a.created_at <" not in conn.last_sql
    assert conn.last_args == (datetime(2024, 1, 1, tzinfo=timezone.utc),)
