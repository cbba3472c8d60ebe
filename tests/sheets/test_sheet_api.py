from __future__ import annotations

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from flask import Flask

from daily_attendance.sheets.controller import register
from daily_attendance.sheets.model import SheetKey, SheetMetadata


class InMemorySheets:
    def __init__(self, items):
        self._items = {m.key: m for m in items}
        self.last_limit = None

    def get(self, key):
        return self._items.get(key)

    def list_recent(self, dept, *, limit):
        self.last_limit = limit
        items = [m for m in self._items.values() if m.key.dept == dept]
        items.sort(key=lambda m: m.key.sheet_date, reverse=True)
        return items[:limit]


def _meta(day: int) -> SheetMetadata:
    key = SheetKey(dept="ECA", sheet_date=date(2026, 10, day))
    return SheetMetadata(
        key=key,
        storage_path=key.storage_path,
        signed_url=f"https://storage.example/{key}",
        created_at=datetime(2026, 10, day, 6, 0, 0),
    )


@pytest.fixture
def sheets():
    return InMemorySheets([_meta(18), _meta(19)])


@pytest.fixture
def client(sheets):
    app = Flask(__name__)
    register(app, SimpleNamespace(sheets_repo=sheets))
    return app.test_client()


def test_get_sheet_metadata(client):
    resp = client.get("/api/sheets/ECA/2026-10-19")

    assert resp.status_code == 200
    assert resp.get_json()["sheet"] == {
        "date": "2026-10-19",
        "dept": "ECA",
        "storagePath": "attendance_sheets/ECA_2026-10-19.xlsx",
        "signedUrl": "https://storage.example/ECA_2026-10-19",
        "createdAt": "2026-10-19T06:00:00",
    }


def test_missing_sheet_is_404(client):
    assert client.get("/api/sheets/ECA/2026-10-01").status_code == 404


def test_malformed_date_is_400(client):
    resp = client.get("/api/sheets/ECA/19-10-2026")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_list_recent_newest_first(client, sheets):
    resp = client.get("/api/sheets/ECA?limit=1")

    assert resp.status_code == 200
    assert [s["date"] for s in resp.get_json()["sheets"]] == ["2026-10-19"]
    assert sheets.last_limit == 1


def test_list_uses_default_limit(client, sheets):
    client.get("/api/sheets/ECA")

    assert sheets.last_limit == 30


def test_invalid_limit_is_400(client):
    assert client.get("/api/sheets/ECA?limit=0").status_code == 400
