from __future__ import annotations

import pytest

from src.assistance_register.assistance_register.container import build_container
from src.assistance_register.assistance_register.main import create_app
from src.assistance_register.assistance_register.resolver.model import Resolved, Unresolved


class FakeResolver:
    def __init__(self, outcomes: dict):
        self._outcomes = outcomes

    def resolve(self, code: str):
        return self._outcomes.get(code, Unresolved())


class SyncExecutor:
    def submit(self, fn, *args, **kwargs):
        fn(*args, **kwargs)


@pytest.fixture
def container(tmp_path):
    app_config = {
        "LEDGER_PATH": str(tmp_path / "data" / "assistance_data.csv"),
        "EXPORT_DIR": str(tmp_path / "exports"),
        "RESOLVER_URL": "http://resolver.test/",
        "SCAN_COOLDOWN_SECONDS": 0,
        "ROLES": ("Docente ISTER", "Estudiante ISTER"),
    }
    return build_container(
        app_config=app_config,
        resolver=FakeResolver({"https://x/1": Resolved(name="Ana", email="a@b.com", external_id="123")}),
        executor=SyncExecutor(),
        scheduler=lambda delay, cb: None,
    )


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def test_scan_cycle_over_http(client, container):
    assert client.post("/api/scan/start", json={"mode": "single"}).status_code == 202
    container.scan_controller.drain()

    resp = client.post("/api/scan/code", json={"code": "https://x/1"})
    assert resp.status_code == 202
    container.scan_controller.drain()

    rows = client.get("/api/ledger/rows").get_json()
    assert rows["count"] == 1
    assert rows["rows"][0]["source"] == "https://x/1"
    assert rows["rows"][0]["registered_at"] == "null"

    notices = client.get("/api/notices").get_json()["notices"]
    assert notices[-1]["message"] == "Gracias por Asistir Ana"
    assert client.get("/api/scan/status").get_json()["session"]["state"] == "IDLE"


def test_code_without_active_scan_is_conflict(client):
    resp = client.post("/api/scan/code", json={"code": "https://x/1"})

    assert resp.status_code == 409
    assert resp.get_json()["success"] is False


def test_invalid_mode_is_bad_request(client):
    assert client.post("/api/scan/start", json={"mode": "turbo"}).status_code == 400


def test_cancel_pending_scan(client, container):
    client.post("/api/scan/start", json={"mode": "continuous"})
    container.scan_controller.drain()

    assert client.post("/api/scan/cancel").status_code == 202
    container.scan_controller.drain()

    assert client.get("/api/scan/status").get_json()["session"]["state"] == "IDLE"
    assert client.post("/api/scan/cancel").status_code == 409


def test_image_upload_requires_file(client):
    assert client.post("/api/scan/image", data={}).status_code == 400


def test_manual_entry_validation_and_success(client):
    bad = client.post("/api/manual", json={"identificacion": "1", "nombre": "Ana", "correo": "a@b.com", "rol": ""})
    assert bad.status_code == 400

    ok = client.post(
        "/api/manual",
        json={"identificacion": "1", "nombre": "Ana", "correo": "a@b.com", "rol": "Docente ISTER"},
    )
    assert ok.status_code == 201
    assert ok.get_json()["record"]["source"] == "MANUAL"

    assert client.get("/api/manual/roles").get_json()["roles"] == ["Docente ISTER", "Estudiante ISTER"]
    assert client.get("/api/ledger/rows").get_json()["count"] == 1


def test_reset_and_export(client, container):
    assert client.post("/api/ledger/export").status_code == 404
    assert client.post("/api/ledger/reset").get_json()["outcome"] == "NOTHING_TO_RESET"

    client.post(
        "/api/manual",
        json={"identificacion": "1", "nombre": "Ana", "correo": "a@b.com", "rol": "Docente ISTER"},
    )

    exported = client.post("/api/ledger/export")
    assert exported.status_code == 201
    assert exported.get_json()["path"].endswith(".csv")

    download = client.get("/api/ledger/download")
    assert download.status_code == 200
    assert download.data.startswith(b"URL,Correo,FechaRegistro,Identificacion,Nombre,Rol\n")
    download.close()

    assert client.post("/api/ledger/reset").get_json()["outcome"] == "DELETED"
    assert not container.ledger.exists()


@pytest.mark.parametrize("path", ["/api/scan/start", "/api/scan/code", "/api/manual"])
def test_json_body_that_is_not_an_object_is_bad_request(client, path):
    resp = client.post(path, json=["https://x/1"])

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
