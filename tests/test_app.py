"""Application startup, static serving and failure handling tests."""

import logging

from fastapi.testclient import TestClient
from sqlalchemy import inspect

from facilitaki.main import create_app


def test_startup_creates_tables(app, client):
    """Test the lifespan hook creates the schema."""
    tables = inspect(app.state.database.engine).get_table_names()
    assert {"clientes", "pedidos", "contatos"} <= set(tables)


def test_create_tables_is_idempotent(app, client, registered_account):
    app.state.database.create_tables()
    response = client.post(
        "/api/login",
        json={"telefone": registered_account["telefone"], "senha": registered_account["senha"]},
    )
    assert response.status_code == 200


def test_shutdown_disposes_pool(app):
    with TestClient(app):
        assert app.state.database.engine is not None
    assert app.state.database.engine is None


def test_serves_entry_point(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Facilitaki" in response.text


def test_serves_static_asset(client):
    response = client.get("/style.css")
    assert response.status_code == 200
    assert "#1e40af" in response.text


def test_unknown_path_falls_back_to_entry_point(client):
    """Test client-side routes get the single-page entry point."""
    response = client.get("/dashboard/pedidos")
    assert response.status_code == 200
    assert "Facilitaki" in response.text


def test_dot_files_are_not_served(client):
    response = client.get("/.env")
    assert "do-not-serve" not in response.text
    assert "Facilitaki" in response.text


def test_missing_static_dir_serves_api_only(settings, tmp_path):
    app = create_app(settings.model_copy(update={"static_dir": str(tmp_path / "missing")}))
    with TestClient(app) as client:
        assert client.get("/").status_code == 404
        assert client.get("/health").status_code == 200


def test_unreachable_database(settings, tmp_path, caplog):
    """Test the app starts, logs the failure and answers 500 on database routes."""
    caplog.set_level(logging.INFO)
    url = f"sqlite:///{tmp_path / 'no-such-dir' / 'test.db'}"
    app = create_app(settings.model_copy(update={"database_url": url}))

    with TestClient(app) as client:
        assert "Could not connect to database" in caplog.text

        response = client.post(
            "/api/cadastrar", json={"nome": "Ana", "telefone": "840000001", "senha": "abc123"}
        )
        assert response.status_code == 500
        assert response.json()["erro"] == "Erro ao cadastrar cliente"
        assert response.json()["detalhe"]

        response = client.post("/api/login", json={"telefone": "840000001", "senha": "abc123"})
        assert response.status_code == 500
        assert response.json() == {"erro": "Erro ao fazer login"}


def test_error_details_can_be_hidden(settings, tmp_path):
    url = f"sqlite:///{tmp_path / 'no-such-dir' / 'test.db'}"
    app = create_app(
        settings.model_copy(update={"database_url": url, "expose_error_details": False})
    )
    with TestClient(app) as client:
        response = client.post(
            "/api/cadastrar", json={"nome": "Ana", "telefone": "840000001", "senha": "abc123"}
        )
        assert response.status_code == 500
        assert response.json() == {"erro": "Erro ao cadastrar cliente"}


def test_recovers_when_database_comes_back(settings, tmp_path):
    """Test tables are created on first use after starting without a database."""
    database_dir = tmp_path / "late-db"
    url = f"sqlite:///{database_dir / 'test.db'}"
    app = create_app(settings.model_copy(update={"database_url": url}))

    with TestClient(app) as client:
        payload = {"nome": "Ana", "telefone": "840000001", "senha": "abc123"}
        assert client.post("/api/cadastrar", json=payload).status_code == 500

        database_dir.mkdir()

        assert client.post("/api/cadastrar", json=payload).status_code == 201
        response = client.post("/api/login", json={"telefone": "840000001", "senha": "abc123"})
        assert response.status_code == 200
        assert app.state.database.tables_ready


def test_unexpected_error_is_logged_with_traceback(app, monkeypatch, caplog):
    def explode(db, contact):
        raise RuntimeError("boom")

    monkeypatch.setattr("facilitaki.api.contact.save_contact_message", explode)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.post(
            "/api/contato", json={"nome": "Carla", "telefone": "841112233", "mensagem": "Olá"}
        )

    assert response.status_code == 500
    assert response.json() == {"erro": "Erro interno do servidor"}
    records = [record for record in caplog.records if "Unhandled error" in record.getMessage()]
    assert records
    assert records[0].exc_info is not None
    assert "boom" in caplog.text
