"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from facilitaki.config import Settings
from facilitaki.main import create_app
from facilitaki.models import Account

TEST_PHONE = "+551199999999"
TEST_PASSWORD = "abc123"


class AuthHeaders(dict):
    """Dict subclass that also stores the account id and phone."""

    def __init__(self, *args, account_id: int | None = None, phone: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.account_id = account_id
        self.phone = phone


@pytest.fixture
def static_dir(tmp_path):
    """Static directory with an entry point, one asset and a dot-file."""
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text("<html><body>Facilitaki</body></html>")
    (directory / "style.css").write_text("body { color: #1e40af; }")
    (directory / ".env").write_text("SECRET_KEY=do-not-serve")
    return directory


@pytest.fixture
def settings(tmp_path, static_dir):
    """Settings pointing at a fresh SQLite database for each test."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        secret_key="test-secret-key",
        static_dir=str(static_dir),
        environment="test",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client running the real startup and shutdown hooks."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    """Session on the same database the running app uses."""
    session = app.state.database.session_factory()
    yield session
    session.close()


@pytest.fixture
def registered_account(client):
    """Register the example customer."""
    response = client.post(
        "/api/cadastrar",
        json={"nome": "Ana", "telefone": TEST_PHONE, "senha": TEST_PASSWORD},
    )
    assert response.status_code == 201
    return {"nome": "Ana", "telefone": TEST_PHONE, "senha": TEST_PASSWORD}


@pytest.fixture
def auth_headers(client, registered_account, db):
    """Log the example customer in and return bearer headers."""
    response = client.post(
        "/api/login",
        json={"telefone": registered_account["telefone"], "senha": registered_account["senha"]},
    )
    assert response.status_code == 200
    token = response.json()["token"]
    account = db.query(Account).filter(Account.phone == registered_account["telefone"]).one()

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        account_id=account.id,
        phone=account.phone,
    )
