import uuid

import pytest
from fastapi.testclient import TestClient

from oauth_dcr.adapters.outbound.persistence.repositories import ReadOnlyClientRepository
from oauth_dcr.domain.exceptions import DatabaseOperationException, RegistrationConfigurationException
from oauth_dcr.main import create_app


class BrokenClientRepository:
    async def get_client(self, client_id):
        return None

    async def register_client(self, client_info):
        raise DatabaseOperationException("Error registering client", original_error=RuntimeError("db password=hunter2"))


@pytest.fixture
def client(test_settings, clients_store):
    with TestClient(create_app(test_settings, clients_store=clients_store)) as test_client:
        yield test_client


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_register_public_client(client, clients_store):
    response = client.post(
        "/register",
        json={"token_endpoint_auth_method": "none", "redirect_uris": ["https://example.com/cb"]},
    )

    assert response.status_code == 201
    data = response.json()
    uuid.UUID(data["client_id"])
    assert "client_secret" not in data
    assert data.get("client_secret_expires_at", 0) == 0
    assert data["redirect_uris"] == ["https://example.com/cb"]
    assert data["token_endpoint_auth_method"] == "none"
    assert len(clients_store.calls) == 1


def test_register_confidential_client(client):
    response = client.post(
        "/register",
        json={"token_endpoint_auth_method": "client_secret_post", "redirect_uris": ["https://example.com/cb"]},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["client_secret"]
    assert data["client_secret_expires_at"] - data["client_id_issued_at"] == 2592000


def test_repeated_registration_creates_new_clients(client):
    payload = {"token_endpoint_auth_method": "none", "redirect_uris": ["https://example.com/cb"]}

    first = client.post("/register", json=payload).json()
    second = client.post("/register", json=payload).json()

    assert first["client_id"] != second["client_id"]


def test_register_missing_redirect_uris(client, clients_store):
    response = client.post("/register", json={"token_endpoint_auth_method": "none"})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "invalid_client_metadata"
    assert "redirect_uris" in data["error_description"]
    assert clients_store.calls == []


def test_register_malformed_json(client, clients_store):
    response = client.post(
        "/register",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_client_metadata"
    assert clients_store.calls == []


def test_register_non_object_body(client):
    response = client.post("/register", json=["https://example.com/cb"])

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_client_metadata"


def test_register_overlong_client_name(client, clients_store):
    response = client.post(
        "/register",
        json={"redirect_uris": ["https://example.com/cb"], "client_name": "x" * 5000},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "invalid_client_metadata"
    assert data["error_description"].startswith("client_name")
    assert clients_store.calls == []


def test_register_only_accepts_post(client):
    assert client.get("/register").status_code == 405


def test_cors_allows_any_origin(client):
    response = client.options(
        "/register",
        headers={"Origin": "https://app.example.org", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"

    response = client.post(
        "/register",
        json={"redirect_uris": ["https://example.com/cb"]},
        headers={"Origin": "https://app.example.org"},
    )
    assert response.headers["access-control-allow-origin"] == "*"


def test_store_failure_is_a_generic_500(test_settings, caplog):
    app = create_app(test_settings, clients_store=BrokenClientRepository())

    with TestClient(app) as test_client:
        response = test_client.post("/register", json={"redirect_uris": ["https://example.com/cb"]})

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert "hunter2" not in response.text
    assert "DATABASE_OPERATION_ERROR" in caplog.text


def test_store_without_registration_fails_app_creation(test_settings):
    with pytest.raises(RegistrationConfigurationException):
        create_app(test_settings, clients_store=ReadOnlyClientRepository())


def test_database_store_end_to_end(tmp_path):
    from oauth_dcr.adapters.configuration.config import Settings

    settings = Settings(
        CLIENT_STORE="database",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}",
        CLIENT_SECRET_EXPIRY_SECONDS=0,
        _env_file=None,
    )

    with TestClient(create_app(settings)) as test_client:
        response = test_client.post(
            "/register",
            json={"token_endpoint_auth_method": "client_secret_basic", "redirect_uris": ["https://example.com/cb"]},
        )

    assert response.status_code == 201
    data = response.json()
    assert data["client_secret"]
    assert data["client_secret_expires_at"] == 0
