import pytest

from oauth_dcr.adapters.configuration.config import Settings
from oauth_dcr.adapters.outbound.persistence.database import build_engine, build_session_factory, init_models
from oauth_dcr.adapters.outbound.persistence.repositories import (
    InMemoryClientRepository,
    SQLAlchemyClientRepository,
)
from oauth_dcr.application.dtos.client_dto import ClientInformation


class RecordingClientRepository(InMemoryClientRepository):
    """In-memory store that remembers every register_client call."""

    def __init__(self):
        super().__init__()
        self.calls = []

    async def register_client(self, client_info: ClientInformation) -> ClientInformation:
        self.calls.append(client_info)
        return await super().register_client(client_info)


@pytest.fixture
def clients_store():
    return RecordingClientRepository()


@pytest.fixture
def test_settings():
    return Settings(
        ENVIRONMENT="testing",
        CLIENT_STORE="memory",
        CLIENT_SECRET_EXPIRY_SECONDS=2592000,
        _env_file=None,
    )


@pytest.fixture
async def sqlite_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def sqlalchemy_store(sqlite_engine):
    return SQLAlchemyClientRepository(build_session_factory(sqlite_engine))
