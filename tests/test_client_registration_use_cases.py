import asyncio

import pytest

from oauth_dcr.adapters.outbound.persistence.repositories import ReadOnlyClientRepository
from oauth_dcr.application.dtos.client_dto import ClientInformation, RegistrationError
from oauth_dcr.application.use_cases.client_registration_use_cases import (
    DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS,
    ClientRegistrationService,
)
from oauth_dcr.domain.exceptions import (
    ClientRegistrationException,
    ClientStoreException,
    RegistrationConfigurationException,
)


class FailingClientRepository:
    def __init__(self, error):
        self.error = error
        self.calls = 0

    async def get_client(self, client_id):
        return None

    async def register_client(self, client_info):
        self.calls += 1
        raise self.error


class EnrichingClientRepository:
    async def get_client(self, client_id):
        return None

    async def register_client(self, client_info):
        return client_info.model_copy(update={"client_id": f"store-{client_info.client_id}"})


def test_default_secret_lifetime_is_30_days(clients_store):
    service = ClientRegistrationService(clients_store)

    assert service.client_secret_expiry_seconds == DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS == 2592000


def test_store_without_registration_is_rejected_at_construction():
    with pytest.raises(RegistrationConfigurationException, match="does not support registering clients"):
        ClientRegistrationService(ReadOnlyClientRepository())


def test_negative_secret_lifetime_is_rejected(clients_store):
    with pytest.raises(RegistrationConfigurationException):
        ClientRegistrationService(clients_store, client_secret_expiry_seconds=-1)


async def test_public_client_registration(clients_store):
    service = ClientRegistrationService(clients_store)

    result = await service.register_client({
        "token_endpoint_auth_method": "none",
        "redirect_uris": ["https://example.com/cb"],
    })

    assert isinstance(result, ClientInformation)
    assert result.client_id
    assert result.client_secret is None
    assert result.client_secret_expires_at in (None, 0)
    assert clients_store.calls == [result]
    assert await clients_store.get_client(result.client_id) == result


async def test_confidential_client_registration(clients_store):
    service = ClientRegistrationService(clients_store, client_secret_expiry_seconds=2592000)

    result = await service.register_client({
        "token_endpoint_auth_method": "client_secret_post",
        "redirect_uris": ["https://example.com/cb"],
    })

    assert isinstance(result, ClientInformation)
    assert result.client_secret
    assert result.client_secret_expires_at - result.client_id_issued_at == 2592000


async def test_zero_lifetime_registration(clients_store):
    service = ClientRegistrationService(clients_store, client_secret_expiry_seconds=0)

    result = await service.register_client({"redirect_uris": ["https://example.com/cb"]})

    assert result.client_secret
    assert result.client_secret_expires_at == 0


async def test_invalid_metadata_never_reaches_the_store(clients_store):
    service = ClientRegistrationService(clients_store)

    result = await service.register_client({"token_endpoint_auth_method": "none"})

    assert isinstance(result, RegistrationError)
    assert result.error == "invalid_client_metadata"
    assert "redirect_uris" in result.error_description
    assert clients_store.calls == []


async def test_store_result_is_adopted():
    service = ClientRegistrationService(EnrichingClientRepository())

    result = await service.register_client({"redirect_uris": ["https://example.com/cb"]})

    assert result.client_id.startswith("store-")


async def test_store_failure_propagates():
    store = FailingClientRepository(RuntimeError("disk full"))
    service = ClientRegistrationService(store)

    with pytest.raises(RuntimeError, match="disk full"):
        await service.register_client({"redirect_uris": ["https://example.com/cb"]})
    assert store.calls == 1


async def test_store_exception_propagates():
    service = ClientRegistrationService(FailingClientRepository(ClientStoreException()))

    with pytest.raises(ClientStoreException):
        await service.register_client({"redirect_uris": ["https://example.com/cb"]})


async def test_store_can_reject_with_protocol_error():
    store = FailingClientRepository(
        ClientRegistrationException("invalid_redirect_uri", "redirect URI host is not allowed")
    )
    service = ClientRegistrationService(store)

    result = await service.register_client({"redirect_uris": ["https://example.com/cb"]})

    assert isinstance(result, RegistrationError)
    assert result.error == "invalid_redirect_uri"
    assert result.error_description == "redirect URI host is not allowed"


async def test_identical_requests_create_distinct_clients(clients_store):
    service = ClientRegistrationService(clients_store)
    payload = {"redirect_uris": ["https://example.com/cb"], "token_endpoint_auth_method": "none"}

    results = await asyncio.gather(*(service.register_client(payload) for _ in range(50)))

    assert len({result.client_id for result in results}) == 50
    assert len(clients_store) == 50


async def test_store_rejection_with_unknown_code_is_invalid_client_metadata():
    store = FailingClientRepository(ClientRegistrationException("client_id_conflict", "software_id already registered"))
    service = ClientRegistrationService(store)

    result = await service.register_client({"redirect_uris": ["https://example.com/cb"]})

    assert isinstance(result, RegistrationError)
    assert result.error == "invalid_client_metadata"
    assert result.error_description == "software_id already registered"
