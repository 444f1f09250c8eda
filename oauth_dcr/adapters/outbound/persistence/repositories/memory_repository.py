# oauth_dcr/adapters/outbound/persistence/repositories/memory_repository.py

import asyncio
import logging
from typing import Dict, Iterable, Optional

from oauth_dcr.application.dtos.client_dto import ClientInformation
from oauth_dcr.application.ports.outbound import IClientRegistrationRepository, IClientRepository
from oauth_dcr.domain.exceptions import ClientAlreadyRegisteredException

logger = logging.getLogger(__name__)


class InMemoryClientRepository(IClientRegistrationRepository):
    """
    Process-local client store.

    Registrations are lost on restart; meant for development and tests.
    """

    def __init__(self):
        self._clients: Dict[str, ClientInformation] = {}
        self._lock = asyncio.Lock()

    async def get_client(self, client_id: str) -> Optional[ClientInformation]:
        return self._clients.get(client_id)

    async def register_client(self, client_info: ClientInformation) -> ClientInformation:
        async with self._lock:
            if client_info.client_id in self._clients:
                raise ClientAlreadyRegisteredException(client_info.client_id)
            self._clients[client_info.client_id] = client_info

        logger.debug(f"Client stored in memory: {client_info.client_id}")
        return client_info

    def __len__(self) -> int:
        return len(self._clients)


class ReadOnlyClientRepository(IClientRepository):
    """
    Store for a fixed set of pre-provisioned clients.

    Does not accept registrations, so it cannot back the registration endpoint.
    """

    def __init__(self, clients: Iterable[ClientInformation] = ()):
        self._clients = {client.client_id: client for client in clients}

    async def get_client(self, client_id: str) -> Optional[ClientInformation]:
        return self._clients.get(client_id)
