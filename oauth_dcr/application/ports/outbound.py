# oauth_dcr/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Optional

from oauth_dcr.application.dtos.client_dto import ClientInformation


class IClientRepository(ABC):
    """Read access to registered clients."""

    @abstractmethod
    async def get_client(self, client_id: str) -> Optional[ClientInformation]:
        """Get a registered client by client_id."""
        pass


class IClientRegistrationRepository(IClientRepository, ABC):
    """
    Client store that accepts new registrations.

    Implementations must be safe to call concurrently and must reject
    a client_id that is already registered.
    """

    @abstractmethod
    async def register_client(self, client_info: ClientInformation) -> ClientInformation:
        """
        Persist a newly issued client.

        The returned record (which may be enriched by the store) is the
        one handed back to the registering client.
        """
        pass
