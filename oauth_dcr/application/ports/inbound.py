# oauth_dcr/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import Any, Union

from oauth_dcr.application.dtos.client_dto import ClientInformation, RegistrationError


class IClientRegistrationUseCase(ABC):
    """Interface for the dynamic client registration use case."""

    @abstractmethod
    async def register_client(self, request_body: Any) -> Union[ClientInformation, RegistrationError]:
        """Register a new client from untrusted metadata."""
        pass
