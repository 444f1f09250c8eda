# oauth_dcr/application/use_cases/client_registration_use_cases.py

"""
Service for dynamic client registration.

This module implements the registration transaction: validate the
submitted metadata, issue credentials, and persist the client through
the configured store.
"""

import logging
from typing import Any, Optional, Union, get_args

from oauth_dcr.application.dtos.client_dto import ClientInformation, RegistrationError, RegistrationErrorCode
from oauth_dcr.application.ports.inbound import IClientRegistrationUseCase
from oauth_dcr.application.ports.outbound import IClientRegistrationRepository
from oauth_dcr.application.use_cases.credential_issuer import CredentialIssuer
from oauth_dcr.application.use_cases.metadata_validation import ClientMetadataValidator
from oauth_dcr.domain.exceptions import (
    ClientRegistrationException,
    RegistrationConfigurationException,
)

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS = 30 * 24 * 60 * 60  # 30 days
REGISTRATION_ERROR_CODES = frozenset(get_args(RegistrationErrorCode))


class ClientRegistrationService(IClientRegistrationUseCase):
    """
    Service for dynamic client registration.

    Each call to register_client that passes validation issues a new,
    distinct client; the operation is not idempotent.
    """

    def __init__(
            self,
            clients_store: IClientRegistrationRepository,
            client_secret_expiry_seconds: int = DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS,
            validator: Optional[ClientMetadataValidator] = None,
    ):
        """
        Args:
            clients_store: Store used to save dynamically registered clients
            client_secret_expiry_seconds: Seconds after which issued secrets expire,
                or 0 to never expire them (not recommended)
            validator: Metadata validator, defaults to ClientMetadataValidator

        Raises:
            RegistrationConfigurationException: If the store cannot register clients
                or the secret lifetime is negative
        """
        if not callable(getattr(clients_store, "register_client", None)):
            raise RegistrationConfigurationException(
                "Client registration store does not support registering clients"
            )
        if client_secret_expiry_seconds < 0:
            raise RegistrationConfigurationException(
                f"client_secret_expiry_seconds must be >= 0, got {client_secret_expiry_seconds}"
            )

        self.clients_store = clients_store
        self.client_secret_expiry_seconds = client_secret_expiry_seconds
        self.validator = validator or ClientMetadataValidator()

    async def register_client(self, request_body: Any) -> Union[ClientInformation, RegistrationError]:
        """
        Register a new client.

        Args:
            request_body: Untrusted client metadata

        Returns:
            The registered ClientInformation as returned by the store,
            or a RegistrationError if the metadata was rejected

        Raises:
            Exception: Any store failure other than ClientRegistrationException
                propagates unchanged
        """
        result = self.validator.validate(request_body)
        if not result.is_valid:
            logger.info(f"Rejected client registration: {result.error_description}")
            return RegistrationError(
                error="invalid_client_metadata",
                error_description=result.error_description,
            )

        client_info = CredentialIssuer.issue(result.metadata, self.client_secret_expiry_seconds)

        try:
            client_info = await self.clients_store.register_client(client_info)
        except ClientRegistrationException as e:
            logger.warning(f"Client store rejected registration: {e.error} | {e.error_description}")
            # Codes outside RFC 7591 are reported as invalid_client_metadata
            error = e.error if e.error in REGISTRATION_ERROR_CODES else "invalid_client_metadata"
            return RegistrationError(error=error, error_description=e.error_description or None)

        logger.info(
            f"Client registered: {client_info.client_id} "
            f"(confidential: {client_info.client_secret is not None})"
        )
        return client_info
