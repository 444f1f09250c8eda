# oauth_dcr/domain/services/credential_service.py

import secrets
import time
import uuid
from typing import Optional

from oauth_dcr.domain.models.client_domain_model import IssuedCredentials, NO_CLIENT_AUTHENTICATION

# 32 bytes = 256 bits of entropy
CLIENT_SECRET_BYTES = 32


class CredentialService:
    """
    Domain service for client credential generation.
    """

    @staticmethod
    def generate_client_id() -> str:
        """Return a fresh random (version 4) UUID string."""
        return str(uuid.uuid4())

    @staticmethod
    def generate_client_secret() -> str:
        """Return a hex encoded secret drawn from the OS CSPRNG."""
        return secrets.token_hex(CLIENT_SECRET_BYTES)

    @staticmethod
    def requires_client_secret(token_endpoint_auth_method: Optional[str]) -> bool:
        """
        Check whether a client authenticating with the given method needs a secret.

        An absent method is not the public-client sentinel, so it requires one.
        """
        return token_endpoint_auth_method != NO_CLIENT_AUTHENTICATION

    @staticmethod
    def compute_secret_expiry(issued_at: int, client_secret_expiry_seconds: int) -> int:
        """
        Compute client_secret_expires_at for a secret issued at ``issued_at``.

        Args:
            issued_at: Issue time in seconds since epoch
            client_secret_expiry_seconds: Secret lifetime, 0 for no expiry

        Returns:
            Expiry time in seconds since epoch, or 0 when the secret never expires
        """
        if client_secret_expiry_seconds == 0:
            return 0
        return issued_at + client_secret_expiry_seconds

    @classmethod
    def issue_credentials(
            cls,
            token_endpoint_auth_method: Optional[str],
            client_secret_expiry_seconds: int,
    ) -> IssuedCredentials:
        """
        Issue the identity and (optional) secret for a new client.

        Args:
            token_endpoint_auth_method: Authentication method declared by the client
            client_secret_expiry_seconds: Secret lifetime, 0 for no expiry

        Returns:
            IssuedCredentials with a fresh client_id
        """
        client_id = cls.generate_client_id()
        issued_at = int(time.time())

        if not cls.requires_client_secret(token_endpoint_auth_method):
            return IssuedCredentials(client_id=client_id, client_id_issued_at=issued_at)

        return IssuedCredentials(
            client_id=client_id,
            client_id_issued_at=issued_at,
            client_secret=cls.generate_client_secret(),
            client_secret_expires_at=cls.compute_secret_expiry(issued_at, client_secret_expiry_seconds),
        )
