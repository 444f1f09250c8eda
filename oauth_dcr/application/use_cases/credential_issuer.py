# oauth_dcr/application/use_cases/credential_issuer.py

from oauth_dcr.application.dtos.client_dto import ClientInformation, ClientMetadata
from oauth_dcr.domain.services.credential_service import CredentialService


class CredentialIssuer:
    """
    Builds the full client record for validated metadata.
    """

    @staticmethod
    def issue(metadata: ClientMetadata, client_secret_expiry_seconds: int) -> ClientInformation:
        """
        Issue a client_id, and a secret when the client needs one.

        Args:
            metadata: Already validated client metadata
            client_secret_expiry_seconds: Secret lifetime, 0 for secrets that never expire

        Returns:
            ClientInformation combining the metadata with the issued credentials
        """
        credentials = CredentialService.issue_credentials(
            metadata.token_endpoint_auth_method,
            client_secret_expiry_seconds,
        )
        return ClientInformation(
            **metadata.model_dump(exclude_none=False),
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
            client_id_issued_at=credentials.client_id_issued_at,
            client_secret_expires_at=credentials.client_secret_expires_at,
        )
