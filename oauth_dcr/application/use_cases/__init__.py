# oauth_dcr/application/use_cases/__init__.py

"""
Application service module.

This package contains the application services that implement the
client registration transaction.
"""

# Export service classes for easier imports
from oauth_dcr.application.use_cases.client_registration_use_cases import (
    DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS,
    ClientRegistrationService,
)
from oauth_dcr.application.use_cases.credential_issuer import CredentialIssuer
from oauth_dcr.application.use_cases.metadata_validation import ClientMetadataValidator, MetadataValidationResult

# Export all services
__all__ = [
    "DEFAULT_CLIENT_SECRET_EXPIRY_SECONDS",
    "ClientRegistrationService",
    "CredentialIssuer",
    "ClientMetadataValidator",
    "MetadataValidationResult",
]
