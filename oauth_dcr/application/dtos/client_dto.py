# oauth_dcr/application/dtos/client_dto.py

"""
Schemas for dynamically registered OAuth clients.

This module defines the Pydantic DTOs for validation and serialization
of client metadata (RFC 7591 section 2), the full registered client
record and the registration error response.
"""

from typing import Annotated, Any, List, Literal, Optional

from pydantic import AfterValidator, ConfigDict, Field, field_validator

from oauth_dcr.application.dtos.base_dto import CustomBaseModel
from oauth_dcr.shared.utils.input_validation import InputValidator

RegistrationErrorCode = Literal[
    "invalid_redirect_uri",
    "invalid_client_metadata",
    "invalid_software_statement",
    "unapproved_software_statement",
]


def check_uri(uri: str) -> str:
    """Reject URIs that are not absolute URLs with a safe scheme."""
    is_valid, error_msg = InputValidator.validate_uri(uri)
    if not is_valid:
        raise ValueError(error_msg)
    return uri


SafeUri = Annotated[str, AfterValidator(check_uri)]


class ClientMetadata(CustomBaseModel):
    """
    Client metadata submitted in a registration request.

    Immutable once validated; unknown fields are dropped.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    redirect_uris: List[SafeUri] = Field(..., min_length=1, description="Redirection URIs used by the client")
    token_endpoint_auth_method: Optional[str] = Field(
        None,
        description="Token endpoint authentication method; 'none' for public clients",
    )
    grant_types: Optional[List[str]] = Field(None, description="OAuth 2.0 grant types the client will use")
    response_types: Optional[List[str]] = Field(None, description="OAuth 2.0 response types the client will use")
    client_name: Optional[str] = Field(
        None,
        max_length=InputValidator.MAX_STRING_INPUT_LENGTH,
        description="Human-readable client name",
    )
    client_uri: Optional[SafeUri] = Field(None, description="Client home page")
    logo_uri: Optional[SafeUri] = Field(None, description="Client logo")
    scope: Optional[str] = Field(None, description="Space-separated scope values")
    contacts: Optional[List[str]] = Field(None, description="People responsible for the client")
    tos_uri: Optional[SafeUri] = Field(None, description="Terms of service")
    policy_uri: Optional[SafeUri] = Field(None, description="Privacy policy")
    jwks_uri: Optional[SafeUri] = Field(None, description="URL of the client's JSON Web Key Set")
    jwks: Optional[Any] = Field(None, description="Client's JSON Web Key Set by value")
    software_id: Optional[str] = Field(None, description="Identifier of the client software")
    software_version: Optional[str] = Field(None, description="Version of the client software")
    software_statement: Optional[str] = Field(None, description="Signed JWT asserting metadata values")

    @field_validator("client_name", mode="before")
    def strip_client_name(cls, v: Any) -> Any:
        # Length limit applies to the stripped value; longer names are rejected
        return InputValidator.strip_string(v) if isinstance(v, str) else v


class ClientInformation(ClientMetadata):
    """
    Full record of a registered client.

    Extends ClientMetadata with the identity and credential fields issued
    by the server. ``client_secret`` and ``client_secret_expires_at`` are
    None for public clients.
    """
    client_id: str = Field(..., description="Unique client identifier")
    client_secret: Optional[str] = Field(None, description="Client secret, absent for public clients")
    client_id_issued_at: int = Field(..., description="Issue time, seconds since epoch")
    client_secret_expires_at: Optional[int] = Field(
        None,
        description="Secret expiry, seconds since epoch; 0 if it never expires",
    )


class RegistrationError(CustomBaseModel):
    """
    Registration error response (RFC 7591 section 3.2.2).
    """
    error: RegistrationErrorCode = Field(..., description="Error code")
    error_description: Optional[str] = Field(None, description="Human-readable error description")
