# oauth_dcr/domain/exceptions.py

"""
Custom exceptions for the registration service.

This module defines pure domain exceptions. They carry an ``internal_code``
that the HTTP adapters map to status codes, so the domain never depends on
the web framework.
"""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for all registration service errors.
    """

    def __init__(self, message: str, internal_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.internal_code = internal_code


class RegistrationConfigurationException(DomainException):
    """The registration service was configured with unusable collaborators."""

    def __init__(self, message: str = "Invalid client registration configuration"):
        super().__init__(message, internal_code="STORE_CONFIGURATION_ERROR")


class ClientRegistrationException(DomainException):
    """
    Raised by a client store to reject a registration with a protocol error.

    Unlike other store failures this one is recoverable: the registration
    service turns it into a client-facing registration error response.
    """

    def __init__(self, error: str = "invalid_client_metadata", error_description: str = ""):
        super().__init__(error_description or error, internal_code="CLIENT_REGISTRATION_REJECTED")
        self.error = error
        self.error_description = error_description


class ClientStoreException(DomainException):
    """Base class for unexpected failures inside a client store."""

    def __init__(
            self,
            message: str = "Client store operation failed",
            internal_code: str = "CLIENT_STORE_ERROR",
            original_error: Optional[Exception] = None,
    ):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(f"{message}{error_info}", internal_code=internal_code)
        self.original_error = original_error


class ClientAlreadyRegisteredException(ClientStoreException):
    """A client with the same client_id already exists in the store."""

    def __init__(self, client_id: str):
        super().__init__(
            f"Client already registered (ID: {client_id})",
            internal_code="CLIENT_ALREADY_REGISTERED",
        )
        self.client_id = client_id


class DatabaseOperationException(ClientStoreException):
    """Error while executing a database operation."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        super().__init__(
            detail,
            internal_code="DATABASE_OPERATION_ERROR",
            original_error=original_error,
        )
