# oauth_dcr/domain/__init__.py

"""
Main module for the domain components of the application.

This module exports the domain exceptions.
"""

# Export all exceptions for easier imports
from oauth_dcr.domain.exceptions import (
    DomainException,               # Pure domain base exception
    RegistrationConfigurationException,
    ClientRegistrationException,
    ClientStoreException,
    ClientAlreadyRegisteredException,
    DatabaseOperationException,
)
