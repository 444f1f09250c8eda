# oauth_dcr/adapters/outbound/persistence/repositories/__init__.py

"""
Client store module.

This module exports the client store implementations that can back
the registration service.
"""

from oauth_dcr.adapters.outbound.persistence.repositories.client_repository import SQLAlchemyClientRepository
from oauth_dcr.adapters.outbound.persistence.repositories.memory_repository import (
    InMemoryClientRepository,
    ReadOnlyClientRepository,
)

__all__ = [
    "SQLAlchemyClientRepository",
    "InMemoryClientRepository",
    "ReadOnlyClientRepository",
]
