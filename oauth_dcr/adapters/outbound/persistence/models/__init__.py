# oauth_dcr/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports the SQLAlchemy models so that Base.metadata knows every table.
"""

from oauth_dcr.adapters.outbound.persistence.models.base_model import Base
from oauth_dcr.adapters.outbound.persistence.models.client_model import RegisteredClient

__all__ = [
    "Base",
    "RegisteredClient",
]
