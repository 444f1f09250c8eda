# oauth_dcr/adapters/outbound/persistence/models/client_model.py

"""
Model for dynamically registered clients.

This module defines the RegisteredClient model that stores the
issued identity, the hashed secret and the submitted metadata of
every client registered through the registration endpoint.
"""

from sqlalchemy import Column, BigInteger, String, JSON, DateTime, func
from oauth_dcr.adapters.outbound.persistence.models.base_model import Base


class RegisteredClient(Base):
    """
    Model representing a dynamically registered OAuth client.

    Attributes:
        client_id: Public identifier issued at registration
        client_secret_hash: Hash of the client secret, NULL for public clients
        client_id_issued_at: Issue time, seconds since epoch
        client_secret_expires_at: Secret expiry, seconds since epoch (0 = never)
        client_metadata: Validated client metadata as submitted
        created_at: Row creation date and time
    """
    __tablename__ = "registered_clients"

    client_id = Column(String(64), primary_key=True)
    client_secret_hash = Column(String, nullable=True)
    client_id_issued_at = Column(BigInteger, nullable=False)
    client_secret_expires_at = Column(BigInteger, nullable=True)
    client_metadata = Column(JSON, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        """String representation of the RegisteredClient object."""
        return f"<RegisteredClient(client_id={self.client_id})>"
