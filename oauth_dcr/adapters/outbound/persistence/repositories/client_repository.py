# oauth_dcr/adapters/outbound/persistence/repositories/client_repository.py

"""
Repository for registered clients.

This module implements the database-backed client store used by the
registration service, implementing the IClientRegistrationRepository
interface.
"""

import logging
from typing import Optional
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError, IntegrityError

from oauth_dcr.adapters.outbound.persistence.database import get_db_context
from oauth_dcr.adapters.outbound.persistence.models import RegisteredClient
from oauth_dcr.adapters.outbound.security.client_secret_hasher import ClientSecretHasher
from oauth_dcr.application.dtos.client_dto import ClientInformation, ClientMetadata
from oauth_dcr.application.ports.outbound import IClientRegistrationRepository
from oauth_dcr.domain.exceptions import (
    ClientAlreadyRegisteredException,
    DatabaseOperationException,
)


class SQLAlchemyClientRepository(IClientRegistrationRepository):
    """
    Async SQLAlchemy implementation of the client store.

    Only a hash of the client secret is persisted; the plain secret is
    returned to the registering client once and cannot be read back.
    """

    def __init__(self, session_factory: async_sessionmaker):
        """
        Args:
            session_factory: Async session factory; each operation uses its own session
        """
        self.session_factory = session_factory
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    async def get_client(self, client_id: str) -> Optional[ClientInformation]:
        """
        Find a registered client by client_id.

        Args:
            client_id: Client identifier

        Returns:
            ClientInformation without the client secret, or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            async with get_db_context(self.session_factory) as db:
                query = select(RegisteredClient).where(RegisteredClient.client_id == client_id)
                result = await db.execute(query)
                db_client = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client by client_id '{client_id}': {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client by client_id",
                original_error=e
            )

        return self.to_client_information(db_client) if db_client else None

    async def register_client(self, client_info: ClientInformation) -> ClientInformation:
        """
        Persist a newly registered client.

        Args:
            client_info: Issued client record, including the plain secret

        Returns:
            The same record, unchanged

        Raises:
            ClientAlreadyRegisteredException: If the client_id is already taken
            DatabaseOperationException: In case of database error
        """
        client_secret_hash = (
            ClientSecretHasher.hash_secret(client_info.client_secret)
            if client_info.client_secret is not None
            else None
        )
        db_client = RegisteredClient(
            client_id=client_info.client_id,
            client_secret_hash=client_secret_hash,
            client_id_issued_at=client_info.client_id_issued_at,
            client_secret_expires_at=client_info.client_secret_expires_at,
            client_metadata=client_info.model_dump(mode="json", include=set(ClientMetadata.model_fields)),
        )

        try:
            async with get_db_context(self.session_factory) as db:
                db.add(db_client)
        except IntegrityError as e:
            self.logger.error(f"Duplicate client_id '{client_info.client_id}': {str(e)}")
            raise ClientAlreadyRegisteredException(client_info.client_id)
        except SQLAlchemyError as e:
            self.logger.error(f"Error registering client: {str(e)}")
            raise DatabaseOperationException(
                detail="Error registering client",
                original_error=e
            )

        self.logger.info(f"Client persisted: {client_info.client_id}")
        return client_info

    @staticmethod
    def to_client_information(db_model: RegisteredClient) -> ClientInformation:
        """
        Convert the database model to the application record.

        Args:
            db_model: RegisteredClient ORM model

        Returns:
            ClientInformation without the client secret
        """
        return ClientInformation(
            **db_model.client_metadata,
            client_id=db_model.client_id,
            client_id_issued_at=db_model.client_id_issued_at,
            client_secret_expires_at=db_model.client_secret_expires_at,
        )
