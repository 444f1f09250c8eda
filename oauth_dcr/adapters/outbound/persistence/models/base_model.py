# oauth_dcr/adapters/outbound/persistence/models/base_model.py

from sqlalchemy.orm import declarative_base

# Parent class of all ORM models, owns the table metadata
Base = declarative_base()
