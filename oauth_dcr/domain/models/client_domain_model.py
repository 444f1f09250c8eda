# oauth_dcr/domain/models/client_domain_model.py

from dataclasses import dataclass
from typing import Optional

# token_endpoint_auth_method value for public clients
NO_CLIENT_AUTHENTICATION = "none"


@dataclass(frozen=True)
class IssuedCredentials:
    """Server-issued identity and credential fields of a registered client."""
    client_id: str
    client_id_issued_at: int  # Seconds since epoch
    client_secret: Optional[str] = None
    client_secret_expires_at: Optional[int] = None  # 0 means the secret never expires
