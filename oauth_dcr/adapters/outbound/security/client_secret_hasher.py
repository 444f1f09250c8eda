# oauth_dcr/adapters/outbound/security/client_secret_hasher.py

from passlib.context import CryptContext


class ClientSecretHasher:
    """
    Hashing of client secrets for storage.
    """

    crypt_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

    @classmethod
    def hash_secret(cls, client_secret: str) -> str:
        """
        Generate a secure hash of the secret for storage in the database.
        """
        return cls.crypt_context.hash(client_secret)

    @classmethod
    def verify_secret(cls, plain_secret: str, hashed_secret: str) -> bool:
        """
        Compare a plain text secret with a stored hash.
        """
        return cls.crypt_context.verify(plain_secret, hashed_secret)
