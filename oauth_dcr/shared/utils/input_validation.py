# oauth_dcr/shared/utils/input_validation.py

from typing import Optional, Tuple
from urllib.parse import urlparse


class InputValidator:
    """
    Validation helpers for client-supplied metadata, complementing
    the Pydantic validations.
    """

    # Limits
    MAX_URI_LENGTH = 2048
    MAX_STRING_INPUT_LENGTH = 1000

    # Schemes that can execute code when a URI is rendered or followed
    UNSAFE_URI_SCHEMES = frozenset({"javascript", "data", "vbscript"})

    @classmethod
    def validate_uri(cls, uri: str) -> Tuple[bool, Optional[str]]:
        """
        Validate that a value is an absolute URL with a safe scheme.

        Args:
            uri: String to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not uri or not uri.strip():
            return False, "URI cannot be empty"

        if len(uri) > cls.MAX_URI_LENGTH:
            return False, f"URI is too long (maximum {cls.MAX_URI_LENGTH} characters)"

        parsed = urlparse(uri)
        if not parsed.scheme:
            return False, f"URI must be absolute: {uri}"

        if parsed.scheme.lower() in cls.UNSAFE_URI_SCHEMES:
            return False, f"URI scheme is not allowed: {parsed.scheme}"

        # Custom schemes (native apps) may omit the authority, web schemes may not
        if parsed.scheme.lower() in ("http", "https") and not parsed.netloc:
            return False, f"URI must include a host: {uri}"

        return True, None

    @staticmethod
    def strip_string(text: str) -> str:
        """
        Normalize a free-text value by removing surrounding whitespace.

        Length limits are enforced by the schema, never by truncation.
        """
        return text.strip()
