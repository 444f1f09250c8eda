# oauth_dcr/application/use_cases/metadata_validation.py

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from oauth_dcr.application.dtos.client_dto import ClientMetadata


@dataclass(frozen=True)
class MetadataValidationResult:
    """Outcome of validating client metadata: either metadata or an error description."""
    metadata: Optional[ClientMetadata] = None
    error_description: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.metadata is not None


def stringify_validation_error(error: ValidationError) -> str:
    """Render pydantic errors as '<field>: <message>' pairs."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        message = item["msg"]
        if item["type"] == "value_error":
            message = message.removeprefix("Value error, ")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


class ClientMetadataValidator:
    """
    Validates untrusted registration payloads against ClientMetadata.
    """

    def validate(self, request_body: Any) -> MetadataValidationResult:
        """
        Validate a decoded request body.

        Args:
            request_body: Untyped payload (normally the decoded JSON body)

        Returns:
            MetadataValidationResult with the normalized metadata,
            or with a description of why the payload was rejected
        """
        try:
            metadata = ClientMetadata.model_validate(request_body)
        except ValidationError as e:
            return MetadataValidationResult(error_description=stringify_validation_error(e))
        return MetadataValidationResult(metadata=metadata)
