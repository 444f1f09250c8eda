# oauth_dcr/application/dtos/base_dto.py

"""
Base class for custom DTOs.

This module defines the CustomBaseModel base class that extends
Pydantic's BaseModel with behaviour shared by all application DTOs.
"""

from pydantic import BaseModel
from typing import Any, Dict


class CustomBaseModel(BaseModel):
    """
    Custom base model for all application DTOs.

    Extends Pydantic's BaseModel so that serialization omits fields
    without a value, keeping optional protocol fields out of responses.
    """

    def model_dump(self, *args, **kwargs) -> Dict[str, Any]:
        """
        Override Pydantic's model_dump to filter out fields whose value is None.

        Callers may still pass ``exclude_none=False`` to get the full shape.

        Args:
            *args: Positional arguments passed to the original method
            **kwargs: Keyword arguments passed to the original method

        Returns:
            Dict[str, Any]: Dictionary with the model attributes, excluding None values
        """
        kwargs.setdefault("exclude_none", True)
        return super().model_dump(*args, **kwargs)
