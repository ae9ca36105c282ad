"""Base Pydantic model with strict defaults for pairing settings."""

from pydantic import BaseModel, ConfigDict


class PairingBaseModel(BaseModel):
    """Base model for all pairing settings schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Stores enum values, not enum members
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
        str_strip_whitespace=True,# Strip whitespace from strings
    )
