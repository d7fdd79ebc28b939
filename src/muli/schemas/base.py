"""Base Pydantic model for MULI configs.

MULI configuration is resolved once and never mutated afterwards, so every
schema is frozen and rejects unknown fields.
"""

from pydantic import BaseModel, ConfigDict


class MuliBaseModel(BaseModel):
    """Base model for all MULI configuration schemas.

    - No extra fields allowed
    - Instances are immutable (assignment raises ValidationError)
    - Surrounding whitespace is stripped from strings
    """

    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
        str_strip_whitespace=True,
    )
