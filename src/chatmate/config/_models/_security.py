"""Security and validation configuration models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from chatmate.artifacts import MIN_CONTENT_LENGTH
from chatmate.security import MAX_CONTENT_BYTES


class SecurityConfig(BaseModel):
    """Security configuration section.

    Attributes:
        max_content_bytes: Largest artifact accepted for install, in bytes.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    max_content_bytes: int = Field(default=MAX_CONTENT_BYTES, gt=0)


class ValidationConfig(BaseModel):
    """Validation configuration section.

    Attributes:
        min_content_length: Shortest artifact accepted by ``validate``,
            in characters.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    min_content_length: int = Field(default=MIN_CONTENT_LENGTH, ge=0)
