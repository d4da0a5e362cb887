"""
Input validation schemas using Pydantic v2
Validates the registration form and the results time window before they reach the registry
"""

import re
from typing import Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .timecodec import decode_time


class RegistrationConfig:
    """Field patterns and user-facing messages for the registration desk"""

    BIB_PATTERN = re.compile(r"^[1-9][0-9]*$")
    # Letters only, single space or hyphen between name parts
    NAME_PATTERN = re.compile(r"^[^\W\d_]+(?:[ -][^\W\d_]+)*$")
    TIME_PATTERN = re.compile(r"^\d{2}:[0-5]\d:[0-5]\d$")

    NAME_MAX_LENGTH = 255

    BIB_MESSAGE = "Bib must be a whole number from 1 and up"
    NAME_MESSAGE = (
        "Only letters are allowed, with a single space or hyphen between names"
    )
    TIME_MESSAGE = "Finish time must follow the format HH:MM:SS"
    WINDOW_MESSAGE = "Upper bound must be greater than lower bound"


# ==================== SCHEMAS ====================


class RegistrationForm(BaseModel):
    """The three raw fields of a registration, validated and stripped"""

    bib: str = Field(..., description="Participant bib number")
    name: str = Field(
        ..., max_length=RegistrationConfig.NAME_MAX_LENGTH, description="Full name"
    )
    finish_time: str = Field(..., description="Finish time (HH:MM:SS)")

    @field_validator("bib")
    @classmethod
    def validate_bib(cls, v: str) -> str:
        """Validate bib is a positive integer"""
        v = v.strip()
        if not RegistrationConfig.BIB_PATTERN.match(v):
            raise ValueError(RegistrationConfig.BIB_MESSAGE)
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not RegistrationConfig.NAME_PATTERN.match(v):
            raise ValueError(RegistrationConfig.NAME_MESSAGE)
        return v

    @field_validator("finish_time")
    @classmethod
    def validate_finish_time(cls, v: str) -> str:
        """Validate finish time format (HH:MM:SS)"""
        v = v.strip()
        if not RegistrationConfig.TIME_PATTERN.match(v):
            raise ValueError(RegistrationConfig.TIME_MESSAGE)
        return v

    model_config = ConfigDict(extra="forbid")


class ResultsWindow(BaseModel):
    """Optional lower/upper finish-time bounds for the results query"""

    lower: Optional[str] = Field(None, description="Lower bound (HH:MM:SS), empty = open")
    upper: Optional[str] = Field(None, description="Upper bound (HH:MM:SS), empty = open")

    @field_validator("lower", "upper")
    @classmethod
    def validate_bound(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        if not RegistrationConfig.TIME_PATTERN.match(v):
            raise ValueError(RegistrationConfig.TIME_MESSAGE)
        return v

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        """Reject a window whose upper bound lies before its lower bound"""
        lower, upper = self.lower_seconds, self.upper_seconds
        if lower is not None and upper is not None and upper < lower:
            raise ValueError(RegistrationConfig.WINDOW_MESSAGE)
        return self

    @property
    def lower_seconds(self) -> Optional[int]:
        return decode_time(self.lower)

    @property
    def upper_seconds(self) -> Optional[int]:
        return decode_time(self.upper)


# ==================== EXPORT ====================

__all__ = [
    "RegistrationConfig",
    "RegistrationForm",
    "ResultsWindow",
]
