from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Ids are unsigned 32-bit so that every stored record is addressable by path.
MAX_USER_ID = 2**32 - 1


class UserRecord(BaseModel):
    """A user as stored and as sent over the wire.

    Omitted or ``null`` fields fall back to their zero value, so ``id == 0``
    means the caller did not supply one. Unknown keys are ignored. Types are
    not coerced: ``"id": "1"`` is a decode error, not the integer 1.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    id: int = Field(default=0, ge=0, le=MAX_USER_ID, description="Positive identifier; 0 when absent")
    username: str = ""
    password: str = ""
    name: str = ""
    address: str = Field(default="", description="Optional free text")

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class Message(BaseModel):
    message: str


class HealthStatus(BaseModel):
    ok: bool
    service: str
    version: str
    users: int
