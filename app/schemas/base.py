"""Shared request schema behaviour."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from app.utils.sql import RESERVED_PREFIX


class RequestBody(BaseModel):
    """
    Base for JSON request bodies.

    Unknown fields are rejected, except reserved ``_``-prefixed control
    fields (e.g. ``_token``) which are dropped before validation.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    @model_validator(mode="before")
    @classmethod
    def drop_reserved_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if not (isinstance(key, str) and key.startswith(RESERVED_PREFIX))
            }
        return data


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
