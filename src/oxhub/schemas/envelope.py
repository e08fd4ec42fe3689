"""Uniform success envelope."""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

DEFAULT_MESSAGE = "Request successful"


def _timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class ApiResponse(BaseModel, Generic[T]):
    """Every successful response body.

    ``message`` mirrors the payload's own message when it has one.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    status_code: int = Field(alias="statusCode")
    message: str = DEFAULT_MESSAGE
    data: T
    timestamp: str = Field(default_factory=_timestamp)

    @classmethod
    def wrap(cls, payload: T, status_code: int = 200) -> "ApiResponse[T]":
        message = getattr(payload, "message", None)
        return cls(
            status_code=status_code,
            message=message if isinstance(message, str) else DEFAULT_MESSAGE,
            data=payload,
        )
