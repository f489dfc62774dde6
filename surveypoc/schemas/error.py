"""Error envelope schemas returned by the exception translator."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class RestFieldError(BaseModel):
    """Single field-level validation failure."""

    field: str
    code: str
    message: str


class RestError(BaseModel):
    """One client-visible error item."""

    model_config = ConfigDict(populate_by_name=True)

    code: str
    message: str
    field_errors: list[RestFieldError] | None = Field(default=None, alias="fieldErrors")


class RestErrors(BaseModel):
    """Top-level API error response envelope."""

    errors: list[RestError] = Field(default_factory=list)

    def add_error(self, error: RestError) -> None:
        self.errors.append(error)

    def to_payload(self) -> dict:
        """Return the JSON-ready body with wire field names."""
        return self.model_dump(by_alias=True, exclude_none=True)
