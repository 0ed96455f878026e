"""Pydantic schema for subset enumeration runs."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EnumerationConfig(BaseModel):
    """Validated enumeration settings with defaults."""

    model_config = ConfigDict(extra="forbid")

    elements: list[str] = Field(default_factory=list)
    subset_size: int = Field(default=2, ge=0)
    required: list[str] = Field(default_factory=list)
    limit: int | None = Field(default=None, gt=0)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @model_validator(mode="after")
    def _required_fits(self) -> EnumerationConfig:
        if len(self.required) > self.subset_size:
            raise ValueError("required cannot list more elements than subset_size.")
        return self
