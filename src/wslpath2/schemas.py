"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from wslpath2.types import Conversion


class ConversionRequest(BaseModel):
    """Validated input for a single ``wslpath`` invocation.

    The path itself is passed through untouched; ``wslpath`` decides
    whether it is well formed.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str
    distro: str | None = None
    conversion: Conversion
    force_absolute_path: bool = False

    @field_validator("distro")
    @classmethod
    def _validate_distro(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("distro must not be empty when provided.")
        return value
