from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Occurrence(BaseModel):
    """Byte span of one legacy keyword token, half-open ``[start, end)``."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "Occurrence":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not precede start ({self.start})")
        return self


class MigrationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    output: bytes
    replacements: int = Field(ge=0)


class FileOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    status: Literal["changed", "unchanged", "skipped"]
    replacements: int = 0
    error: str | None = None
