"""
Configuration groups.

Settings are split into logical groups. Each group is usable on its own
(the converter only needs ConversionConfig) and is assembled by Settings.
"""

import codecs
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class ConversionConfig(BaseModel):
    """JavaScript → TypeScript conversion settings."""

    source_suffix: str = Field(default=".js", description="Input file suffix")
    target_suffix: str = Field(default=".ts", description="Output file suffix")
    recursive: bool = Field(default=False, description="Descend into subdirectories")
    overwrite: bool = Field(default=True, description="Overwrite existing target files")
    continue_on_error: bool = Field(default=True, description="Log per-file failures and keep going")
    grammar: Literal["tsx", "typescript"] = Field(default="tsx", description="tree-sitter grammar")
    encoding: str = Field(default="utf-8", description="Source/target file encoding")

    @field_validator("source_suffix", "target_suffix")
    @classmethod
    def _suffix_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"suffix must start with '.' and be non-empty: {value!r}")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value!r}") from e
        return value

    @model_validator(mode="after")
    def _suffixes_differ(self) -> "ConversionConfig":
        if self.source_suffix == self.target_suffix:
            raise ValueError("source_suffix and target_suffix must differ")
        return self


class ObservabilityConfig(BaseModel):
    """Logging settings."""

    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["console", "json"] = Field(default="console", description="Log output format")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return value
