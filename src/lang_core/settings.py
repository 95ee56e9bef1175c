"""Configuration for lang_core.

Values come from ``LANG_CORE_*`` environment variables or a local ``.env``
file; every public operation also accepts an explicit ``LangSettings``.
"""

from __future__ import annotations

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LangSettings(BaseSettings):
    """Loader and generator options."""

    model_config = SettingsConfigDict(
        env_prefix="LANG_CORE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    extension: str = Field(
        default=".lang",
        min_length=1,
        description="Suffix of the resource files picked up by aggregate().",
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Text encoding of resource files.",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker threads used to read and parse files (None = executor default).",
    )
    gen_placeholder: bool = Field(
        default=False,
        description="Render {placeholder} keys as callables in generated declarations.",
    )

    @field_validator("extension")
    @classmethod
    def _dotted(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith(".") else f".{value}"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value
