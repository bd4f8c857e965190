"""web-boilerplate configuration.

A small typed configuration model.  Settings use Pydantic v2 so they are
validated at construction time and can be read from environment variables
without boiler-plate.
"""

from __future__ import annotations

import codecs
import os

from pydantic import BaseModel, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global web-boilerplate configuration.

    Created once by the CLI entry point and passed to the generator.
    """

    quiet: bool = Field(default=False, description="Suppress all console output")
    encoding: str = Field(default="utf-8", description="Encoding of generated files")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            BOILERPLATE_QUIET, BOILERPLATE_ENCODING.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("BOILERPLATE_QUIET"):
            kwargs["quiet"] = os.environ["BOILERPLATE_QUIET"].strip().lower() in _TRUTHY
        if os.environ.get("BOILERPLATE_ENCODING"):
            kwargs["encoding"] = os.environ["BOILERPLATE_ENCODING"]
        return cls(**kwargs)
