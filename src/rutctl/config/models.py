"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rutctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GenerateConfig(BaseModel):
    """[generate] section.

    ``max`` is exclusive: generated bodies fall in ``[min, max)``. The range
    is checked when ``generate`` runs, so a bad range never blocks the
    other commands.
    """

    model_config = {"frozen": True}

    min: int = 5_000_000
    max: int = 23_000_000
    seed: int | None = None


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    decimal: bool = True


class RutConfig(BaseModel):
    """Root configuration composing all rutctl.toml sections."""

    model_config = {"frozen": True}

    generate: GenerateConfig = Field(default_factory=GenerateConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
