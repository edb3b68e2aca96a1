"""Locate, read, and validate ``rutctl.toml``.

Lookup order: the RUTCTL_CONFIG env var, then a walk up from the start
directory. Every config problem, whether TOML syntax or schema, surfaces
as a ``click.ClickException`` naming the offending file, so the CLI prints
one line instead of a traceback.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from rutctl.config.models import RutConfig

CONFIG_FILENAME = "rutctl.toml"
CONFIG_ENV_VAR = "RUTCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A set RUTCTL_CONFIG wins even when it points at a missing file; in
    that case no config is used rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, raising ClickException on syntax errors."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def config_error(exc: ValidationError, source: Path | None) -> click.ClickException:
    """Summarize a schema failure as ``key: reason`` pairs for the CLI."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    origin = str(source) if source else "settings"
    return click.ClickException(f"Invalid configuration in {origin}: {problems}")


def load_config(path: Path | None = None, cwd: Path | None = None) -> RutConfig:
    """Load rutctl.toml for library callers, without CLI flags or env vars.

    Falls back to defaults when no file is found.

    Raises:
        click.ClickException: on TOML syntax or schema errors.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return RutConfig()

    try:
        return RutConfig.model_validate(read_toml(path))
    except ValidationError as exc:
        raise config_error(exc, path) from exc
