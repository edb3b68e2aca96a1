"""Shared pytest fixtures for rutctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from rutctl.domain.generator import RutGenerator
from rutctl.services.rut import RutService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> RutService:
    """RutService with a fixed seed so generated values are reproducible."""
    return RutService(RutGenerator(seed=1234))


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RUTCTL_CONFIG", raising=False)
