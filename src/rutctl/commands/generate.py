"""Command: generate a random valid RUT."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    cls=RutCommand,
    examples="""\
  rutctl generate
  rutctl generate --min 10000000 --max 20000000
  rutctl generate --seed 42
  rutctl -q generate""",
)
@click.option(
    "--min",
    "min_body",
    type=int,
    default=None,
    help="Smallest body (inclusive). Defaults to [generate] min.",
)
@click.option(
    "--max",
    "max_body",
    type=int,
    default=None,
    help="Upper bound (exclusive, never produced). Defaults to [generate] max.",
)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible result.")
@click.pass_obj
def generate(
    app: AppContext,
    min_body: int | None,
    max_body: int | None,
    seed: int | None,
) -> None:
    """Generate a random RUT whose body lies in [MIN, MAX)."""
    cfg = app.settings.generate
    lo = cfg.min if min_body is None else min_body
    hi = cfg.max if max_body is None else max_body
    app.emit(app.service(seed=seed).generate(lo, hi))
