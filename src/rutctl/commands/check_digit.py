"""Command: compute the check digit for a RUT body."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    "check-digit",
    cls=RutCommand,
    examples="""\
  rutctl check-digit 11111111
  rutctl check-digit 12.345.678
  rutctl -q check-digit 5126663""",
)
@click.argument("body")
@click.pass_obj
def check_digit(app: AppContext, body: str) -> None:
    """Compute the check digit for BODY and print the full RUT."""
    app.emit(app.service().check_digit(body))
