"""Command: validate a RUT."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    cls=RutCommand,
    examples="""\
  rutctl validate 11111111-1
  rutctl validate 11.111.111-1
  rutctl validate 12345678-k
  rutctl --json validate 11111111-2""",
)
@click.argument("rut")
@click.pass_obj
def validate(app: AppContext, rut: str) -> None:
    """Check the format and check digit of RUT.

    Exits with code 1 and reports the expected check digit on mismatch.
    """
    app.emit(app.service().validate(rut))
