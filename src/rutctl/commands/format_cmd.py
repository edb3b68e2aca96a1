"""Command: print a RUT with thousands separators."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    "format",
    cls=RutCommand,
    examples="""\
  rutctl format 11111111-1
  rutctl -q format 5126663-3""",
)
@click.argument("rut")
@click.pass_obj
def format_cmd(app: AppContext, rut: str) -> None:
    """Validate RUT and print it in dotted form (11.111.111-1)."""
    app.emit(app.service().format(rut))
