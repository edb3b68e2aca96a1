"""Subcommand modules for rutctl.

Provides register_commands() which uses deferred imports to keep
``rutctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rutctl.commands.check_digit import check_digit
    from rutctl.commands.format_cmd import format_cmd
    from rutctl.commands.generate import generate
    from rutctl.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(format_cmd)
    cli.add_command(check_digit)
    cli.add_command(generate)
