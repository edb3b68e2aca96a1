"""rutctl entry point: global output flags plus the four RUT commands.

Exit codes: 0 when the RUT (or generation range) is accepted, 1 when a
command rejects it or when rutctl.toml / ``RUTCTL_*`` settings are invalid.
"""

from __future__ import annotations

import click

from rutctl import __version__
from rutctl.commands import register_commands
from rutctl.commands._context import AppContext
from rutctl.config.settings import RutSettings


@click.group(
    invoke_without_command=True,
    epilog="RUTs may be given with or without dots: 11.111.111-1 or 11111111-1.",
)
@click.version_option(version=__version__, prog_name="rutctl")
@click.option("--json", "json_output", is_flag=True, help="Print the ServiceResult as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the RUT, for piping.")
@click.option("-v", "--verbose", is_flag=True, help="Show body/range details and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Use this rutctl.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Validate, format and generate Chilean RUTs."""
    ctx.ensure_object(dict)
    settings = RutSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
