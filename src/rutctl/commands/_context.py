"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the RutService and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rutctl.config.settings import RutSettings
    from rutctl.services.result import ServiceResult
    from rutctl.services.rut import RutService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is built lazily so ``--help`` and ``--version`` never
    construct a random generator.
    """

    def __init__(self, settings: RutSettings) -> None:
        self.settings = settings
        self._service: RutService | None = None

        from rutctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def service(self, *, seed: int | None = None) -> RutService:
        """Return the RutService, seeded from *seed* or ``[generate] seed``.

        An explicit *seed* always builds a fresh service.
        """
        from rutctl.domain.generator import RutGenerator
        from rutctl.services.rut import RutService

        if seed is not None:
            return RutService(RutGenerator(seed=seed))
        if self._service is None:
            self._service = RutService(RutGenerator(seed=self.settings.generate.seed))
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            decimal=self.settings.output.decimal,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
