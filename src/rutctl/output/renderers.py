"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from rutctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rutctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, decimal: bool = True) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, decimal=decimal)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, decimal: bool = True) -> str:
    """Render minimal output for ``--quiet`` mode.

    Successful RUT results print the identifier alone so the output can
    be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    rut = _display_rut(result.data, decimal=decimal or result.op == "format")
    if rut:
        return rut
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _display_rut(data: dict[str, Any], *, decimal: bool) -> str:
    if decimal and "formatted" in data:
        return str(data["formatted"])
    return str(data.get("rut", ""))


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="rut.ok")
    op = Text(f"  {result.op}", style="rut.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rut.key")
    v = Text(str(value), style=style)
    console.print(Text.assemble(k, v))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rut.error")
    op = Text(f"  {result.op}", style="rut.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if err:
        _field(console, "code", err.code)
        expected = err.detail.get("expected")
        if expected is not None:
            _field(console, "expected", expected, "rut.check")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_rut(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimal: bool = True
) -> None:
    """Render validate/check_digit/generate results."""
    _status_line(console, result)
    data = result.data
    _field(console, "rut", _display_rut(data, decimal=decimal), "rut.value")
    if "check" in data:
        _field(console, "check", data["check"], "rut.check")
    if verbose:
        for key in ("body", "formatted", "expected", "min", "max"):
            if key in data:
                _field(console, key, data[key])


def _render_format(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimal: bool = True
) -> None:
    """Formatting always shows the dotted form, whatever the output setting."""
    _status_line(console, result)
    _field(console, "formatted", result.data.get("formatted", ""), "rut.value")
    if verbose:
        _field(console, "rut", result.data.get("rut", ""))


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimal: bool = True
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_rut,
    "check_digit": _render_rut,
    "generate": _render_rut,
    "format": _render_format,
}
