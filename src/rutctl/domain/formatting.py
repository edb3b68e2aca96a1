"""Display formats for normalized RUTs.

PRECONDITION: every function here takes a :class:`NormalizedRut`, i.e. a
value that already passed ``normalize()``. A hand-built value with a
non-digit body is a programming error and raises ``ValueError``.
"""

from __future__ import annotations

from rutctl.domain.rut import GROUP_SEPARATOR, SEPARATOR, NormalizedRut


def group_thousands(value: int) -> str:
    """Render *value* with ``.`` every three digits from the right."""
    if value < 0:
        msg = f"Cannot group negative value {value}"
        raise ValueError(msg)
    return f"{value:,}".replace(",", GROUP_SEPARATOR)


def decimal_format(rut: NormalizedRut) -> str:
    """Return the dotted form, e.g. ``11.111.111-1``.

    The body is read as an integer, so leading zeros are dropped.
    """
    return f"{group_thousands(int(rut.body))}{SEPARATOR}{rut.check}"


def compact_format(rut: NormalizedRut) -> str:
    """Return the dot-free form, e.g. ``11111111-1``."""
    return str(rut)
