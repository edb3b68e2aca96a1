"""RUT normalization and modulo-11 check digit validation.

Two explicit phases:
- ``normalize()`` turns a raw string into a :class:`NormalizedRut`
  (dots stripped, check character upper-cased). The input is never mutated.
- ``verify()`` recomputes the check character for a normalized value.

``validate()`` runs both and reports failures as a :class:`ValidationResult`
value instead of raising.

INVARIANT: Length bounds assume a body of 7–8 digits. They are policy
constants, not derived from the checksum scheme.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

SEPARATOR = "-"
GROUP_SEPARATOR = "."

# NNNNNNN-N
MIN_LENGTH = 9
# NNNNNNNN-N
MAX_LENGTH = 10

WEIGHTS: tuple[int, ...] = (2, 3, 4, 5, 6, 7)

_DIGITS = frozenset("0123456789")


class RutErrorCode(StrEnum):
    """Stable error codes for rejected identifiers."""

    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    MISSING_SEPARATOR = "MISSING_SEPARATOR"
    INVALID_CHECK_CHAR = "INVALID_CHECK_CHAR"
    NON_DIGIT_BODY = "NON_DIGIT_BODY"
    CHECK_MISMATCH = "CHECK_MISMATCH"


_MESSAGES: dict[RutErrorCode, str] = {
    RutErrorCode.TOO_SHORT: "length less than expected",
    RutErrorCode.TOO_LONG: "exceeded max length",
    RutErrorCode.MISSING_SEPARATOR: f"no check digit separator '{SEPARATOR}'",
    RutErrorCode.INVALID_CHECK_CHAR: "expected digit or 'K' as check digit",
    RutErrorCode.NON_DIGIT_BODY: "expected only digits in body",
    RutErrorCode.CHECK_MISMATCH: "invalid check digit",
}


class RutError(ValueError):
    """Raised when an identifier fails normalization or verification.

    Attributes:
        code: Which rule rejected the identifier.
        expected: Computed check character (``CHECK_MISMATCH`` only).
    """

    def __init__(self, code: RutErrorCode, *, expected: str | None = None) -> None:
        self.code = code
        self.expected = expected
        msg = _MESSAGES[code]
        if expected is not None:
            msg = f"{msg} (expected '{expected}')"
        super().__init__(msg)


@dataclass(frozen=True)
class NormalizedRut:
    """A RUT split into its digit body and upper-case check character."""

    body: str
    check: str

    def __str__(self) -> str:
        return f"{self.body}{SEPARATOR}{self.check}"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`validate`.

    ``rut`` is set whenever normalization succeeded and ``expected``
    whenever a checksum was computed, so a mismatch can be reported.
    """

    rut: NormalizedRut | None = None
    expected: str | None = None
    error: RutErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_digits(text: str) -> bool:
    return bool(text) and all(ch in _DIGITS for ch in text)


def normalize(raw: str) -> NormalizedRut:
    """Strip grouping dots and check the ``NNNNNNN[N]-C`` shape.

    Raises:
        RutError: with the first rule that *raw* breaks.
    """
    value = raw.replace(GROUP_SEPARATOR, "")
    length = len(value)

    if length < MIN_LENGTH:
        raise RutError(RutErrorCode.TOO_SHORT)
    if length > MAX_LENGTH:
        raise RutError(RutErrorCode.TOO_LONG)

    if value[length - 2] != SEPARATOR:
        raise RutError(RutErrorCode.MISSING_SEPARATOR)

    check = value[-1]
    if check not in _DIGITS:
        if check == "k":
            check = "K"
        elif check != "K":
            raise RutError(RutErrorCode.INVALID_CHECK_CHAR)

    body = value[: length - 2]
    if not _is_digits(body):
        raise RutError(RutErrorCode.NON_DIGIT_BODY)

    return NormalizedRut(body=body, check=check)


def compute_check_digit(body: str) -> str:
    """Compute the modulo-11 check character for a digit *body*.

    Digits are weighted right to left with the cycle 2..7. A zero digit
    still consumes a weight. Returns ``'0'``–``'9'`` or ``'K'``.

    Raises:
        RutError: ``NON_DIGIT_BODY`` on the first non-digit character.
    """
    total = 0
    for position, ch in enumerate(reversed(body)):
        if ch not in _DIGITS:
            raise RutError(RutErrorCode.NON_DIGIT_BODY)
        total += int(ch) * WEIGHTS[position % len(WEIGHTS)]

    remainder = 11 - (total % 11)
    if remainder == 11:
        return "0"
    if remainder == 10:
        return "K"
    return str(remainder)


def verify(rut: NormalizedRut) -> str:
    """Return the expected check character if it matches *rut*.

    Raises:
        RutError: ``CHECK_MISMATCH`` carrying the expected character.
    """
    expected = compute_check_digit(rut.body)
    if expected != rut.check:
        raise RutError(RutErrorCode.CHECK_MISMATCH, expected=expected)
    return expected


def validate(raw: str) -> ValidationResult:
    """Normalize and verify *raw*, reporting the outcome as a value."""
    try:
        rut = normalize(raw)
    except RutError as exc:
        return ValidationResult(error=exc.code)

    try:
        expected = verify(rut)
    except RutError as exc:
        return ValidationResult(rut=rut, expected=exc.expected, error=exc.code)
    return ValidationResult(rut=rut, expected=expected)


def is_valid(raw: str) -> bool:
    """Check whether *raw* is a well-formed RUT with a matching check digit."""
    return validate(raw).ok
