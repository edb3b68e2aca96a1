"""rutctl — Chilean RUT validation, formatting, and generation."""

from rutctl.domain.formatting import compact_format, decimal_format
from rutctl.domain.generator import RutGenerator, generate
from rutctl.domain.rut import (
    NormalizedRut,
    RutError,
    RutErrorCode,
    ValidationResult,
    compute_check_digit,
    is_valid,
    normalize,
    validate,
    verify,
)

__version__ = "0.1.0"

__all__ = [
    "NormalizedRut",
    "RutError",
    "RutErrorCode",
    "RutGenerator",
    "ValidationResult",
    "__version__",
    "compact_format",
    "compute_check_digit",
    "decimal_format",
    "generate",
    "is_valid",
    "normalize",
    "validate",
    "verify",
]
