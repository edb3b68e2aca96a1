"""Random RUT generation.

The generator owns one ``random.Random`` instance, seeded once at
construction. It is never reseeded per call.

NOTE: ``generate(min_body, max_body)`` draws from ``[min_body, max_body)``.
The upper bound is exclusive; ``max_body`` itself is never produced.
"""

from __future__ import annotations

import random

from rutctl.domain.rut import NormalizedRut, compute_check_digit


class RutGenerator:
    """Produce RUTs that always pass :func:`rutctl.domain.rut.verify`.

    Args:
        seed: Optional seed for reproducible sequences.
        rng: Explicit random source. Takes precedence over *seed*.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def generate(self, min_body: int, max_body: int) -> NormalizedRut:
        """Pick a body uniformly in ``[min_body, max_body)`` and attach its check digit.

        Keeping the body within 7–8 digits, so that the result also passes
        ``normalize()``, is the caller's responsibility.
        """
        if min_body < 0:
            msg = f"min_body must be non-negative, got {min_body}"
            raise ValueError(msg)
        if min_body >= max_body:
            msg = f"empty range: min_body ({min_body}) must be below max_body ({max_body})"
            raise ValueError(msg)

        body = str(self._rng.randrange(min_body, max_body))
        return NormalizedRut(body=body, check=compute_check_digit(body))


_default_generator = RutGenerator()


def generate(min_body: int, max_body: int) -> NormalizedRut:
    """Generate a RUT with the shared module-level generator."""
    return _default_generator.generate(min_body, max_body)
