"""Gamma function of a complex variable."""

from __future__ import annotations

from typing import Any

from . import real_math as rm
from .exponential import exp
from .number import Complex, to_complex
from .trig import sin
from .utils.logger import get_logger

logger = get_logger(__name__)

# Lanczos approximation with g = 8 and n = 12
LANCZOS_G = 8
LANCZOS_COEFFS = [
    Complex(0.9999999999999999298),
    Complex(1975.3739023578852322),
    Complex(-4397.3823927922428918),
    Complex(3462.6328459862717019),
    Complex(-1156.9851431631167820),
    Complex(154.53815050252775060),
    Complex(-6.2536716123689161798),
    Complex(0.034642762454736807441),
    Complex(-7.4776171974442977377e-7),
    Complex(6.3041253821852264261e-8),
    Complex(-2.7405717035683877489e-8),
    Complex(4.0486948817567609101e-9),
]

_PI = Complex(rm.pi)
_SQRT_TAU = Complex(rm.sqrt(rm.tau))


def gamma(z: Any) -> Complex:
    """
    Gamma function Γ(z).

    Uses the Lanczos approximation for ``re(z) >= 0.5`` and the reflection
    formula ``Γ(z) = π / (sin(πz) · Γ(1 - z))`` to the left of it. The
    reflected argument always lands in the right half, so at most one
    recursive call is made. NaN input compares false against 0.5 and goes
    straight to the series, returning NaN.
    """
    z = to_complex(z)
    if z.real < 0.5:
        logger.debug("gamma: reflecting %r", z)
        return _PI / (sin(_PI * z) * gamma(1 - z))

    z = z - 1
    t = z + (LANCZOS_G + 0.5)
    x = LANCZOS_COEFFS[0]
    for i in range(1, len(LANCZOS_COEFFS)):
        x = x + LANCZOS_COEFFS[i] / (z + i)

    return _SQRT_TAU * t ** (z + 0.5) * exp(-t) * x


__all__ = ['gamma', 'LANCZOS_G', 'LANCZOS_COEFFS']
