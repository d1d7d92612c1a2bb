"""
Hyperbolic functions of a complex variable.

For ``z = a + bi`` the forward functions combine the real sinh/cosh of
``a`` with the real sin/cos of ``b``. Both sinh and cosh come from
:func:`complexmath.real_math.sinh` / ``cosh``, which are built from exp.
"""

from __future__ import annotations

from typing import Any

from . import real_math as rm
from .exponential import log
from .number import Complex, to_complex
from .roots import sqrt


# === Forward ===

def sinh(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        rm.sinh(z.real) * rm.cos(z.imag),
        rm.cosh(z.real) * rm.sin(z.imag),
    )


def cosh(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        rm.cosh(z.real) * rm.cos(z.imag),
        rm.sinh(z.real) * rm.sin(z.imag),
    )


def tanh(z: Any) -> Complex:
    """``(sinh 2a + i·sin 2b) / (cosh 2a + cos 2b)``."""
    z = to_complex(z)
    denom = rm.cosh(2 * z.real) + rm.cos(2 * z.imag)
    return Complex(
        rm.div(rm.sinh(2 * z.real), denom),
        rm.div(rm.sin(2 * z.imag), denom),
    )


def coth(z: Any) -> Complex:
    """``(sinh 2a - i·sin 2b) / (cosh 2a - cos 2b)``."""
    z = to_complex(z)
    denom = rm.cosh(2 * z.real) - rm.cos(2 * z.imag)
    return Complex(
        rm.div(rm.sinh(2 * z.real), denom),
        rm.div(-rm.sin(2 * z.imag), denom),
    )


def sech(z: Any) -> Complex:
    z = to_complex(z)
    denom = rm.cosh(2 * z.real) + rm.cos(2 * z.imag)
    return Complex(
        rm.div(2 * rm.cosh(z.real) * rm.cos(z.imag), denom),
        rm.div(-2 * rm.sinh(z.real) * rm.sin(z.imag), denom),
    )


def csch(z: Any) -> Complex:
    z = to_complex(z)
    denom = rm.cosh(2 * z.real) - rm.cos(2 * z.imag)
    return Complex(
        rm.div(2 * rm.sinh(z.real) * rm.cos(z.imag), denom),
        rm.div(-2 * rm.cosh(z.real) * rm.sin(z.imag), denom),
    )


# === Inverse ===

def asinh(z: Any) -> Complex:
    z = to_complex(z)
    return log(z + sqrt(z * z + 1))


def acosh(z: Any) -> Complex:
    z = to_complex(z)
    return log(z + sqrt(z * z - 1))


def atanh(z: Any) -> Complex:
    z = to_complex(z)
    return log((1 + z) / (1 - z)) / 2


def acoth(z: Any) -> Complex:
    z = to_complex(z)
    return log((z + 1) / (z - 1)) / 2


def asech(z: Any) -> Complex:
    z = to_complex(z)
    return log(1 / z + sqrt(1 / (z * z) - 1))


def acsch(z: Any) -> Complex:
    z = to_complex(z)
    return log(1 / z + sqrt(1 / (z * z) + 1))


__all__ = [
    'sinh', 'cosh', 'tanh', 'coth', 'sech', 'csch',
    'asinh', 'acosh', 'atanh', 'acoth', 'asech', 'acsch',
]
