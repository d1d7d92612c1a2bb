"""
Trigonometric functions of a complex variable.

Forward functions are closed forms over the real sin/cos of the real part
and the real sinh/cosh of the imaginary part. Inverse functions go through
:func:`log` and :func:`sqrt` and inherit their principal branches.
"""

from __future__ import annotations

from typing import Any

from . import real_math as rm
from .exponential import log
from .number import Complex, I, to_complex
from .roots import sqrt


# === Forward ===

def sin(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        rm.sin(z.real) * rm.cosh(z.imag),
        rm.cos(z.real) * rm.sinh(z.imag),
    )


def cos(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        rm.cos(z.real) * rm.cosh(z.imag),
        -rm.sin(z.real) * rm.sinh(z.imag),
    )


def tan(z: Any) -> Complex:
    """``(sin 2a + i·sinh 2b) / (cos 2a + cosh 2b)`` for ``z = a + bi``."""
    z = to_complex(z)
    denom = rm.cos(2 * z.real) + rm.cosh(2 * z.imag)
    return Complex(
        rm.div(rm.sin(2 * z.real), denom),
        rm.div(rm.sinh(2 * z.imag), denom),
    )


def cot(z: Any) -> Complex:
    """``(sin 2a - i·sinh 2b) / (cosh 2b - cos 2a)`` for ``z = a + bi``."""
    z = to_complex(z)
    denom = rm.cosh(2 * z.imag) - rm.cos(2 * z.real)
    return Complex(
        rm.div(rm.sin(2 * z.real), denom),
        rm.div(-rm.sinh(2 * z.imag), denom),
    )


def sec(z: Any) -> Complex:
    z = to_complex(z)
    denom = rm.cos(2 * z.real) + rm.cosh(2 * z.imag)
    return Complex(
        rm.div(2 * rm.cos(z.real) * rm.cosh(z.imag), denom),
        rm.div(2 * rm.sin(z.real) * rm.sinh(z.imag), denom),
    )


def csc(z: Any) -> Complex:
    z = to_complex(z)
    denom = rm.cosh(2 * z.imag) - rm.cos(2 * z.real)
    return Complex(
        rm.div(2 * rm.sin(z.real) * rm.cosh(z.imag), denom),
        rm.div(-2 * rm.cos(z.real) * rm.sinh(z.imag), denom),
    )


# === Inverse ===

def asin(z: Any) -> Complex:
    """``i·log(sqrt(1 - z²) - i·z)``."""
    z = to_complex(z)
    return I * log(sqrt(1 - z * z) - Complex(-z.imag, z.real))


def acos(z: Any) -> Complex:
    """``i·log(z - i·sqrt(1 - z²))``."""
    z = to_complex(z)
    return I * log(z - I * sqrt(1 - z * z))


def atan(z: Any) -> Complex:
    z = to_complex(z)
    return -I / 2 * log((I - z) / (I + z))


def acot(z: Any) -> Complex:
    z = to_complex(z)
    return -I / 2 * log((z + I) / (z - I))


def asec(z: Any) -> Complex:
    z = to_complex(z)
    return I * log(1 / z - I * sqrt(1 - 1 / (z * z)))


def acsc(z: Any) -> Complex:
    z = to_complex(z)
    return I * log(sqrt(1 - 1 / (z * z)) - I / z)


__all__ = [
    'sin', 'cos', 'tan', 'cot', 'sec', 'csc',
    'asin', 'acos', 'atan', 'acot', 'asec', 'acsc',
]
