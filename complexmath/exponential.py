"""
Complex exponential and logarithm.

Most transcendental functions in this package are built on these two.
"""

from __future__ import annotations

from typing import Any, Optional

from . import real_math as rm
from .number import Complex, _is_scalar, arg, divide, norm, to_complex


def exp(z: Any) -> Complex:
    """Complex exponent, ``e^re · (cos im, sin im)``."""
    z = to_complex(z)
    scale = rm.exp(z.real)
    return Complex(scale * rm.cos(z.imag), scale * rm.sin(z.imag))


def log(z: Any, base: Optional[Any] = None) -> Complex:
    """
    Complex logarithm on the principal branch.

    Args:
        z: Value to take the logarithm of
        base: Optional base. A real base rescales both parts by
            ``1 / ln(base)``; a complex base uses ``log(z) / log(base)``.

    Returns:
        ``(ln|z|, arg z)`` for the natural logarithm. ``log(0)`` has a
        real part of ``-inf``.
    """
    z = to_complex(z)
    if base is None:
        # ln(norm) / 2 == ln(abs) without the square root
        return Complex(rm.log(norm(z)) / 2, arg(z))
    if _is_scalar(base):
        ln_base = rm.log(base)
        return Complex(
            rm.div(rm.log(norm(z)), ln_base) / 2,
            rm.div(rm.log(rm.e), ln_base) * arg(z),
        )
    return divide(log(z), log(base))


__all__ = ['exp', 'log']
