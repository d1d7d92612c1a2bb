"""
Complex value type and arithmetic.

The Complex type is an immutable Cartesian pair of floats. Every
operator coerces its operands through :func:`to_complex`, so plain real
numbers mix freely with complex values and anything non-numeric becomes a
NaN-valued complex number instead of raising.

Named functions (``add``, ``multiply``, ``power`` ...) are the canonical
implementations; the operator dunders on :class:`Complex` delegate to them.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple

from . import real_math as rm


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Complex number ``real + imag·i`` in double precision.

    Both parts default to zero and are stored as floats. Instances never
    change; every operation returns a new value.

    Examples:
        >>> z = Complex(3, 4)
        >>> z + Complex(2, 5)
        Complex(real=5.0, imag=9.0)
        >>> abs(z)
        5.0
    """

    real: float = 0.0
    imag: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "real", _component(self.real))
        object.__setattr__(self, "imag", _component(self.imag))

    # === Access ===

    @property
    def re(self) -> float:
        """Real part."""
        return self.real

    @property
    def im(self) -> float:
        """Imaginary part."""
        return self.imag

    # === Operators ===

    def __neg__(self) -> Complex:
        return negate(self)

    def __pos__(self) -> Complex:
        return self

    def __add__(self, other) -> Complex:
        return add(self, other)

    def __radd__(self, other) -> Complex:
        return add(other, self)

    def __sub__(self, other) -> Complex:
        return subtract(self, other)

    def __rsub__(self, other) -> Complex:
        return subtract(other, self)

    def __mul__(self, other) -> Complex:
        return multiply(self, other)

    def __rmul__(self, other) -> Complex:
        return multiply(self, other)

    def __truediv__(self, other) -> Complex:
        return divide(self, other)

    def __rtruediv__(self, other) -> Complex:
        return divide(other, self)

    def __pow__(self, other) -> Complex:
        return power(self, other)

    def __rpow__(self, other) -> Complex:
        return power(other, self)

    def __eq__(self, other) -> bool:
        return equals(self, other)

    def __hash__(self) -> int:
        # hash(Complex(3)) == hash(3)
        return hash(complex(self.real, self.imag))

    def __abs__(self) -> float:
        return abs(self)

    def __round__(self, ndigits=None) -> Complex:
        return round(self, ndigits or 0)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        from .formatting import to_display_string
        return to_display_string(self)

    def __format__(self, format_spec: str) -> str:
        from .formatting import format_spec_string
        return format_spec_string(self, format_spec)

    # === Polar / norm ===

    def conj(self) -> Complex:
        return conj(self)

    def norm(self) -> float:
        return norm(self)

    def abs(self) -> float:
        return abs(self)

    def arg(self) -> float:
        return arg(self)

    def crd(self) -> Tuple[float, float]:
        return crd(self)

    def plr(self) -> Tuple[float, float]:
        return plr(self)

    def round(self, prec: int = 0) -> Complex:
        return round(self, prec)


def _component(value) -> float:
    if value is None:
        return 0.0
    if isinstance(value, numbers.Real):
        return rm.to_float(value)
    return float(value)


def _is_scalar(value: Any) -> bool:
    """True for plain real numbers, which take the cheap operator paths."""
    return isinstance(value, numbers.Real)


# =============================================================================
# COERCION
# =============================================================================

def to_complex(value: Any) -> Complex:
    """
    Convert any value to a Complex number.

    Args:
        value: Complex, real number, Python complex, or a mapping with
            ``real``/``imag`` keys

    Returns:
        The value itself for Complex input, ``Complex(value, 0)`` for real
        numbers, and ``Complex(nan, nan)`` for anything unrecognised.
    """
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex(value, 0.0)
    if isinstance(value, numbers.Complex):
        return Complex(value.real, value.imag)
    if isinstance(value, Mapping):
        real = value.get("real")
        imag = value.get("imag")
        if all(part is None or _is_scalar(part) for part in (real, imag)):
            return Complex(real, imag)
    return Complex(rm.nan, rm.nan)


# =============================================================================
# ARITHMETIC
# =============================================================================

def negate(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(-z.real, -z.imag)


def add(lhs: Any, rhs: Any) -> Complex:
    lhs = to_complex(lhs)
    rhs = to_complex(rhs)
    return Complex(lhs.real + rhs.real, lhs.imag + rhs.imag)


def subtract(lhs: Any, rhs: Any) -> Complex:
    lhs = to_complex(lhs)
    rhs = to_complex(rhs)
    return Complex(lhs.real - rhs.real, lhs.imag - rhs.imag)


def multiply(lhs: Any, rhs: Any) -> Complex:
    """Product; a real scalar on either side scales both components."""
    if _is_scalar(lhs):
        lhs, rhs = rhs, lhs
    lhs = to_complex(lhs)
    if _is_scalar(rhs):
        scale = rm.to_float(rhs)
        return Complex(lhs.real * scale, lhs.imag * scale)
    rhs = to_complex(rhs)
    return Complex(
        lhs.real * rhs.real - lhs.imag * rhs.imag,
        lhs.real * rhs.imag + lhs.imag * rhs.real,
    )


def divide(lhs: Any, rhs: Any) -> Complex:
    """
    Quotient ``lhs / rhs``.

    A real scalar divisor divides component-wise. Otherwise the numerator
    is multiplied by the conjugate of the divisor and scaled by its norm.
    A zero divisor yields infinities or NaNs, never ZeroDivisionError.
    """
    lhs = to_complex(lhs)
    if _is_scalar(rhs):
        d = rm.to_float(rhs)
        return Complex(rm.div(lhs.real, d), rm.div(lhs.imag, d))
    rhs = to_complex(rhs)
    d = norm(rhs)
    return Complex(
        rm.div(lhs.real * rhs.real + lhs.imag * rhs.imag, d),
        rm.div(lhs.imag * rhs.real - lhs.real * rhs.imag, d),
    )


def power(base: Any, exponent: Any) -> Complex:
    """
    Raise ``base`` to ``exponent``.

    A real exponent goes through polar form, ``|z|^x`` at angle
    ``arg(z)·x``. A complex exponent is evaluated as
    ``exp(exponent · log(base))`` on the principal branch of log.
    """
    base = to_complex(base)
    if _is_scalar(exponent):
        x = rm.to_float(exponent)
        return polar(rm.pow(abs(base), x), arg(base) * x)

    from .exponential import exp, log
    return exp(multiply(to_complex(exponent), log(base)))


def equals(lhs: Any, rhs: Any) -> bool:
    """Exact field-wise equality after coercion; no tolerance."""
    lhs = to_complex(lhs)
    rhs = to_complex(rhs)
    return lhs.real == rhs.real and lhs.imag == rhs.imag


# =============================================================================
# POLAR / NORM PRIMITIVES
# =============================================================================

def conj(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(z.real, -z.imag)


def norm(z: Any) -> float:
    """Squared magnitude, ``real² + imag²``."""
    z = to_complex(z)
    return z.real * z.real + z.imag * z.imag


def abs(z: Any) -> float:
    """Magnitude, ``sqrt(norm(z))``."""
    return rm.sqrt(norm(z))


def arg(z: Any) -> float:
    """
    Principal argument in ``(-π, π]``.

    ``atan2`` reports ``-π`` for a negative real axis with ``-0.0``
    imaginary part; that is folded onto ``π``.
    """
    z = to_complex(z)
    phi = rm.atan2(z.imag, z.real)
    if phi == -rm.pi:
        return rm.pi
    return phi


def polar(r: float = 0.0, phi: float = 0.0) -> Complex:
    """Construct a complex number from magnitude and angle."""
    r, phi = rm.to_float(r), rm.to_float(phi)
    return Complex(r * rm.cos(phi), r * rm.sin(phi))


def crd(z: Any) -> Tuple[float, float]:
    z = to_complex(z)
    return z.real, z.imag


def plr(z: Any) -> Tuple[float, float]:
    """Polar coordinates ``(abs(z), arg(z))``; inverse of :func:`polar`."""
    return abs(z), arg(z)


def re(z: Any) -> float:
    return to_complex(z).real


def im(z: Any) -> float:
    return to_complex(z).imag


def round(z: Any, prec: int = 0) -> Complex:
    """Round both components to ``prec`` decimals, halves upward."""
    z = to_complex(z)
    return Complex(
        rm.round_half_up(z.real, prec),
        rm.round_half_up(z.imag, prec),
    )


# Imaginary unit
I = Complex(0.0, 1.0)
Complex.i = I

__all__ = [
    'Complex', 'I', 'to_complex',
    'negate', 'add', 'subtract', 'multiply', 'divide', 'power', 'equals',
    'conj', 'norm', 'arg', 'polar', 'crd', 'plr', 're', 'im',
]
