"""
complexmath.real_math - Real-valued primitives with IEEE-754 edge behaviour.

Python's math module raises on several inputs where IEEE-754 arithmetic
simply produces an infinity or a NaN (``1.0 / 0.0``, ``log(0.0)``,
``exp(1000.0)``, ``sin(inf)``). The complex layer must never
raise on numeric edge cases, so every real operation it performs goes
through the wrappers here.

Available functions:
    - Arithmetic: div, pow
    - Exponential/Log: exp, log
    - Trigonometric: sin, cos, atan2
    - Hyperbolic: sinh, cosh (built from exp)
    - Root: sqrt
    - Rounding: round_half_up
"""

from __future__ import annotations

import math

# === Constants ===
pi = math.pi
e = math.e
tau = 2.0 * pi
inf = float('inf')
nan = float('nan')

isnan = math.isnan
isinf = math.isinf
atan2 = math.atan2


# === IEEE wrappers ===

def to_float(x) -> float:
    """Convert a real number to float; integers beyond double range become +-inf."""
    try:
        return float(x)
    except OverflowError:
        return inf if x > 0 else -inf


def div(x: float, y: float) -> float:
    """Return x / y, with IEEE-754 results for a zero divisor."""
    if y != 0.0:
        return x / y
    if x == 0.0 or isnan(x):
        return nan
    # sign of the infinity follows the signs of both zero and numerator
    return math.copysign(inf, x) * math.copysign(1.0, y)


def exp(x: float) -> float:
    """Return e^x, saturating to inf on overflow."""
    try:
        return math.exp(x)
    except OverflowError:
        return inf


def log(x: float) -> float:
    """Natural logarithm; log(0) is -inf and negative input is NaN."""
    if x == 0.0:
        return -inf
    if x < 0.0:
        return nan
    return math.log(x)


def sqrt(x: float) -> float:
    """Square root; negative input gives NaN."""
    if x < 0.0:
        return nan
    return math.sqrt(x)


def pow(x: float, y: float) -> float:
    """Return x ** y for real operands without raising.

    Only used with a non-negative base (a magnitude), so complex results
    never arise here.
    """
    if x == 0.0 and y < 0.0:
        return inf
    try:
        return math.pow(x, y)
    except OverflowError:
        return inf
    except ValueError:
        return nan


def sin(x: float) -> float:
    """Sine; infinite input gives NaN."""
    if isinf(x):
        return nan
    return math.sin(x)


def cos(x: float) -> float:
    """Cosine; infinite input gives NaN."""
    if isinf(x):
        return nan
    return math.cos(x)


def sinh(x: float) -> float:
    """Hyperbolic sine, (e^x - e^-x) / 2."""
    return (exp(x) - exp(-x)) / 2


def cosh(x: float) -> float:
    """Hyperbolic cosine, (e^x + e^-x) / 2."""
    return (exp(x) + exp(-x)) / 2


def round_half_up(x: float, prec: int = 0) -> float:
    """Round x to prec decimals, halves rounding towards +inf."""
    if isnan(x) or isinf(x):
        return x
    try:
        shift = 10.0 ** prec
    except OverflowError:
        return x
    if shift == 0.0:
        return x
    scaled = x * shift
    if isinf(scaled):
        return x
    return math.floor(scaled + 0.5) / shift


__all__ = [
    # Constants
    'pi', 'e', 'tau', 'inf', 'nan',
    # Predicates
    'isnan', 'isinf',
    # Functions
    'to_float', 'div', 'exp', 'log', 'sqrt', 'pow',
    'sin', 'cos', 'atan2', 'sinh', 'cosh',
    'round_half_up',
]
