"""
complexmath - Complex numbers and complex-valued functions

complexmath provides an immutable double-precision Complex type with
mixed complex/real arithmetic, and the usual complex functions:
exponential and logarithm, roots and polynomial solvers, trigonometric
and hyperbolic families with their inverses, and the Gamma function.

Basic Usage:
    >>> import complexmath as cm
    >>> z = cm.Complex(3, 4)
    >>> z * cm.Complex(2, 5)
    Complex(real=-14.0, imag=23.0)
    >>> abs(z), z.norm()
    (5.0, 25.0)
    >>> [str(r) for r in cm.roots(1, 4)]
    ['1.0 + 0.0i', '0.0 + 1.0i', '-1.0 + 0.0i', '0.0 - 1.0i']

Every function is also available as a method: ``z.exp()``, ``z.log(10)``,
``z.roots(3)``, ``z.gamma()``.

Numeric edge cases never raise. Division by zero, log(0) and overflow
propagate IEEE-754 infinities and NaNs, and non-numeric operands coerce
to ``Complex(nan, nan)``.
"""

import logging

from ._version import __version__, __version_info__

from . import real_math
from .exceptions import ComplexMathError, FormatConfigError
from .number import (
    Complex, I, to_complex,
    negate, add, subtract, multiply, divide, power, equals,
    conj, norm, abs, arg, polar, crd, plr, re, im, round,
)
from .exponential import exp, log
from .roots import sqrt, roots, quadratic, cubic
from .trig import (
    sin, cos, tan, cot, sec, csc,
    asin, acos, atan, acot, asec, acsc,
)
from .hyperbolic import (
    sinh, cosh, tanh, coth, sech, csch,
    asinh, acosh, atanh, acoth, asech, acsch,
)
from .gamma import gamma
from .formatting import (
    FormatConfig, DEFAULT_FORMAT,
    get_format_config, set_format_config, format_options,
    to_display_string,
)
from .utils.logger import get_logger, setup_logger

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Functions reachable as Complex methods, e.g. z.sin() or z.log(10)
_METHOD_FUNCTIONS = (
    exp, log, sqrt, roots,
    sin, cos, tan, cot, sec, csc,
    asin, acos, atan, acot, asec, acsc,
    sinh, cosh, tanh, coth, sech, csch,
    asinh, acosh, atanh, acoth, asech, acsch,
    gamma,
)
for _func in _METHOD_FUNCTIONS:
    setattr(Complex, _func.__name__, _func)
del _func

__all__ = [
    '__version__', '__version_info__',
    # Types and constants
    'Complex', 'I', 'FormatConfig', 'DEFAULT_FORMAT',
    # Errors
    'ComplexMathError', 'FormatConfigError',
    # Coercion and arithmetic
    'to_complex', 'negate', 'add', 'subtract', 'multiply', 'divide',
    'power', 'equals',
    # Polar / norm
    'conj', 'norm', 'arg', 'polar', 'crd', 'plr', 're', 'im',
    # Exponential / log
    'exp', 'log',
    # Roots
    'sqrt', 'roots', 'quadratic', 'cubic',
    # Trigonometric
    'sin', 'cos', 'tan', 'cot', 'sec', 'csc',
    'asin', 'acos', 'atan', 'acot', 'asec', 'acsc',
    # Hyperbolic
    'sinh', 'cosh', 'tanh', 'coth', 'sech', 'csch',
    'asinh', 'acosh', 'atanh', 'acoth', 'asech', 'acsch',
    # Special
    'gamma',
    # Formatting
    'get_format_config', 'set_format_config', 'format_options',
    'to_display_string',
    # Logging
    'get_logger', 'setup_logger',
    # Real-valued helpers
    'real_math',
]
