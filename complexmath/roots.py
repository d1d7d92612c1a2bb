"""
Root extraction and polynomial solvers.

``sqrt`` uses the half-angle Cartesian formula, which stays accurate near
the real axis where the polar route loses digits to cancellation.
``roots`` returns every nth root; ``quadratic`` and ``cubic`` solve the
corresponding polynomials with complex coefficients.
"""

from __future__ import annotations

import numbers
from typing import Any, List, Tuple

from . import real_math as rm
from .number import Complex, abs, arg, to_complex
from .utils.logger import get_logger

logger = get_logger(__name__)


def sqrt(z: Any) -> Complex:
    """
    Principal square root.

    The imaginary part takes the sign of ``z.imag``; a zero imaginary part
    counts as non-negative, so ``sqrt(-4) == 2i``.
    """
    z = to_complex(z)
    r = abs(z)
    sign = -1.0 if z.imag < 0 else 1.0
    return Complex(
        rm.sqrt((z.real + r) / 2),
        rm.sqrt((-z.real + r) / 2) * sign,
    )


def roots(z: Any, n: int) -> List[Complex]:
    """
    All n distinct nth roots of z.

    Args:
        z: Radicand
        n: Root order, an integer of at least 2

    Returns:
        List of n roots ordered by k = 0..n-1, each of magnitude
        ``|z|^(1/n)`` at angle ``arg(z)/n + 2πk/n``. An empty list when
        n is not an integer >= 2.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 2:
        logger.debug("roots: rejecting order %r", n)
        return []
    n = int(n)
    z = to_complex(z)
    radius = rm.pow(abs(z), 1 / n)
    phi_n = arg(z) / n
    result = []
    for k in range(n):
        angle = phi_n + rm.tau * k / n
        result.append(Complex(radius * rm.cos(angle), radius * rm.sin(angle)))
    return result


def quadratic(a: Any, b: Any, c: Any) -> Tuple[Complex, Complex]:
    """
    Solve ``a·z² + b·z + c = 0``.

    Returns:
        ``((-b - sqrt(D)) / 2a, (-b + sqrt(D)) / 2a)`` with
        ``D = b² - 4ac``; the minus branch comes first.
    """
    a, b, c = to_complex(a), to_complex(b), to_complex(c)
    root_d = sqrt(b * b - 4 * a * c)
    two_a = 2 * a
    return (-b - root_d) / two_a, (-b + root_d) / two_a


def cubic(a: Any, b: Any, c: Any, d: Any) -> Tuple[Complex, Complex, Complex]:
    """
    Solve ``a·z³ + b·z² + c·z + d = 0`` with Cardano's resolvent.

    With ``d0 = b² - 3ac`` and ``d1 = 2b³ - 9abc + 27a²d`` each root is
    ``(C_k + d0/C_k + b) / (-3a)``, where ``C_k`` runs over the cube roots
    of ``(d1 + sqrt(d1² - 4·d0³)) / 2`` in :func:`roots` order. When d0 is
    exactly zero ``C_k`` are the cube roots of d1 and the ``d0/C_k`` term
    is dropped.
    """
    a, b, c, d = to_complex(a), to_complex(b), to_complex(c), to_complex(d)
    d0 = b * b - 3 * a * c
    d1 = 2 * b * b * b - 9 * a * b * c + 27 * a * a * d
    minus_3a = -3 * a

    if d0 == 0:
        logger.debug("cubic: d0 == 0, using cube roots of d1")
        cube = roots(d1, 3)
        companions = [Complex(0.0, 0.0)] * 3
    else:
        cube = roots((d1 + sqrt(d1 * d1 - 4 * d0 * d0 * d0)) / 2, 3)
        companions = [d0 / ck for ck in cube]

    r0, r1, r2 = ((ck + comp + b) / minus_3a for ck, comp in zip(cube, companions))
    return r0, r1, r2


__all__ = ['sqrt', 'roots', 'quadratic', 'cubic']
