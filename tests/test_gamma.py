import math

import pytest

from complexmath import Complex, gamma
from complexmath.gamma import LANCZOS_COEFFS, LANCZOS_G


def test_coefficient_table():
    assert LANCZOS_G == 8
    assert len(LANCZOS_COEFFS) == 12
    assert all(c.imag == 0 for c in LANCZOS_COEFFS)


def test_use_as_factorial():
    value = gamma(10)
    assert value.real == pytest.approx(362880, rel=1e-10)
    assert value.imag == pytest.approx(0, abs=1e-6)


@pytest.mark.parametrize("n", range(1, 15))
def test_factorial_identity(n):
    value = gamma(n)
    assert value.real == pytest.approx(math.factorial(n - 1), rel=1e-10)


def test_complex_argument():
    value = Complex(3, 4).gamma()
    assert value.real == pytest.approx(0.00523, abs=1e-5)
    assert value.imag == pytest.approx(-0.17255, abs=1e-5)


def test_half_integer():
    value = gamma(0.5)
    assert value.real == pytest.approx(math.sqrt(math.pi), rel=1e-12)


@pytest.mark.parametrize("x", [-0.5, -1.5, 0.25, -2.7, 0.1])
def test_reflection_matches_real_gamma(x):
    value = gamma(x)
    assert value.real == pytest.approx(math.gamma(x), rel=1e-9)
    assert value.imag == pytest.approx(0, abs=1e-9)


def test_reflection_formula_holds():
    z = Complex(-1.3, 0.8)
    lhs = gamma(z) * gamma(1 - z)
    rhs = math.pi / (math.pi * z).sin()
    assert lhs.real == pytest.approx(rhs.real, rel=1e-9, abs=1e-12)
    assert lhs.imag == pytest.approx(rhs.imag, rel=1e-9, abs=1e-12)


def test_recurrence():
    z = Complex(2.5, -1.5)
    lhs = gamma(z + 1)
    rhs = z * gamma(z)
    assert lhs.real == pytest.approx(rhs.real, rel=1e-10)
    assert lhs.imag == pytest.approx(rhs.imag, rel=1e-10)


def test_nan_input_terminates():
    value = gamma(Complex(float("nan"), 0))
    assert math.isnan(value.real)
    value = gamma("not a number")
    assert math.isnan(value.real) and math.isnan(value.imag)
