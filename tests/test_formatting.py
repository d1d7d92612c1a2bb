import math

import pytest

from complexmath import (
    Complex, FormatConfig, DEFAULT_FORMAT, ComplexMathError, FormatConfigError,
    polar, roots, to_display_string, format_options, get_format_config,
    set_format_config,
)

z = Complex(3, 4)


def test_simple_convert():
    a = polar(1, math.radians(45))
    assert str(z) == "3.0 + 4.0i"
    assert to_display_string(a, 5) == "0.70711 + 0.70711i"


def test_negative_parts():
    assert str(Complex(1, -2)) == "1.0 - 2.0i"
    assert str(Complex(-1.5, 2)) == "-1.5 + 2.0i"


def test_roots_display_with_zero_snap():
    r = roots(1, 4)
    assert [str(x) for x in r] == ["1.0 + 0.0i", "0.0 + 1.0i", "-1.0 + 0.0i", "0.0 - 1.0i"]


def test_zero_snap_leaves_value_untouched():
    tiny = Complex(1e-15, -1e-15)
    assert str(tiny) == "0.0 + 0.0i"
    assert tiny.real == 1e-15
    assert tiny.imag == -1e-15


def test_change_format_settings():
    with format_options(sign_char=" ", imaginary_symbol="j"):
        text = str(z)
    assert text == " 3.0 + 4.0j"
    assert str(z) == "3.0 + 4.0i"


def test_sign_char_only_for_non_negative_real():
    config = FormatConfig(sign_char="+")
    assert to_display_string(z, config=config) == "+3.0 + 4.0i"
    assert to_display_string(-z, config=config) == "-3.0 - 4.0i"


def test_format_kinds():
    assert to_display_string(z, 2, FormatConfig(format_kind="e")) == "3.00e+00 + 4.00e+00i"
    assert to_display_string(z, 3, FormatConfig(format_kind="g")) == "3 + 4i"
    assert to_display_string(Complex(12345.678, -0.5), 2, FormatConfig(format_kind="E")) \
        == "1.23E+04 - 5.00E-01i"


def test_precision_from_config_and_override():
    config = FormatConfig(precision=2)
    assert to_display_string(z, config=config) == "3.00 + 4.00i"
    assert to_display_string(z, 0, config) == "3 + 4i"


def test_custom_epsilon():
    value = Complex(0.001, 2)
    assert to_display_string(value, 3) == "0.001 + 2.000i"
    assert to_display_string(value, 3, FormatConfig(epsilon=0.01)) == "0.000 + 2.000i"


def test_builtin_format():
    assert format(z, "") == "3.0 + 4.0i"
    assert format(z, ".2") == "3.00 + 4.00i"
    assert f"{z:.1e}" == "3.0e+00 + 4.0e+00i"
    assert f"{z:f}" == "3.000000 + 4.000000i"
    with pytest.raises(FormatConfigError):
        format(z, "10d")


def test_non_finite_components():
    assert str(Complex(math.inf, -math.inf)) == "inf - infi"
    assert str(Complex(float("nan"), 1)) == "nan + 1.0i"


def test_set_format_config_returns_previous():
    previous = set_format_config(FormatConfig(imaginary_symbol="j"))
    try:
        assert previous == DEFAULT_FORMAT
        assert get_format_config().imaginary_symbol == "j"
        assert str(z) == "3.0 + 4.0j"
    finally:
        set_format_config(previous)
    assert str(z) == "3.0 + 4.0i"


def test_nested_format_options():
    with format_options(precision=1) as outer:
        assert outer.precision == 1
        with format_options(imaginary_symbol="j"):
            assert str(z) == "3.0 + 4.0j"
            assert get_format_config().precision == 1
        assert str(z) == "3.0 + 4.0i"
    assert get_format_config() == DEFAULT_FORMAT


@pytest.mark.parametrize("kwargs", [
    {"format_kind": "x"},
    {"precision": -1},
    {"precision": 2.5},
    {"sign_char": "-"},
    {"imaginary_symbol": 1},
    {"epsilon": -1.0},
    {"epsilon": "small"},
])
def test_invalid_config(kwargs):
    with pytest.raises(FormatConfigError) as excinfo:
        FormatConfig(**kwargs)
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, ComplexMathError)


def test_invalid_options_and_precision():
    with pytest.raises(FormatConfigError):
        with format_options(bogus=1):
            pass
    with pytest.raises(FormatConfigError):
        to_display_string(z, -2)
    with pytest.raises(FormatConfigError):
        set_format_config({"precision": 3})


def test_error_message():
    err = FormatConfigError("bad precision")
    assert err.message == "bad precision"
    assert str(err) == "FormatConfigError: bad precision"


def test_display_coerces_input():
    assert to_display_string(2) == "2.0 + 0.0i"
    assert to_display_string(1 - 2j, 1) == "1.0 - 2.0i"
