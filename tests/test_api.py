import complexmath as cm
from complexmath import Complex


def test_version():
    assert cm.__version__ == "0.1.0"
    assert cm.__version_info__ == (0, 1, 0)


def test_exports_resolve():
    for name in cm.__all__:
        assert hasattr(cm, name), name


def test_functions_available_as_methods():
    z = Complex(3, 4)
    assert z.exp() == cm.exp(z)
    assert z.log(10) == cm.log(z, 10)
    assert z.sqrt() == cm.sqrt(z)
    assert z.roots(3) == cm.roots(z, 3)
    assert z.sin() == cm.sin(z)
    assert z.acsch() == cm.acsch(z)
    assert z.gamma() == cm.gamma(z)


def test_imaginary_unit():
    assert cm.I == Complex(0, 1)
    assert Complex.i is cm.I
    assert cm.I * cm.I == -1


def test_repr():
    assert repr(Complex(3, 4)) == "Complex(real=3.0, imag=4.0)"


def test_star_import_leaves_builtins_alone():
    import complexmath.number
    for exported in (cm.__all__, complexmath.number.__all__):
        assert "abs" not in exported
        assert "round" not in exported
    assert cm.abs(Complex(3, 4)) == 5
    assert cm.round(Complex(1.25, 0), 1) == Complex(1.3, 0)
