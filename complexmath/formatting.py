"""
Display formatting for complex numbers.

Formatting is configured by a frozen :class:`FormatConfig`. A config can
be passed explicitly to :func:`to_display_string`, or installed for the
current thread / async task with :func:`set_format_config` and the
:func:`format_options` context manager. Arithmetic never reads it.

Usage:
    >>> from complexmath import Complex, format_options
    >>> str(Complex(3, 4))
    '3.0 + 4.0i'
    >>> with format_options(sign_char=' ', imaginary_symbol='j'):
    ...     str(Complex(3, 4))
    ' 3.0 + 4.0j'
"""

from __future__ import annotations

import math
import re
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional

from .exceptions import FormatConfigError
from .number import to_complex
from .utils.logger import get_logger

logger = get_logger(__name__)

FORMAT_KINDS = ("f", "F", "g", "G", "e", "E")
SIGN_CHARS = (None, " ", "+")

_SPEC_RE = re.compile(r"^(?:\.(?P<precision>\d+))?(?P<kind>[fFgGeE])?$")


def _check_precision(precision: Any) -> None:
    if precision is None:
        return
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise FormatConfigError(f"precision must be a non-negative integer, got {precision!r}")


@dataclass(frozen=True)
class FormatConfig:
    """
    Display settings for complex numbers.

    Attributes:
        precision: Digits after the point (None keeps Python's shortest repr)
        format_kind: One of f, F, g, G, e, E
        sign_char: Prefix for a non-negative real part: None, ' ' or '+'
        imaginary_symbol: Suffix of the imaginary part, usually 'i' or 'j'
        epsilon: Components with smaller magnitude are shown as zero
    """

    precision: Optional[int] = None
    format_kind: str = "f"
    sign_char: Optional[str] = None
    imaginary_symbol: str = "i"
    epsilon: float = 1e-14

    def __post_init__(self):
        _check_precision(self.precision)
        if self.format_kind not in FORMAT_KINDS:
            raise FormatConfigError(
                f"format_kind must be one of {FORMAT_KINDS}, got {self.format_kind!r}"
            )
        if self.sign_char not in SIGN_CHARS:
            raise FormatConfigError(
                f"sign_char must be one of {SIGN_CHARS}, got {self.sign_char!r}"
            )
        if not isinstance(self.imaginary_symbol, str):
            raise FormatConfigError("imaginary_symbol must be a string")
        if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, (int, float)) \
                or not self.epsilon >= 0:
            raise FormatConfigError(f"epsilon must be a non-negative number, got {self.epsilon!r}")


DEFAULT_FORMAT = FormatConfig()

_current_config: ContextVar[FormatConfig] = ContextVar(
    "complexmath_format_config", default=DEFAULT_FORMAT
)


def get_format_config() -> FormatConfig:
    """Return the format config active in the current context."""
    return _current_config.get()


def set_format_config(config: FormatConfig) -> FormatConfig:
    """Install ``config`` for the current context and return the previous one."""
    if not isinstance(config, FormatConfig):
        raise FormatConfigError(f"expected FormatConfig, got {type(config).__name__}")
    previous = _current_config.get()
    _current_config.set(config)
    logger.debug("format config set to %r", config)
    return previous


@contextmanager
def format_options(**changes) -> Iterator[FormatConfig]:
    """
    Temporarily override fields of the active format config.

    Args:
        **changes: FormatConfig fields to replace

    Yields:
        The config in effect inside the block
    """
    try:
        config = replace(_current_config.get(), **changes)
    except TypeError as err:
        raise FormatConfigError(str(err)) from err
    token = _current_config.set(config)
    try:
        yield config
    finally:
        _current_config.reset(token)


def _snap(x: float, epsilon: float) -> float:
    return 0.0 if math.fabs(x) < epsilon else x


def _render(x: float, precision: Optional[int], kind: str) -> str:
    if precision is None:
        return str(x)
    return format(x, f".{precision}{kind}")


def to_display_string(z: Any, precision: Optional[int] = None,
                      config: Optional[FormatConfig] = None) -> str:
    """
    Render ``z`` as ``[sign]re + |im|i`` (or ``re - |im|i``).

    Args:
        z: Value to render, coerced to Complex
        precision: Overrides ``config.precision`` when given
        config: Settings to use; defaults to the active context config

    Returns:
        The display string. Components below ``config.epsilon`` in
        magnitude are shown as zero; ``z`` itself is left untouched.
    """
    config = config or get_format_config()
    _check_precision(precision)
    if precision is None:
        precision = config.precision

    z = to_complex(z)
    real = _snap(z.real, config.epsilon)
    imag = _snap(z.imag, config.epsilon)

    parts = []
    if config.sign_char is not None and real >= 0:
        parts.append(config.sign_char)
    parts.append(_render(real, precision, config.format_kind))
    parts.append(" - " if imag < 0 else " + ")
    parts.append(_render(math.fabs(imag), precision, config.format_kind))
    parts.append(config.imaginary_symbol)
    return "".join(parts)


def format_spec_string(z: Any, format_spec: str) -> str:
    """Support ``format(z, '.5')`` and ``f'{z:.3e}'``."""
    if not format_spec:
        return to_display_string(z)
    match = _SPEC_RE.match(format_spec)
    if match is None:
        raise FormatConfigError(f"invalid format spec {format_spec!r} for Complex")

    config = get_format_config()
    kind = match.group("kind")
    precision = match.group("precision")
    if precision is not None:
        precision = int(precision)
    elif kind is not None:
        # same default as float.__format__
        precision = 6
    if kind is not None:
        config = replace(config, format_kind=kind)
    return to_display_string(z, precision, config)


__all__ = [
    'FormatConfig', 'DEFAULT_FORMAT', 'FORMAT_KINDS', 'SIGN_CHARS',
    'get_format_config', 'set_format_config', 'format_options',
    'to_display_string', 'format_spec_string',
]
