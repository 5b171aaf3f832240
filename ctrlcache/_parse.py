from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Any, List, Mapping, Optional

from ._settings import DIRECTIVES, DIRECTIVES_BY_TOKEN, CacheControlSettings, Number

__all__ = (
    "parse_cache_control",
    "serialize_cache_control",
)

logger = logging.getLogger("ctrlcache.parse")

CACHE_CONTROL_LABEL = "Cache-Control:"
DIRECTIVE_SEPARATOR = ", "

_INTEGER = re.compile(r"[+-]?[0-9]+")
# Each alternative has one way to consume a digit run, keeping fullmatch linear.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Integers at or above this are written in exponent notation, like any float.
_EXPONENT_THRESHOLD = 10**21


def parse_number(value: Optional[str]) -> Optional[Number]:
    """
    Parse a directive value as a number, return None if invalid.

    Surrounding whitespace is ignored. Plain integers stay ``int``,
    fractional or exponent notation becomes ``float``.

    Examples:
        >>> parse_number(" 60 ")
        60
        >>> parse_number("-1.5")
        -1.5
        >>> parse_number("invalid") is None
        True
        >>> parse_number("") is None
        True
    """
    if value is None:
        return None

    value = value.strip()
    if _INTEGER.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # Too many digits for int(); the float overflows to infinity.
            return float(value)
    if _DECIMAL.fullmatch(value):
        return float(value)
    return None


def format_number(value: Number) -> str:
    """
    Render a numeric directive value as decimal text.

    Integral floats lose their decimal point so that ``60.0`` and ``60``
    produce the same header. Magnitudes below ``1e-6`` or from ``1e21`` up
    switch to exponent notation (``1e-7``, ``1.5e+21``), the way
    ECMAScript renders numbers.

    Examples:
        >>> format_number(60.0)
        '60'
        >>> format_number(1e-7)
        '1e-7'
        >>> format_number(10**21)
        '1e+21'
    """
    if isinstance(value, bool) or not isinstance(value, float):
        if -_EXPONENT_THRESHOLD < value < _EXPONENT_THRESHOLD:
            return str(int(value))
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    # Position of the decimal point relative to the start of the digits.
    point = len(digit_tuple) + int(exponent)
    count = len(digits)

    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits if count == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def strip_label(header: str) -> str:
    text = header.lstrip()
    if text.startswith(CACHE_CONTROL_LABEL):
        return text[len(CACHE_CONTROL_LABEL) :]
    return header


def serialize_cache_control(settings: Mapping[str, Any]) -> str:
    """
    Serialize Cache-Control settings into a header value.

    Directives are always emitted in the fixed directive table order,
    whatever order the settings were given in. Numeric directives set to
    None and flags that are not ``True`` are left out.

    Args:
        settings: The cache control settings.

    Returns:
        The header value, e.g. ``"max-age=60, no-cache"``. Empty settings
        give an empty string.

    Examples:
        >>> serialize_cache_control({"max_age": 60, "no_cache": True})
        'max-age=60, no-cache'
        >>> serialize_cache_control({"no_store": False})
        ''
    """
    directives: List[str] = []

    for directive in DIRECTIVES:
        value = settings.get(directive.name)
        if directive.is_numeric:
            if value is not None:
                directives.append(f"{directive.token}={format_number(value)}")
        elif value is True:
            directives.append(directive.token)

    return DIRECTIVE_SEPARATOR.join(directives)


def parse_cache_control(header: Optional[str]) -> CacheControlSettings:
    """
    Parse a Cache-Control header into settings.

    The header may carry a leading ``Cache-Control:`` label. Parsing never
    fails: unknown directives, numeric directives without a valid number and
    empty segments are dropped from the result. Flag directives are set even
    when followed by ``=value``.

    Args:
        header: The Cache-Control header, with or without its label.

    Returns:
        Settings containing only the recognized directives.

    Examples:
        >>> parse_cache_control("Cache-Control: max-age=60, no-cache")
        {'max_age': 60, 'no_cache': True}
        >>> parse_cache_control("max-age=invalid, no-store=false")
        {'no_store': True}
    """
    settings: CacheControlSettings = {}

    if header is None:
        return settings

    for segment in strip_label(header).split(","):
        key, separator, raw_value = segment.partition("=")
        key = key.strip()
        value = raw_value if separator else None

        directive = DIRECTIVES_BY_TOKEN.get(key)
        if directive is None:
            if key:
                logger.debug("Ignoring unknown Cache-Control directive %r", key)
            continue

        if not directive.is_numeric:
            settings[directive.name] = True
            continue

        number = parse_number(value)
        if number is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Ignoring '{directive.token}' because {value!r} is not a valid number")
            continue
        settings[directive.name] = number  # type: ignore

    return settings
