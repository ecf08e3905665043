from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Optional

_DECIMAL_RE = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?)"
)
_PADDING = "".join(chr(c) for c in range(0x21))


def parse_decimal(text: str) -> Optional[float]:
    """
    Parse text as a floating-point number independent of locale.

    Accepts an optional sign followed by a plain decimal, an exponent, an
    optional f/d type suffix, or the words NaN and Infinity. Surrounding
    control and space characters are ignored. Anything else returns None.
    """
    stripped = text.strip(_PADDING)
    if not _DECIMAL_RE.fullmatch(stripped):
        return None
    if stripped[-1] in "fFdD":
        stripped = stripped[:-1]
    return float(stripped)


def format_double(value: float) -> str:
    """
    Render a float the way the JVM stringifies a double, e.g. '132.0',
    '-8.0', '1.0000032E7' or '1.0E-4'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    magnitude = abs(value)
    sign = "-" if value < 0 else ""
    if 1e-3 <= magnitude < 1e7:
        # repr stays in fixed notation across this whole range
        return sign + repr(magnitude)

    _, digits, exponent = Decimal(repr(magnitude)).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    scientific_exponent = exponent + len(digits) - 1
    fraction = "".join(str(d) for d in digits[1:]) or "0"
    return f"{sign}{digits[0]}.{fraction}E{scientific_exponent}"
