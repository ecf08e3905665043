from __future__ import annotations

from typing import Iterable

import pandas as pd

from constants import FAHRENHEIT_OFFSET, FAHRENHEIT_SCALE, NULL_SENTINEL, REFERENCE_CELSIUS
from utils.numbers import format_double, parse_decimal


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET


def convert(text: str) -> str:
    """
    Convert raw Celsius input text into the Fahrenheit display string.

    Text that does not parse as a number yields the "null" sentinel; this
    function never raises for any input.
    """
    celsius = parse_decimal(text)
    if celsius is None:
        return NULL_SENTINEL
    return format_double(celsius_to_fahrenheit(celsius))


def reference_table(values: Iterable[float] = REFERENCE_CELSIUS) -> pd.DataFrame:
    rows = []
    for v in values:
        celsius_text = format_double(float(v))
        rows.append({"celsius": celsius_text, "fahrenheit": convert(celsius_text)})
    return pd.DataFrame(rows, columns=["celsius", "fahrenheit"])
