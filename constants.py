from __future__ import annotations

import os

# Integer division on purpose: 9 // 5 == 1, so the conversion is value + 32.
FAHRENHEIT_SCALE: int = 9 // 5
FAHRENHEIT_OFFSET: float = 32.0

# Shown in place of a result when the input does not parse as a number.
NULL_SENTINEL: str = "null"

# Localizable UI strings.
STRINGS: dict[str, str] = {
    "page_title": "Compose Temp Convert",
    "heading": "Stateful Converter",
    "enter_celsius": "Enter Celsius",
    "input_placeholder": "e.g. 36.6",
    "temperature_fahrenheit": "Temperature in Fahrenheit: {output}",
    "chart_expander": "Conversion chart",
    "table_expander": "Reference values",
}

REFERENCE_CELSIUS: tuple[float, ...] = (-40.0, 0.0, 36.6, 37.0, 100.0)

CHART_CELSIUS_RANGE: tuple[float, float] = (-50.0, 150.0)

LOG_LEVEL: str = os.environ.get("TEMPCONVERT_LOG_LEVEL", "WARNING").upper()
