from __future__ import annotations

import math

import pandas as pd
import plotly.graph_objects as go

from constants import CHART_CELSIUS_RANGE
from conversion import celsius_to_fahrenheit, convert
from utils.numbers import parse_decimal


def build_conversion_figure(
    input_text: str,
    *,
    low: float = CHART_CELSIUS_RANGE[0],
    high: float = CHART_CELSIUS_RANGE[1],
    height: int = 400,
) -> go.Figure:
    if not low < high:
        raise ValueError("Chart range must have low < high.")

    line = pd.DataFrame({"celsius": [float(low), float(high)]})
    line["fahrenheit"] = line["celsius"].map(celsius_to_fahrenheit)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=line["celsius"],
            y=line["fahrenheit"],
            mode="lines",
            name="Conversion",
            line=dict(color="#1976d2"),
        )
    )

    # Mark the current input; anything unparsable or non-finite draws the line only
    celsius = parse_decimal(input_text)
    if celsius is not None and math.isfinite(celsius):
        fahrenheit = celsius_to_fahrenheit(celsius)
        fig.add_trace(
            go.Scatter(
                x=[celsius],
                y=[fahrenheit],
                mode="markers",
                name="Current input",
                marker=dict(size=10, color="#d32f2f"),
            )
        )
        fig.add_annotation(
            x=celsius,
            y=fahrenheit,
            text=f"{convert(input_text)}°F",
            showarrow=True,
            arrowhead=1,
            arrowcolor="#d32f2f",
            ax=0,
            ay=-30,
            font=dict(color="#d32f2f", size=12),
        )

    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=40, r=20, t=40, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Celsius (°C)",
        yaxis_title="Fahrenheit (°F)",
    )
    return fig
