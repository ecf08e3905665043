import plotly.graph_objects as go
import pytest

from charts import build_conversion_figure


def test_build_conversion_figure_basic_properties():
    fig = build_conversion_figure("100", low=-50, high=150, height=500)
    assert isinstance(fig, go.Figure)
    assert fig.layout.height == 500

    names = [t.name for t in fig.data]
    assert names == ["Conversion", "Current input"]

    line = fig.data[0]
    assert list(line.x) == [-50.0, 150.0]
    assert list(line.y) == [-18.0, 182.0]

    marker = fig.data[1]
    assert list(marker.x) == [100.0]
    assert list(marker.y) == [132.0]

    ann_texts = [a.text for a in fig.layout.annotations]
    assert "132.0°F" in ann_texts

    assert fig.layout.xaxis.title.text == "Celsius (°C)"
    assert fig.layout.yaxis.title.text == "Fahrenheit (°F)"


@pytest.mark.parametrize("text", ["", "abc", "NaN", "Infinity"])
def test_build_conversion_figure_without_valid_input_draws_line_only(text):
    fig = build_conversion_figure(text)
    assert [t.name for t in fig.data] == ["Conversion"]
    assert len(fig.layout.annotations) == 0


def test_build_conversion_figure_rejects_inverted_range():
    with pytest.raises(ValueError):
        build_conversion_figure("1", low=10, high=10)
