from __future__ import annotations

import logging

import streamlit as st

from charts import build_conversion_figure
from constants import STRINGS
from conversion import reference_table
from state import TemperatureInputState

logger = logging.getLogger(__name__)

STATE_KEY = "temperature_input_state"
INPUT_KEY = "celsius_input"


def get_temperature_state() -> TemperatureInputState:
    """Return the session's widget state, creating it on first render."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = TemperatureInputState()
        logger.debug("Mounted temperature input widget")
    return st.session_state[STATE_KEY]


def _on_celsius_change() -> None:
    get_temperature_state().on_input_changed(st.session_state[INPUT_KEY])


def render_temperature_input() -> TemperatureInputState:
    state = get_temperature_state()
    st.subheader(STRINGS["heading"])
    st.text_input(
        STRINGS["enter_celsius"],
        key=INPUT_KEY,
        placeholder=STRINGS["input_placeholder"],
        on_change=_on_celsius_change,
    )
    st.text(STRINGS["temperature_fahrenheit"].format(output=state.output_text))
    return state


def render_conversion_details(state: TemperatureInputState) -> None:
    with st.expander(STRINGS["chart_expander"]):
        fig = build_conversion_figure(state.input_text.value)
        st.plotly_chart(fig, use_container_width=True)
    with st.expander(STRINGS["table_expander"]):
        st.dataframe(reference_table(), use_container_width=True, hide_index=True)
