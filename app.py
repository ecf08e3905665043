from __future__ import annotations

import logging

import streamlit as st

from constants import LOG_LEVEL, STRINGS
from widgets import render_conversion_details, render_temperature_input


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(page_title=STRINGS["page_title"], page_icon="🌡️", layout="centered")

    state = render_temperature_input()
    render_conversion_details(state)


if __name__ == "__main__":
    main()
