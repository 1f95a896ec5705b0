import logging

import streamlit as st

from streak_client.config.settings import SETTINGS

# UI modules
from streak_client.ui.dashboard import render_dashboard
from streak_client.ui.statistics import render_statistics

logging.basicConfig(level=getattr(logging, SETTINGS.log_level.upper(), logging.INFO))

# Keep per-request connection chatter out of the app log
logging.getLogger("urllib3").setLevel(logging.WARNING)


def main():
    st.set_page_config(
        page_title="Session Streak Tracker",
        page_icon="⏱️",
        layout="centered",
    )

    with st.sidebar:
        section = st.radio(
            "Navigation",
            (
                "Log Session",
                "Statistics",
            ),
        )
        st.caption(f"Backend: `{SETTINGS.api_base_url}`")

    # Route to appropriate section
    if section == "Log Session":
        render_dashboard()
    elif section == "Statistics":
        render_statistics()


if __name__ == "__main__":
    main()
