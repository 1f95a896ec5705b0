"""Streamlit UI for the session logging page.

``build_view`` is a pure projection of ``DashboardState`` into a small
presentation tree; ``render_dashboard`` draws that tree with Streamlit widgets
and wires the controls to the ``DashboardController`` kept in session state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Sequence, Tuple

import streamlit as st

from streak_client.api.client import StreakApiClient
from streak_client.config.settings import SETTINGS
from streak_client.helpers.state import DashboardController, DashboardState

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "dashboard_controller"
DATE_WIDGET_KEY = "dashboard_selected_date"
SESSION_WIDGET_KEY = "dashboard_selected_session"


# ---------------------------------------------------------------------------
# Presentation tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextLine:
    label: str
    value: str

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class DateInput:
    label: str
    value: str


@dataclass(frozen=True)
class SelectInput:
    label: str
    value: str
    options: Tuple[str, ...]


@dataclass(frozen=True)
class ActionButton:
    label: str
    action: str


@dataclass(frozen=True)
class DashboardView:
    date_line: TextLine
    streak_line: TextLine
    points_line: TextLine
    date_input: DateInput
    session_input: SelectInput
    submit_button: ActionButton


def build_view(
    state: DashboardState, session_types: Sequence[str] = SETTINGS.session_types
) -> DashboardView:
    """Project *state* onto the widgets of the page."""
    options = tuple(session_types)
    if state.selected_session not in options:
        options = options + (state.selected_session,)

    return DashboardView(
        date_line=TextLine("Date", state.current_time),
        streak_line=TextLine("Streak", f"{state.streak} days"),
        points_line=TextLine("Total Points", str(state.total_points)),
        date_input=DateInput("Session date", state.selected_date),
        session_input=SelectInput("Session type", state.selected_session, options),
        submit_button=ActionButton("Log Session", "submit"),
    )


# ---------------------------------------------------------------------------
# Streamlit adapter
# ---------------------------------------------------------------------------


def _get_controller() -> DashboardController:
    """Return this browser session's controller, loading state on first use."""
    if CONTROLLER_KEY not in st.session_state:
        controller = DashboardController(StreakApiClient())
        controller.load()
        st.session_state[CONTROLLER_KEY] = controller
    return st.session_state[CONTROLLER_KEY]


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        return date.today()


def _on_date_change() -> None:
    picked = st.session_state[DATE_WIDGET_KEY]
    _get_controller().set_date(picked.isoformat() if picked else "")


def _on_session_change() -> None:
    _get_controller().set_session(st.session_state[SESSION_WIDGET_KEY])


def render_dashboard() -> None:
    """Render the Streamlit UI for viewing the streak and logging a session."""
    controller = _get_controller()
    view = build_view(controller.state, controller.settings.session_types)

    st.title("⏱️ Session Streak Tracker")
    st.markdown(f"**{view.date_line.text}**")

    col_streak, col_points = st.columns(2)
    with col_streak:
        st.metric(view.streak_line.label, view.streak_line.value)
    with col_points:
        st.metric(view.points_line.label, view.points_line.value)

    st.divider()
    st.subheader("Log a session")

    st.date_input(
        view.date_input.label,
        value=_parse_date(view.date_input.value),
        key=DATE_WIDGET_KEY,
        on_change=_on_date_change,
    )
    st.selectbox(
        view.session_input.label,
        view.session_input.options,
        index=view.session_input.options.index(view.session_input.value),
        key=SESSION_WIDGET_KEY,
        on_change=_on_session_change,
    )
    st.button(
        view.submit_button.label,
        type="primary",
        on_click=getattr(controller, view.submit_button.action),
    )
