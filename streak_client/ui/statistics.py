"""Streamlit UI for the statistics page."""
from __future__ import annotations

import logging

import streamlit as st

from streak_client.api.client import StreakApiClient, StreakApiError
from streak_client.helpers import statistics as hs

logger = logging.getLogger(__name__)


def render_statistics() -> None:
    """Render trend, streak breakdown, achievements and bonuses."""
    st.title("📊 Statistics")

    # A click reruns the script, which refetches below
    st.button("🔄 Refresh", help="Fetch the latest statistics")

    try:
        with StreakApiClient() as client:
            snapshot = hs.collect_statistics(client)
    except StreakApiError as e:
        logger.error(f"Failed to load statistics: {e}")
        st.error("❌ Could not load statistics from the backend.")
        return

    overall = snapshot.overall
    st.caption(f"Last session: {overall.current_date}")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("🔥 Streak", f"{overall.streak} days")
    with col2:
        st.metric("📅 This year", overall.yearly_streak)
    with col3:
        st.metric("🗓️ This month", overall.monthly_streak)
    with col4:
        st.metric("⭐ Total Points", overall.total_points)

    st.subheader("Weekly trend")
    if overall.weekly_trend:
        st.bar_chart(hs.weekly_trend_frame(overall.weekly_trend))
    else:
        st.info("No sessions logged yet.")

    st.subheader("Achievements")
    if overall.achievements:
        for achievement in overall.achievements:
            st.markdown(f"🏆 {achievement}")
    else:
        st.caption("Keep going! A 7-day streak unlocks your first achievement.")

    st.subheader("Streak bonuses")
    if snapshot.bonuses:
        st.dataframe(hs.bonuses_frame(snapshot.bonuses), hide_index=True)
    else:
        st.caption("Log three days in a row to earn a weekly bonus.")
