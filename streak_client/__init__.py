"""Streamlit client for the session streak tracker."""

__version__ = "0.1.0"
