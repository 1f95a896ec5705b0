"""Common helper utilities used across the Streamlit app.

The helpers package holds the state machine and data shaping that UI layers
(Streamlit) and the command line call into, keeping widgets free of HTTP
details.
"""
