"""UI components of the Streamlit app.

Each module inside `ui` should focus purely on presentation / user interaction
logic, delegating side-effects and data manipulation to the `helpers` package.
"""
