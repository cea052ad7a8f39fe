"""Pages shown as tabs in the Streamlit app."""
