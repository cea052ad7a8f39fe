"""Streamlit presentation layer for Kana Trainer."""
