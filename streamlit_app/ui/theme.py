from __future__ import annotations

from pathlib import Path
import streamlit as st


def inject_styles(extra_css: str = "") -> None:
    """
    Does:
        Load ui/styles.css (plus optional page-specific CSS) and inject it into the page.
    """
    css_path = Path(__file__).with_name("styles.css")
    css = css_path.read_text(encoding="utf-8") if css_path.exists() else ""
    st.markdown(f"<style>{css}\n{extra_css}</style>", unsafe_allow_html=True)
