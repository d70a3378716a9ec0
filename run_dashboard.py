"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``tracker_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from tracker_app.app import main

st.set_page_config(page_title="Dashboard de Projetos", layout="wide")
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

PAGES_DIR = Path(__file__).parent / "tracker_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    import_module(f"tracker_app.pages.{py.stem}")

if __name__ == "__main__":
    main()
