"""Application entry point: page registry, router, and shared session service."""

from __future__ import annotations

import streamlit as st

from tracker_app.core.service import DashboardService

PAGES = {}


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def get_service() -> DashboardService:
    """Session-scoped service, seeded with the demonstration dataset."""
    service = st.session_state.get("dashboard_service")
    if service is None:
        service = DashboardService()
        service.load_sample()
        st.session_state["dashboard_service"] = service
    return service


def main():
    st.sidebar.title("Dashboard de Projetos")
    pages = list(PAGES.keys())
    if not pages:
        st.write("No pages registered yet.")
        return
    preferred_order = [
        "Dashboard",
        "Projetos",
        "Upload de Arquivos",
        "Relatórios",
    ]

    ordered = [name for name in preferred_order if name in pages]
    trailing = sorted(name for name in pages if name not in preferred_order)
    pages = ordered + trailing

    page = st.sidebar.radio("Navegação", pages, key="nav_selection")
    PAGES[page]()


if __name__ == "__main__":
    main()
