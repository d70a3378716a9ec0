"""Projects page: searchable, filterable project listings."""

from __future__ import annotations

import streamlit as st

from tracker_app.analytics.segments.filters import parse_priority_filter, parse_status_filter
from tracker_app.app import get_service, register_page
from tracker_app.core.models import FilterCriteria
from tracker_app.visual.tables import project_details_table, projects_table

STATUS_OPTIONS = {"Todos": "", "Em Aberto": "open", "Resolvidos": "resolved"}
PRIORITY_OPTIONS = {"Todas": "", "Alta": "high", "Média": "medium", "Baixa": "low"}


@register_page("Projetos")
def projects_page():
    st.title("Projetos")
    service = get_service()
    if not service.projects:
        st.info("Nenhum dado carregado. Use a página de upload.")
        return

    search_term = st.text_input("Buscar projetos", key="project_search")
    c1, c2 = st.columns(2)
    status_label = c1.selectbox("Status", list(STATUS_OPTIONS), key="status_filter")
    priority_label = c2.selectbox("Prioridade", list(PRIORITY_OPTIONS), key="priority_filter")

    criteria = FilterCriteria(
        search_term=search_term.strip(),
        status=parse_status_filter(STATUS_OPTIONS[status_label]),
        priority=parse_priority_filter(PRIORITY_OPTIONS[priority_label]),
    )
    if criteria.is_text_only:
        filtered = service.search(criteria.search_term)
    else:
        filtered = service.apply_filter(criteria)

    st.caption(f"{len(filtered)} de {len(service.projects)} projeto(s)")
    st.subheader("Resumo")
    st.dataframe(projects_table(filtered), hide_index=True, use_container_width=True)
    st.subheader("Detalhes")
    st.dataframe(project_details_table(filtered), hide_index=True, use_container_width=True)
