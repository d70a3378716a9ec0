"""Reports page: build and download JSON reports."""

from __future__ import annotations

import streamlit as st

from tracker_app.app import get_service, register_page
from tracker_app.core.config import REPORT_EXECUTIVE, REPORT_PERFORMANCE, REPORT_TIME, SETTINGS
from tracker_app.features.reports import REPORT_BUILDERS, report_filename, serialize_report

REPORT_LABELS = {
    REPORT_PERFORMANCE: ("Relatório de Performance", "Taxa de conclusão geral e por projeto."),
    REPORT_TIME: ("Relatório de Tempo", "Tempos de resolução em dias úteis, item a item."),
    REPORT_EXECUTIVE: ("Relatório Executivo", "Resumo, principais projetos e recomendações."),
}


@register_page("Relatórios")
def reports_page():
    st.title("Relatórios")
    service = get_service()
    projects = service.projects
    if not projects:
        st.info("Nenhum dado carregado. Use a página de upload.")
        return

    for kind, builder in REPORT_BUILDERS.items():
        title, caption = REPORT_LABELS[kind]
        st.subheader(title)
        st.caption(caption)
        report = builder(projects)
        with st.expander("Pré-visualizar"):
            st.json(report)
        st.download_button(
            f"Baixar {title}",
            data=serialize_report(report).encode(SETTINGS.download_encoding),
            file_name=report_filename(kind),
            mime="application/json",
            key=f"download_{kind}",
        )
