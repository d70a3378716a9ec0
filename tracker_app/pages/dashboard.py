"""Dashboard page: headline counts, charts, and overview analytics."""

from __future__ import annotations

import streamlit as st

from tracker_app.analytics.metrics.overview import analytics_summary, dashboard_totals, monthly_trend
from tracker_app.app import get_service, register_page
from tracker_app.core.service import local_today
from tracker_app.visual.charts import resolution_time_chart, status_chart, trend_chart


@register_page("Dashboard")
def dashboard_page():
    st.title("Dashboard")
    service = get_service()
    projects = service.projects
    if not projects:
        st.info("Nenhum dado carregado. Use a página de upload.")
        return

    totals = dashboard_totals(projects)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Projetos", totals.projects)
    c2.metric("Itens", totals.items)
    c3.metric("Em Aberto", totals.open)
    c4.metric("Resolvidos", totals.resolved)

    left, right = st.columns(2)
    with left:
        st.subheader("Status dos Itens")
        chart = status_chart(projects)
        if chart is not None:
            st.altair_chart(chart, use_container_width=True)
    with right:
        st.subheader("Tempo Médio de Resolução")
        chart = resolution_time_chart(projects)
        if chart is not None:
            st.altair_chart(chart, use_container_width=True)

    st.subheader("Tendência Mensal")
    chart = trend_chart(monthly_trend(projects, local_today()))
    if chart is not None:
        st.altair_chart(chart, use_container_width=True)

    st.markdown("---")
    summary = analytics_summary(projects)
    a1, a2, a3, a4 = st.columns(4)
    a1.metric("Tempo Médio de Resolução", f"{summary.avg_resolution_time} dias")
    a2.metric("Taxa de Resolução", f"{summary.resolution_rate}%")
    a3.metric("Projeto Mais Ativo", summary.most_active_project)
    a4.metric("Usuário Mais Produtivo", summary.most_productive_user)
