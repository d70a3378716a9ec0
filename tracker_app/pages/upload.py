"""Upload page: collect CSV/XML exports and rebuild the working dataset."""

from __future__ import annotations

import logging

import streamlit as st

from tracker_app.app import get_service, register_page
from tracker_app.core.config import SETTINGS
from tracker_app.core.errors import ReadError, TrackerError
from tracker_app.core.models import SourceFile
from tracker_app.core.service import is_supported_file
from tracker_app.visual.progress import ProgressReporter

logger = logging.getLogger(__name__)


def format_file_size(size: int) -> str:
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    idx = 0
    while value >= 1024 and idx < len(units) - 1:
        value /= 1024
        idx += 1
    return f"{round(value, 2):g} {units[idx]}"


def _to_source(uploaded) -> SourceFile:
    try:
        content = uploaded.getvalue().decode(SETTINGS.file_encoding)
    except UnicodeDecodeError as exc:
        raise ReadError("Erro ao ler arquivo", uploaded.name) from exc
    return SourceFile(name=uploaded.name, content=content, mime_type=uploaded.type)


@register_page("Upload de Arquivos")
def upload_page():
    st.title("Upload de Arquivos")
    st.caption("Envie exportações CSV ou XML de itens de projeto.")
    service = get_service()

    uploads = st.file_uploader(
        "Arquivos CSV ou XML",
        type=["csv", "xml"],
        accept_multiple_files=True,
    )
    valid = [u for u in uploads or [] if is_supported_file(u.name, u.type)]
    if uploads and not valid:
        st.error("Por favor, selecione apenas arquivos CSV ou XML")
        return
    for u in valid:
        st.write(f"📄 {u.name} ({format_file_size(u.size)})")

    if not st.button("Processar Arquivos", type="primary"):
        return
    if not valid:
        st.error("Nenhum arquivo selecionado")
        return

    reporter = ProgressReporter("Processando arquivos", total=len(valid))
    try:
        sources = []
        for idx, uploaded in enumerate(valid, start=1):
            reporter.update(f"Lendo {uploaded.name}", current=idx)
            sources.append(_to_source(uploaded))
        result = service.process_files(sources)
        reporter.complete(f"{result.records} registros processados com sucesso!")
    except TrackerError as exc:
        logger.warning("File processing failed: %s", exc)
        reporter.error(f"Erro ao processar arquivos. Verifique o formato dos dados. ({exc})")
