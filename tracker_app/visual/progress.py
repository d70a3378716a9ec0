"""Progress banner used while a batch of files is processed."""

from __future__ import annotations

import streamlit as st


class ProgressReporter:
    """Simple progress helper that renders a banner + progress bar in Streamlit."""

    def __init__(self, title: str, total: int | None = None):
        self._container = st.container()
        self._container.info(title)
        self._message_placeholder = self._container.empty()
        self._progress_placeholder = self._container.progress(0.0)
        self._total = total
        self._current = 0
        self._finalized = False

    def update(self, message: str, *, current: int | None = None) -> None:
        if self._finalized:
            return
        if current is not None:
            self._current = max(0, current)
        self._message_placeholder.write(message)
        if self._total:
            self._progress_placeholder.progress(min(self._current / self._total, 1.0))

    def complete(self, message: str) -> None:
        if self._finalized:
            return
        self._progress_placeholder.progress(1.0)
        self._container.success(message)
        self._finalized = True

    def error(self, message: str) -> None:
        if self._finalized:
            return
        self._container.error(message)
        self._finalized = True
