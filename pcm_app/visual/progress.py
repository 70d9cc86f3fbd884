"""Progress banner for file ingestion in Streamlit pages."""

from __future__ import annotations

import streamlit as st


def progress_ratio(current: int | None, total: int | None) -> float:
    """Completed fraction clamped to [0, 1]; 0.0 when the step count is unknown."""
    if not total or total <= 0 or current is None:
        return 0.0
    return min(max(current / total, 0.0), 1.0)


def step_label(message: str, current: int | None, total: int | None) -> str:
    if total and current is not None:
        return f"Step {min(current, total)}/{total}: {message}"
    return message


class ProgressReporter:
    """Banner + step bar; ``callback`` matches DashboardSession progress hooks."""

    def __init__(self, title: str):
        self._container = st.container()
        self._container.info(title)
        self._message = self._container.empty()
        self._bar = self._container.progress(0.0)
        self._finalized = False

    def callback(self, message: str, current: int | None = None, total: int | None = None) -> None:
        if self._finalized:
            return
        self._message.write(step_label(message, current, total))
        self._bar.progress(progress_ratio(current, total))

    def complete(self, message: str) -> None:
        if self._finalized:
            return
        self._bar.progress(1.0)
        self._container.success(message)
        self._finalized = True

    def error(self, message: str) -> None:
        if self._finalized:
            return
        self._container.error(message)
        self._finalized = True
