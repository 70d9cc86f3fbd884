"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

from pcm_app.core.config import DASHBOARD_TITLE

PAGES = {}

PREFERRED_ORDER = ["Dashboard"]


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def ordered_pages() -> list[str]:
    pages = list(PAGES.keys())
    ordered = [name for name in PREFERRED_ORDER if name in pages]
    trailing = sorted(name for name in pages if name not in PREFERRED_ORDER)
    return ordered + trailing


def main():
    st.sidebar.title(DASHBOARD_TITLE)
    pages = ordered_pages()
    if not pages:
        st.write("No pages registered yet.")
        return
    if len(pages) == 1:
        PAGES[pages[0]]()
        return
    page = st.sidebar.selectbox("Page", pages, index=0)
    PAGES[page]()


if __name__ == "__main__":
    main()
