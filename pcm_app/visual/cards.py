"""Summary card grid rendering."""

from __future__ import annotations

from collections.abc import Sequence

import streamlit as st

from pcm_app.features.dashboard.context import Card

# Cards after the headline total, laid out as one row per impact class
ROW_SIZE = 5


def card_rows(cards: Sequence[Card]) -> tuple[Card | None, list[list[Card]]]:
    """Split cards into the headline card and rows of ``ROW_SIZE``."""
    if not cards:
        return None, []
    headline, rest = cards[0], list(cards[1:])
    rows = [rest[i : i + ROW_SIZE] for i in range(0, len(rest), ROW_SIZE)]
    return headline, rows


def render_cards(cards: Sequence[Card]) -> None:
    headline, rows = card_rows(cards)
    if headline is None:
        return
    st.metric(headline.title, f"{headline.value:,}", border=True)
    for row in rows:
        columns = st.columns(ROW_SIZE)
        for column, card in zip(columns, row, strict=False):
            with column:
                st.metric(card.title, f"{card.value:,}", border=True)
