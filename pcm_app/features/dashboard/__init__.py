"""Dashboard feature module: cards, region table and chart data for a selection."""

from pcm_app.features.dashboard.context import Card, DashboardContext, build_cards, build_context

__all__ = [
    "Card",
    "DashboardContext",
    "build_cards",
    "build_context",
]
