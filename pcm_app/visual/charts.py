"""Chart builders (Altair) for region distributions."""

from __future__ import annotations

import altair as alt
import pandas as pd

from pcm_app.core.config import IMPACT_CLASSES, IMPACT_COLORS, REGION_CHART_HEIGHT


def region_distribution_chart(chart_data: pd.DataFrame, height: int = REGION_CHART_HEIGHT):
    """Grouped SA/NSA bar chart per region.

    ``chart_data`` is the long form produced by ``series_to_frame``. Region
    order on the x axis follows first appearance in ``chart_data`` (catalog
    order), never the counts.
    """
    if chart_data.empty:
        return None
    region_order = list(dict.fromkeys(chart_data["region"].astype(str)))
    impact_order = list(IMPACT_CLASSES)
    color_scale = alt.Scale(domain=impact_order, range=[IMPACT_COLORS[i] for i in impact_order])

    chart = (
        alt.Chart(chart_data)
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X("region:N", sort=region_order, title=None, axis=alt.Axis(grid=False, labelAngle=0)),
            xOffset=alt.XOffset("impact:N", sort=impact_order),
            y=alt.Y("count:Q", title="Tickets", axis=alt.Axis(format="d", tickMinStep=1, gridColor="#f1f5f9")),
            color=alt.Color("impact:N", scale=color_scale, legend=alt.Legend(title=None, orient="top")),
            tooltip=[
                alt.Tooltip("region:N", title="Region"),
                alt.Tooltip("impact:N", title="Impact"),
                alt.Tooltip("count:Q", title="Tickets"),
            ],
        )
        .properties(height=height)
    )
    return chart
