"""Plotly temperature chart with the moon phase glyph over each night."""

from collections.abc import Sequence

import plotly.graph_objects as go

from astrodash.models import WeatherRecord
from astrodash.strings import t

_BG = "#050a1a"
_LINE_COLOR = "#7ec8e3"
_TEXT_COLOR = "#e8d5a3"
_GRID_COLOR = "#1a2f55"


def render_temperature_chart(records: Sequence[WeatherRecord]) -> go.Figure:
    """Render temperature per date as a line, labelled with phase glyphs.

    Args:
        records: Records to plot, in display order.

    Returns:
        Plotly Figure object.
    """
    trace = go.Scatter(
        x=[r.date for r in records],
        y=[r.temperature_f for r in records],
        mode="lines+markers+text",
        text=[r.phase_icon for r in records],
        textposition="top center",
        customdata=[[r.phase.value, r.time] for r in records],
        hovertemplate=(
            "%{x}<br>%{y} °F<br>%{customdata[0]}<br>moonrise %{customdata[1]}"
            "<extra></extra>"
        ),
        line=dict(color=_LINE_COLOR, width=2),
        marker=dict(size=7, color=_LINE_COLOR),
        name="temperature",
    )

    fig = go.Figure(data=[trace])
    fig.update_layout(
        title=dict(text=t("chart_title"), font=dict(color=_TEXT_COLOR)),
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=40, r=20, t=50, b=40),
        height=320,
        font=dict(color=_TEXT_COLOR),
        xaxis=dict(type="category", gridcolor=_GRID_COLOR, title=t("col_date")),
        yaxis=dict(gridcolor=_GRID_COLOR, title="°F"),
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]

    return fig
