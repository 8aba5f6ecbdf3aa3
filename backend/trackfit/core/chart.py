import json

import plotly.graph_objects as go
import plotly.utils

from trackfit.core.constants import (
    CHART_TICK_FORMAT,
    TARGET_LINE_COLOR,
    WEIGHT_LINE_COLOR,
    WEIGHT_UNIT,
)
from trackfit.core.merge import MergedPoint


def _chart_layout() -> dict:
    return dict(
        margin=dict(t=10, r=10, b=40, l=40),
        height=280,
        hovermode="x unified",
        showlegend=True,
        legend=dict(orientation="h", y=-0.25),
        xaxis=dict(
            type="date",
            tickformat=CHART_TICK_FORMAT,
            tickangle=-45,
            tickfont=dict(size=9),
            gridcolor="#e5e7eb",
            griddash="dash",
        ),
        yaxis=dict(
            ticksuffix=WEIGHT_UNIT,
            autorange=True,
            tickfont=dict(size=9),
            gridcolor="#e5e7eb",
            griddash="dash",
        ),
        plot_bgcolor="#ffffff",
    )


def build_weight_chart(points: list[MergedPoint]) -> go.Figure:
    """Target curve and recorded weights as two overlaid lines."""
    xs = [p.date for p in points]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=xs, y=[p.target for p in points], mode="lines", name="Target",
        line=dict(color=TARGET_LINE_COLOR, width=1, dash="dash"),
        connectgaps=False,
        hovertemplate="%{y} kg<extra>Target</extra>",
    ))
    fig.add_trace(go.Scatter(
        x=xs, y=[p.weight for p in points], mode="lines+markers", name="Recorded",
        line=dict(color=WEIGHT_LINE_COLOR, width=2),
        marker=dict(size=6, color=WEIGHT_LINE_COLOR),
        connectgaps=True,
        hovertemplate="%{y} kg<extra>Recorded</extra>",
    ))
    fig.update_layout(**_chart_layout())
    return fig


def chart_json(points: list[MergedPoint]) -> str:
    return json.dumps(build_weight_chart(points), cls=plotly.utils.PlotlyJSONEncoder)
