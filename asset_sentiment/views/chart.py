# asset_sentiment/views/chart.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import plotly.graph_objects as go

from asset_sentiment.models.sentiment_schema import Article, ChartDatum

SENTIMENT_COLORS: Dict[str, str] = {
    "positive": "#25D366",
    "neutral": "#ff9800",
    "negative": "#f44336",
}
FALLBACK_COLOR = "#ccc"

CHART_WIDTH = 400
CHART_HEIGHT = 300


def _capitalize(label: str) -> str:
    # str.capitalize() would lower-case the tail
    return label[:1].upper() + label[1:]


def derive_chart_data(articles: Sequence[Article]) -> List[ChartDatum]:
    """
    Count articles per lower-cased sentiment label.

    Buckets keep the order in which labels first appear; unknown labels get
    their own bucket.
    """
    counts: Dict[str, int] = {}
    for article in articles:
        key = article.sentiment.label.lower()
        counts[key] = counts.get(key, 0) + 1
    return [ChartDatum(name=_capitalize(key), value=value) for key, value in counts.items()]


def slice_color(name: str) -> str:
    return SENTIMENT_COLORS.get(name.lower(), FALLBACK_COLOR)


def create_sentiment_pie(
    chart_data: Sequence[ChartDatum],
    width: Optional[int] = CHART_WIDTH,
    height: int = CHART_HEIGHT,
) -> go.Figure:
    """
    Create the sentiment distribution pie.

    Args:
        chart_data: One datum per slice, as returned by derive_chart_data.
        width: Figure width in pixels, None to fill the container.
        height: Figure height in pixels.

    Returns:
        Plotly figure with hover tooltips and a legend.
    """
    fig = go.Figure(
        go.Pie(
            labels=[d.name for d in chart_data],
            values=[d.value for d in chart_data],
            marker=dict(colors=[slice_color(d.name) for d in chart_data]),
            textinfo="value",
            hoverinfo="label+value+percent",
            sort=False,
            direction="clockwise",
        )
    )

    fig.update_layout(
        width=width,
        height=height,
        showlegend=True,
        margin=dict(l=20, r=20, t=20, b=20),
    )

    return fig
