from __future__ import annotations

from typing import Any, Sequence

from linegraph.adapters import normalize_values
from linegraph.geometry import EdgeInsets
from linegraph.series import VALUE_MAX_COUNT, GraphValue
from linegraph.style import GraphStyle
from linegraph.view import MIN_GRAPH_HEIGHT, LineGraphView


def line_graph(
    values: Any = None,
    *,
    labels: Sequence[str | None] | None = None,
    data: Any = None,
    width: int = 390,
    graph_height: int = MIN_GRAPH_HEIGHT,
    padding: EdgeInsets | None = None,
    style: GraphStyle | None = None,
    max_count: int = VALUE_MAX_COUNT,
) -> LineGraphView:
    series = normalize_values(values, labels=labels, data=data)
    points = [GraphValue(value=float(v), label=text) for v, text in zip(series.values.tolist(), series.labels)]
    return LineGraphView(
        values=points,
        width=width,
        graph_height=graph_height,
        padding=padding or EdgeInsets(),
        style=style or GraphStyle(),
        max_count=max_count,
    )
