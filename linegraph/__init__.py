from linegraph.api import line_graph
from linegraph.errors import GraphDataError
from linegraph.geometry import EdgeInsets, PlotGeometry, Point
from linegraph.layout import GraphLayout, build_layout
from linegraph.mapper import DotMarker, GridLine, Projection, TickLabel, TickMark, project
from linegraph.scales import StepInfo, compute_step_info
from linegraph.series import VALUE_MAX_COUNT, GraphSeries, GraphValue
from linegraph.style import GraphStyle
from linegraph.view import LineGraphView

__all__ = [
    "DotMarker",
    "EdgeInsets",
    "GraphDataError",
    "GraphLayout",
    "GraphSeries",
    "GraphStyle",
    "GraphValue",
    "GridLine",
    "LineGraphView",
    "PlotGeometry",
    "Point",
    "Projection",
    "StepInfo",
    "TickLabel",
    "TickMark",
    "VALUE_MAX_COUNT",
    "build_layout",
    "compute_step_info",
    "line_graph",
    "project",
]
