"""Circular layout and drawing of a directed weighted graph."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import matplotlib as mpl
from matplotlib.patches import Circle, FancyArrowPatch
from matplotlib.path import Path

Point = Tuple[float, float]
Color = Tuple[int, int, int]

RING_RADIUS = 1.0
NODE_RADIUS = 0.15
AXIS_LIMIT = 1.5

INVALID_SIZE_MESSAGE = "Ошибка: неверный размер N для построения графика."

PALETTE: Tuple[Color, ...] = (
    (52, 152, 219),
    (46, 204, 113),
    (231, 76, 60),
    (155, 89, 182),
    (241, 196, 15),
    (26, 188, 156),
    (230, 126, 34),
    (236, 240, 241),
    (149, 165, 166),
    (243, 156, 18),
    (52, 73, 94),
    (39, 174, 96),
    (142, 68, 173),
    (192, 57, 43),
    (22, 160, 133),
)


class PlotError(ValueError):
    """Raised when a matrix cannot be drawn."""


@dataclass(frozen=True)
class NodeShape:
    """A vertex drawn as a filled circle with its 1-based number."""

    index: int
    center: Point
    radius: float
    color: Color
    label: str
    label_color: str


@dataclass(frozen=True)
class EdgeShape:
    """A directed edge; kind is "loop", "curve" or "line".

    Lines have two points (start, end); loops and curves have four
    (start, first control, second control, end) of a cubic Bézier.
    """

    source: int
    target: int
    kind: str
    points: Tuple[Point, ...]
    label: str
    label_position: Point


@dataclass(frozen=True)
class GraphLayout:
    """Geometry of every node and edge of a graph."""

    nodes: Tuple[NodeShape, ...]
    edges: Tuple[EdgeShape, ...]


def node_color(index: int) -> Color:
    """Fill colour of the node at the given position, cycling the palette."""
    return PALETTE[index % len(PALETTE)]


def label_color(color: Color) -> str:
    """White text on dark fills (HSL lightness below 0.6), black otherwise."""
    lightness = (max(color) + min(color)) / 2 / 255
    return "white" if lightness < 0.6 else "black"


def _add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def _sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def _scale(a: Point, k: float) -> Point:
    return (a[0] * k, a[1] * k)


def _unit(v: Point) -> Point:
    length = math.hypot(*v)
    return _scale(v, 1 / length) if length > 1e-6 else (0.0, 0.0)


def _polar(radius: float, angle: float) -> Point:
    return (radius * math.cos(angle), radius * math.sin(angle))


def _loop_edge(i: int, n: int, center: Point, weight: int) -> EdgeShape:
    r = NODE_RADIUS
    a = 2 * math.pi * i / n
    d = r * 1.2
    p0 = _add(center, _polar(r, a - 0.3))
    p3 = _add(center, _polar(r, a + 0.3))
    p1 = _add(center, _polar(r + d, a - 0.6))
    p2 = _add(center, _polar(r + d, a + 0.6))
    mid = _scale(_add(p1, p2), 0.5)
    label_pos = _add(mid, _scale(_unit(_sub(mid, center)), r * 0.2))
    return EdgeShape(i, i, "loop", (p0, p1, p2, p3), str(weight), label_pos)


def _curve_edge(i: int, j: int, a: Point, b: Point, weight: int) -> EdgeShape:
    r = NODE_RADIUS
    v = _sub(b, a)
    length = math.hypot(*v)
    u = _unit(v)
    perp = (-u[1], u[0])
    bend = _scale(perp, r * 0.5)
    p0 = _add(a, _scale(u, r))
    p3 = _sub(b, _scale(u, r))
    reach = _scale(u, length * 0.3)
    p1 = _add(_add(p0, reach), bend)
    p2 = _add(_sub(p3, reach), bend)
    mid = _scale(_add(p1, p2), 0.5)
    label_pos = _sub(_add(mid, _scale(perp, r * 0.2)), _scale(u, r * 0.2))
    return EdgeShape(i, j, "curve", (p0, p1, p2, p3), str(weight), label_pos)


def _line_edge(i: int, j: int, a: Point, b: Point, weight: int) -> EdgeShape:
    r = NODE_RADIUS
    v = _sub(b, a)
    u = _unit(v)
    start = _add(a, _scale(u, r))
    end = _sub(b, _scale(u, r))
    mid = _scale(_add(a, b), 0.5)
    uperp = _unit((-v[1], v[0]))
    label_pos = _sub(mid, _scale(uperp, r * 0.2))
    return EdgeShape(i, j, "line", (start, end), str(weight), label_pos)


def layout_graph(matrix: Sequence[Sequence[int]]) -> GraphLayout:
    """Place nodes on a unit circle and route an edge for each non-zero entry.

    Self-loops become small loops, edges with a reverse partner become
    curves bent to one side, the rest straight arrows.
    """
    n = len(matrix)
    if n <= 0:
        raise PlotError(INVALID_SIZE_MESSAGE)
    if any(len(row) != n for row in matrix):
        raise PlotError(INVALID_SIZE_MESSAGE)

    centers = [_polar(RING_RADIUS, 2 * math.pi * i / n) for i in range(n)]
    nodes = tuple(
        NodeShape(
            index=i,
            center=center,
            radius=NODE_RADIUS,
            color=node_color(i),
            label=str(i + 1),
            label_color=label_color(node_color(i)),
        )
        for i, center in enumerate(centers)
    )

    edges = []
    for i, row in enumerate(matrix):
        for j, weight in enumerate(row):
            if weight == 0:
                continue
            if i == j:
                edges.append(_loop_edge(i, n, centers[i], weight))
            elif matrix[j][i] != 0:
                edges.append(_curve_edge(i, j, centers[i], centers[j], weight))
            else:
                edges.append(_line_edge(i, j, centers[i], centers[j], weight))
    return GraphLayout(nodes=nodes, edges=tuple(edges))


def plot_graph(ax, matrix: Sequence[Sequence[int]]) -> GraphLayout:
    """Clear the axes and draw the graph of the matrix on them."""
    layout = layout_graph(matrix)
    ax.clear()
    ax.set_xlim(-AXIS_LIMIT, AXIS_LIMIT)
    ax.set_ylim(-AXIS_LIMIT, AXIS_LIMIT)
    ax.set_aspect("equal")
    base_size = mpl.rcParams["font.size"]

    for node in layout.nodes:
        fill = tuple(c / 255 for c in node.color)
        ax.add_patch(
            Circle(node.center, node.radius, facecolor=fill, edgecolor="black", zorder=1)
        )
        ax.text(
            *node.center,
            node.label,
            ha="center",
            va="center",
            fontsize=base_size + 12,
            color=node.label_color,
            zorder=3,
        )

    for edge in layout.edges:
        if edge.kind == "line":
            arrow = FancyArrowPatch(
                posA=edge.points[0],
                posB=edge.points[1],
                arrowstyle="-|>",
                mutation_scale=15,
                shrinkA=0,
                shrinkB=0,
                color="black",
                zorder=2,
            )
        else:
            path = Path(list(edge.points), [Path.MOVETO, Path.CURVE4, Path.CURVE4, Path.CURVE4])
            arrow = FancyArrowPatch(
                path=path,
                arrowstyle="-|>",
                mutation_scale=15,
                color="black",
                zorder=2,
            )
        ax.add_patch(arrow)
        ax.text(
            *edge.label_position,
            edge.label,
            ha="center",
            va="center",
            fontsize=base_size + 2,
            color="black",
            zorder=3,
        )
    return layout