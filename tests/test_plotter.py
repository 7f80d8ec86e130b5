import math

import pytest
from matplotlib.figure import Figure

from fwgraph.plotter import (
    NODE_RADIUS,
    PALETTE,
    EdgeShape,
    GraphLayout,
    NodeShape,
    PlotError,
    label_color,
    layout_graph,
    node_color,
    plot_graph,
)

MIXED = [
    [4, 2, 0],
    [3, 0, 7],
    [0, 0, 0],
]


def test_node_color_first_and_cycle():
    assert node_color(0) == (52, 152, 219)
    assert node_color(len(PALETTE)) == node_color(0)
    assert node_color(len(PALETTE) + 3) == node_color(3)


def test_label_color_dark_and_light():
    assert label_color((52, 152, 219)) == "white"
    assert label_color((236, 240, 241)) == "black"


@pytest.mark.parametrize("matrix", [[], [[1, 2], [3]]])
def test_layout_rejects_bad_size(matrix):
    with pytest.raises(PlotError):
        layout_graph(matrix)


def test_nodes_lie_on_unit_circle():
    layout = layout_graph([[0] * 5 for _ in range(5)])
    assert isinstance(layout, GraphLayout)
    assert [node.label for node in layout.nodes] == ["1", "2", "3", "4", "5"]
    for node in layout.nodes:
        assert isinstance(node, NodeShape)
        assert math.isclose(math.hypot(*node.center), 1.0)
        assert node.radius == NODE_RADIUS
        assert node.label_color == label_color(node.color)
    assert layout.edges == ()


def test_edge_kinds_and_labels():
    layout = layout_graph(MIXED)
    by_pair = {(e.source, e.target): e for e in layout.edges}
    assert set(by_pair) == {(0, 0), (0, 1), (1, 0), (1, 2)}
    assert by_pair[(0, 0)].kind == "loop"
    assert by_pair[(0, 1)].kind == "curve"
    assert by_pair[(1, 0)].kind == "curve"
    assert by_pair[(1, 2)].kind == "line"
    assert by_pair[(1, 2)].label == "7"
    assert by_pair[(0, 0)].label == "4"


def test_edges_follow_row_major_order():
    layout = layout_graph(MIXED)
    pairs = [(e.source, e.target) for e in layout.edges]
    assert pairs == sorted(pairs)


def test_line_edge_ends_touch_node_boundaries():
    layout = layout_graph(MIXED)
    line = next(e for e in layout.edges if e.kind == "line")
    assert isinstance(line, EdgeShape)
    start, end = line.points
    src = layout.nodes[line.source].center
    dst = layout.nodes[line.target].center
    assert math.isclose(math.dist(start, src), NODE_RADIUS)
    assert math.isclose(math.dist(end, dst), NODE_RADIUS)


def test_curves_and_loops_have_four_points_on_boundaries():
    layout = layout_graph(MIXED)
    for edge in layout.edges:
        if edge.kind == "line":
            continue
        assert len(edge.points) == 4
        src = layout.nodes[edge.source].center
        dst = layout.nodes[edge.target].center
        assert math.isclose(math.dist(edge.points[0], src), NODE_RADIUS)
        assert math.isclose(math.dist(edge.points[3], dst), NODE_RADIUS)


def test_opposite_curves_do_not_overlap():
    layout = layout_graph(MIXED)
    by_pair = {(e.source, e.target): e for e in layout.edges}
    forward = by_pair[(0, 1)].label_position
    backward = by_pair[(1, 0)].label_position
    assert math.dist(forward, backward) > 0.05


def test_plot_graph_draws_patches_and_texts():
    ax = Figure().add_subplot()
    layout = plot_graph(ax, MIXED)
    assert len(ax.patches) == len(layout.nodes) + len(layout.edges)
    assert len(ax.texts) == len(layout.nodes) + len(layout.edges)
    assert ax.get_xlim() == (-1.5, 1.5)
    labels = {t.get_text() for t in ax.texts}
    assert {"1", "2", "3", "4", "2", "3", "7"} <= labels


def test_plot_graph_replaces_previous_drawing():
    ax = Figure().add_subplot()
    plot_graph(ax, MIXED)
    plot_graph(ax, [[0]])
    assert len(ax.patches) == 1
    assert [t.get_text() for t in ax.texts] == ["1"]


def test_plot_graph_raises_on_empty():
    ax = Figure().add_subplot()
    with pytest.raises(PlotError):
        plot_graph(ax, [])