# fwgraph

fwgraph reads the adjacency matrix of a directed graph. For every pair of vertices it
finds the length of the shortest path, counted in edges, by the Floyd–Warshall method.
It also draws the graph with matplotlib.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The window

```
fwgraph
```

The window is built with tkinter, so your Python must include Tk. `fwgraph --version`
prints the version and exits.

On the left you type the adjacency matrix, one row per line, with the values separated
by spaces. Below it are the following controls:

- **Применить алгоритм Флойда–Уоршелла** computes the distance table and shows it in the result box.
- **Сбросить** clears the input, the result and the drawing.

On the right, the graph is drawn with a matplotlib toolbar for panning and zooming:

- The vertices sit on a circle and are numbered from 1.
- Each edge is labelled with its matrix entry.
- Self-loops are drawn as small loops.
- A pair of edges that run both ways is drawn as two curved arrows.
- Every other edge is a straight arrow.

Error messages appear in red in the result box, and the drawing is then cleared. The
interface text is in Russian.

## Matrix rules

- A zero entry means there is no edge.
- Any other entry, whatever its value, is an edge of length one. The distances count edges and ignore weights.
- A pair with no path between them is shown as `∞`.
- Blank lines are skipped, and so are lines that do not start with a number.
- A row is read up to the first token that is not an integer, or that lies outside the signed 64-bit range.

## As a library

```python
from fwgraph.calculator import calculate_floyd_warshall, MatrixError

result = calculate_floyd_warshall("0 1 0\n0 0 1\n0 0 0")
print(result.output_text)
# 0 1 2
# ∞ 0 1
# ∞ ∞ 0
print(result.matrix)
# [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
```

`calculate_floyd_warshall` returns a `CalculationResult`, which has two fields:

- `output_text` holds the formatted table.
- `matrix` holds the parsed rows.

It raises `MatrixError`, a `ValueError`, when the text holds no numbers or the matrix is
not square.

The steps can also be called one at a time:

- `parse_matrix(text)` reads the text into rows of integers. It raises `MatrixError` in the same cases.
- `shortest_path_lengths(matrix)` returns the distance table, with `None` for unreachable pairs.
- `format_distances(distances)` lays the table out as text. Columns are right-aligned to the widest number; the first column is not padded.

### Drawing

```python
import matplotlib.pyplot as plt
from fwgraph.plotter import plot_graph

fig, ax = plt.subplots()
plot_graph(ax, [[0, 1], [3, 0]])
fig.savefig("graph.png")
```

`plot_graph(ax, matrix)` clears the axes and draws the graph. It returns the
`GraphLayout` it drew.

`layout_graph(matrix)` computes the same geometry without drawing anything. Its result
has two parts:

- `nodes` is a tuple of `NodeShape` with centre, radius, fill colour, label and label colour.
- `edges` is a tuple of `EdgeShape` with `kind` set to `"loop"`, `"curve"` or `"line"`, its points, label and label position.

Both functions raise `PlotError` if the matrix is empty or not square.

`node_color(index)` gives a vertex's fill colour from a palette of 15 that repeats.
`label_color(color)` picks white text for dark fills and black text otherwise.

### Window pieces

`fwgraph.app.compute_outcome(text)` returns an `Outcome` with these fields:

- `text` is the text to show.
- `is_error` says whether that text is an error.
- `matrix` is the matrix to draw, or `None` on error.

`MainWindow` holds a matplotlib `Figure` and offers three methods:

- `compute()` runs the calculation.
- `reset()` clears the input, result and drawing.
- `run()` opens the Tk window.