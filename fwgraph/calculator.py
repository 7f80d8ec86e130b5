"""All-pairs shortest path lengths for a graph given as an adjacency matrix."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_NUMBER = re.compile(r"\s*([+-]?\d+)")

INFINITY_MARK = "∞"

EMPTY_MATRIX_MESSAGE = "Ошибка: матрица не может быть пустой."
NOT_SQUARE_MESSAGE = "Ошибка: матрица должна быть квадратной."

Matrix = List[List[int]]
Distances = List[List[Optional[int]]]


class MatrixError(ValueError):
    """Raised when the adjacency matrix cannot be used."""


@dataclass(frozen=True)
class CalculationResult:
    """Formatted distance table and the matrix it was computed from."""

    output_text: str
    matrix: Matrix = field(default_factory=list)


def _parse_row(line: str) -> List[int]:
    """Read integers from the start of a line until the first bad token."""
    row: List[int] = []
    pos = 0
    while True:
        match = _NUMBER.match(line, pos)
        if match is None:
            break
        value = int(match.group(1))
        if not _INT64_MIN <= value <= _INT64_MAX:
            break
        row.append(value)
        pos = match.end()
    return row


def parse_matrix(text: str) -> Matrix:
    """Parse a whitespace separated matrix, one row per line.

    Blank lines and lines without a leading number are ignored. Raises
    MatrixError if nothing is left or if the matrix is not square.
    """
    rows = [row for row in map(_parse_row, text.split("\n")) if row]
    _check_square(rows)
    return rows


def _check_square(matrix: Sequence[Sequence[int]]) -> None:
    if not matrix:
        raise MatrixError(EMPTY_MATRIX_MESSAGE)
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise MatrixError(NOT_SQUARE_MESSAGE)


def shortest_path_lengths(matrix: Sequence[Sequence[int]]) -> Distances:
    """Number of edges on a shortest path between each pair of vertices.

    Every non-zero entry is an edge of length one. Unreachable pairs are None.
    """
    _check_square(matrix)
    size = len(matrix)
    dist: Distances = [
        [0 if i == j else (1 if value != 0 else None) for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    for m in range(size):
        through = dist[m]
        for row in dist:
            to_m = row[m]
            if to_m is None:
                continue
            for j, from_m in enumerate(through):
                if from_m is None:
                    continue
                candidate = to_m + from_m
                current = row[j]
                if current is None or candidate < current:
                    row[j] = candidate
    return dist


def format_distances(distances: Sequence[Sequence[Optional[int]]]) -> str:
    """Render a distance table with right-aligned columns.

    The first column is left unpadded; unreachable entries show as ∞.
    """
    cells = [
        [INFINITY_MARK if value is None else str(value) for value in row]
        for row in distances
    ]
    width = max(
        (len(cell) for row in cells for cell in row if cell != INFINITY_MARK),
        default=0,
    )
    width = max(width, 1)
    lines = []
    for row in cells:
        if not row:
            lines.append("\n")
            continue
        first, *rest = row
        lines.append(first + "".join(" " + cell.rjust(width) for cell in rest) + "\n")
    return "".join(lines)


def calculate_floyd_warshall(text: str) -> CalculationResult:
    """Parse the matrix text and return its formatted shortest path table."""
    matrix = parse_matrix(text)
    output = format_distances(shortest_path_lengths(matrix))
    return CalculationResult(output_text=output, matrix=matrix)