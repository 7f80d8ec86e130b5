import pytest

from fwgraph.calculator import (
    CalculationResult,
    MatrixError,
    calculate_floyd_warshall,
    format_distances,
    parse_matrix,
    shortest_path_lengths,
)

PATH4 = "0 1 0 0\n1 0 1 0\n0 1 0 1\n0 0 1 0"


def test_parse_basic():
    assert parse_matrix(PATH4) == [
        [0, 1, 0, 0],
        [1, 0, 1, 0],
        [0, 1, 0, 1],
        [0, 0, 1, 0],
    ]


def test_parse_skips_blank_and_non_numeric_lines():
    assert parse_matrix("\n1 2\n\n   \nabc\n3 4\n") == [[1, 2], [3, 4]]


def test_parse_stops_row_at_bad_token():
    assert parse_matrix("1 2 x 9\n3 4") == [[1, 2], [3, 4]]


def test_parse_signed_numbers():
    assert parse_matrix("-1 +2\n3 0") == [[-1, 2], [3, 0]]


@pytest.mark.parametrize("text", ["", "\n\n", "abc\ndef"])
def test_parse_empty_raises(text):
    with pytest.raises(MatrixError, match="пустой"):
        parse_matrix(text)


def test_parse_not_square_raises():
    with pytest.raises(MatrixError, match="квадратной"):
        parse_matrix("1 2 3\n4 5 6")


def test_path_graph_distances_are_index_differences():
    dist = shortest_path_lengths(parse_matrix(PATH4))
    for i, row in enumerate(dist):
        for j, value in enumerate(row):
            assert value == abs(i - j)


def test_unreachable_is_none_and_diagonal_zero():
    dist = shortest_path_lengths([[0, 1, 0], [0, 0, 0], [0, 0, 0]])
    assert [dist[i][i] for i in range(3)] == [0, 0, 0]
    assert dist[1][0] is None
    assert dist[0][2] is None
    assert dist[0][1] == 1


def test_weights_only_mark_edges():
    weighted = [[0, 7, 0], [0, 0, 30], [5, 0, 0]]
    ones = [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
    assert shortest_path_lengths(weighted) == shortest_path_lengths(ones)


def test_triangle_inequality_holds():
    matrix = [
        [0, 1, 0, 0, 1],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 1, 0],
        [1, 0, 0, 0, 0],
        [0, 0, 0, 1, 0],
    ]
    dist = shortest_path_lengths(matrix)
    n = len(matrix)
    for i in range(n):
        for k in range(n):
            for j in range(n):
                if dist[i][k] is not None and dist[k][j] is not None:
                    assert dist[i][j] is not None
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_shortest_path_rejects_non_square():
    with pytest.raises(MatrixError):
        shortest_path_lengths([[0, 1], [1]])


def test_format_with_infinity():
    assert format_distances([[0, None], [1, 0]]) == "0 ∞\n1 0\n"


def test_format_pads_to_widest_number_but_not_first_column():
    assert format_distances([[0, 12], [None, 0]]) == "0 12\n∞  0\n"


def test_format_rows_have_equal_cell_counts():
    text = format_distances(shortest_path_lengths(parse_matrix(PATH4)))
    lines = text.splitlines()
    assert len(lines) == 4
    assert all(len(line.split()) == 4 for line in lines)
    assert text.endswith("\n")


def test_calculate_returns_matrix_and_text():
    result = calculate_floyd_warshall(PATH4)
    assert isinstance(result, CalculationResult)
    assert result.matrix == parse_matrix(PATH4)
    assert result.output_text == format_distances(
        shortest_path_lengths(result.matrix)
    )


def test_calculate_raises_on_bad_input():
    with pytest.raises(MatrixError):
        calculate_floyd_warshall("1 2\n3")