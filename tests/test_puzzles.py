from math import factorial

import pytest

from judgeset.puzzles import (
    ecological_bin_packing,
    eight_queens,
    format_queens,
    is_quirksome,
    quirksome_squares,
    quirksome_table,
    run,
    social_constraints_bfs,
    social_constraints_dfs,
)


def _non_attacking(solution):
    pairs = [(c, r) for c, r in enumerate(solution)]
    return all(
        r1 != r2 and abs(r1 - r2) != abs(c1 - c2)
        for i, (c1, r1) in enumerate(pairs)
        for c2, r2 in pairs[i + 1 :]
    )


def test_run_queens_sample():
    expected = (
        "SOLN       COLUMN\n"
        " #      1 2 3 4 5 6 7 8\n"
        "\n"
        " 1      1 5 8 6 3 7 2 4\n"
        " 2      1 6 8 3 7 4 2 5\n"
        " 3      1 7 4 6 8 2 5 3\n"
        " 4      1 7 5 8 2 4 6 3\n"
    )
    assert run("queens", "1\n1 1\n") == expected


@pytest.mark.parametrize("row,column", [(1, 1), (3, 5), (8, 8), (4, 2)])
def test_queens_invariants(row, column):
    solutions = eight_queens(row, column)
    assert solutions == sorted(solutions)
    for solution in solutions:
        assert solution[column - 1] == row
        assert _non_attacking(solution)


def test_queens_totals_agree_across_columns():
    totals = {sum(len(eight_queens(r, c)) for r in range(1, 9)) for c in range(1, 9)}
    assert len(totals) == 1


def test_queens_partition_by_row():
    by_first = {s for r in range(1, 9) for s in eight_queens(r, 1)}
    by_last = {s for r in range(1, 9) for s in eight_queens(r, 8)}
    assert by_first == by_last


def test_queens_out_of_range():
    with pytest.raises(ValueError):
        eight_queens(0, 1)
    with pytest.raises(ValueError):
        eight_queens(1, 9)


def test_format_queens_header():
    text = format_queens(eight_queens(2, 3))
    assert text.startswith("SOLN       COLUMN\n #      1 2 3 4 5 6 7 8\n\n")
    assert len(text.splitlines()) == 3 + len(eight_queens(2, 3))


def test_run_queens_separates_cases_with_blank_line():
    first = format_queens(eight_queens(1, 1))
    second = format_queens(eight_queens(2, 2))
    assert run("queens", "2\n1 1\n2 2\n") == first + "\n" + second


def test_ecological_sorted_bins_need_no_moves():
    assert ecological_bin_packing([[5, 0, 0], [0, 0, 7], [0, 3, 0]]) == ("BCG", 0)


def test_ecological_tie_picks_smallest_order():
    order, moves = ecological_bin_packing([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert order == "BCG"
    assert 0 <= moves <= 45


def test_ecological_order_is_permutation():
    order, moves = ecological_bin_packing([[5, 10, 5], [20, 10, 5], [10, 20, 10]])
    assert sorted(order) == sorted("BCG")
    assert 0 <= moves <= 95


def test_ecological_bad_shape():
    with pytest.raises(ValueError):
        ecological_bin_packing([[1, 2, 3], [4, 5, 6]])


def test_run_ecological_matches_function():
    order, moves = ecological_bin_packing([[5, 10, 5], [20, 10, 5], [10, 20, 10]])
    assert run("ecological", "5 10 5 20 10 5 10 20 10\n") == f"{order} {moves}\n"


def test_quirksome_table_four_digits():
    assert quirksome_table(4) == ["0000", "0001", "2025", "3025", "9801"]


@pytest.mark.parametrize("digits", [2, 4, 6, 8])
def test_quirksome_search_matches_table(digits):
    assert quirksome_squares(digits) == quirksome_table(digits)


@pytest.mark.parametrize("digits", [2, 4, 6, 8])
def test_table_entries_are_quirksome(digits):
    assert all(is_quirksome(int(entry), digits) for entry in quirksome_table(digits))


def test_is_quirksome_rejects_other_numbers():
    assert not is_quirksome(2024, 4)


def test_quirksome_errors():
    with pytest.raises(ValueError):
        quirksome_table(3)
    with pytest.raises(ValueError):
        is_quirksome(1, 3)
    with pytest.raises(ValueError):
        quirksome_squares(9)


def test_run_quirksome():
    assert run("quirksome", "2\n") == "00\n01\n81\n"
    assert run("quirksome-table", "2\n") == "00\n01\n81\n"


def test_social_samples():
    assert social_constraints_bfs(3, [(0, 1, -2)]) == 2
    assert social_constraints_dfs(4, [(0, 1, 2), (1, 3, -2)]) == 10


@pytest.mark.parametrize("n", [1, 3, 5])
def test_social_without_constraints_counts_all(n):
    assert social_constraints_bfs(n, []) == factorial(n)
    assert social_constraints_dfs(n, []) == factorial(n)


@pytest.mark.parametrize("n", [3, 4, 5])
def test_social_adjacent_and_apart_partition(n):
    together = social_constraints_dfs(n, [(0, 1, 1)])
    apart = social_constraints_dfs(n, [(0, 1, -2)])
    assert together + apart == factorial(n)


def test_social_constraint_is_symmetric():
    assert social_constraints_bfs(5, [(0, 3, 2)]) == social_constraints_bfs(5, [(3, 0, 2)])


@pytest.mark.parametrize(
    "n,rules",
    [(4, [(0, 1, 2), (1, 3, -2)]), (5, [(0, 4, -3), (1, 2, 1)]), (6, [(2, 5, 2)])],
)
def test_social_bfs_equals_dfs(n, rules):
    assert social_constraints_bfs(n, rules) == social_constraints_dfs(n, rules)


def test_run_social():
    text = "3 1\n0 1 -2\n4 2\n0 1 2\n1 3 -2\n0 0\n"
    assert run("social-bfs", text) == run("social-dfs", text) == "2\n10\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("nope", "")