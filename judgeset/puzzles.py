"""Search puzzles: queens, bin packing, quirksome squares and seatings."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import lru_cache
from itertools import count, permutations

_BIN_COLOURS = {"B": 0, "G": 1, "C": 2}

_QUIRKSOME_TABLE = {
    2: ("00", "01", "81"),
    4: ("0000", "0001", "2025", "3025", "9801"),
    6: ("000000", "000001", "088209", "494209", "998001"),
    8: (
        "00000000", "00000001", "04941729", "07441984", "24502500",
        "25502500", "52881984", "60481729", "99980001",
    ),
}


def _safe(placed: tuple[int, ...], row: int) -> bool:
    column = len(placed)
    return all(r != row and abs(r - row) != column - c for c, r in enumerate(placed))


def _place(placed: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
    if len(placed) == 8:
        yield placed
        return
    for row in range(8):
        if _safe(placed, row):
            yield from _place(placed + (row,))


@lru_cache(maxsize=None)
def _all_queens() -> tuple[tuple[int, ...], ...]:
    return tuple(_place(()))


def eight_queens(row: int, column: int) -> list[tuple[int, ...]]:
    """All placements with a queen at the given 1-based row and column.

    Each placement lists the 1-based row of the queen in every column, and
    placements come in lexicographic order.
    """
    if not (1 <= row <= 8 and 1 <= column <= 8):
        raise ValueError("row and column must be between 1 and 8")
    return [
        tuple(r + 1 for r in solution)
        for solution in _all_queens()
        if solution[column - 1] == row - 1
    ]


def format_queens(solutions: Iterable[Sequence[int]]) -> str:
    """Numbered table of queen placements."""
    lines = ["SOLN       COLUMN", " #      1 2 3 4 5 6 7 8", ""]
    lines.extend(
        f"{number:>2}      " + " ".join(map(str, solution))
        for number, solution in enumerate(solutions, start=1)
    )
    return "\n".join(lines) + "\n"


def ecological_bin_packing(bins: Sequence[Sequence[int]]) -> tuple[str, int]:
    """Colour order and fewest bottle moves, the order smallest on ties.

    Each bin holds its counts of brown, green and clear bottles.
    """
    if len(bins) != 3 or any(len(b) != 3 for b in bins):
        raise ValueError("expected three bins of three counts")
    total = sum(map(sum, bins))
    moves, order = min(
        (
            total - sum(bins[k][_BIN_COLOURS[colour]] for k, colour in enumerate(order)),
            order,
        )
        for order in map("".join, permutations("BCG"))
    )
    return order, moves


def quirksome_squares(digits: int) -> list[str]:
    """Zero-padded squares whose halves sum to their square root."""
    if not 1 <= digits <= 8:
        raise ValueError("digits must be between 1 and 8")
    limit = 10**digits
    divisor = 10 ** (digits - digits // 2)
    result = []
    for root in count():
        square = root * root
        if square >= limit:
            break
        if (square // divisor + square % divisor) ** 2 == square:
            result.append(f"{square:0{digits}d}")
    return result


def quirksome_table(digits: int) -> list[str]:
    """Precomputed quirksome squares of 2, 4, 6 or 8 digits."""
    try:
        return list(_QUIRKSOME_TABLE[digits])
    except KeyError:
        raise ValueError("digits must be 2, 4, 6 or 8") from None


def is_quirksome(n: int, digits: int) -> bool:
    """Whether n, padded to the given even width, is a quirksome square."""
    if digits < 2 or digits % 2:
        raise ValueError("digits must be a positive even number")
    if n < 0:
        raise ValueError("n must not be negative")
    text = f"{n:0{digits}d}"
    mid = digits // 2
    total = int(text[:mid]) + int(text[mid : 2 * mid])
    return f"{total * total:0{digits}d}" == text


def _satisfies(order: Sequence[int], constraints: Sequence[tuple[int, int, int]]) -> bool:
    for a, b, limit in constraints:
        first = order.index(a) if a in order else -1
        second = order.index(b) if b != a and b in order else -1
        gap = abs(first - second)
        if not (gap <= limit if limit > 0 else gap >= -limit):
            return False
    return True


def _check_people(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def social_constraints_bfs(n: int, constraints: Iterable[tuple[int, int, int]]) -> int:
    """Seatings of n people in a row meeting every constraint, found breadth first.

    A constraint (a, b, c) keeps a and b at most c seats apart when c is
    positive, and at least -c seats apart otherwise.
    """
    _check_people(n)
    rules = [tuple(c) for c in constraints]
    total = 0
    queue: deque[tuple[int, ...]] = deque([()])
    while queue:
        front = queue.popleft()
        if len(front) == n:
            total += _satisfies(front, rules)
        else:
            queue.extend(front + (p,) for p in range(n) if p not in front)
    return total


def social_constraints_dfs(n: int, constraints: Iterable[tuple[int, int, int]]) -> int:
    """Seatings of n people in a row meeting every constraint, found depth first."""
    _check_people(n)
    rules = [tuple(c) for c in constraints]

    def extend(prefix: tuple[int, ...]) -> int:
        if len(prefix) == n:
            return int(_satisfies(prefix, rules))
        return sum(extend(prefix + (p,)) for p in range(n) if p not in prefix)

    return extend(())


def _queens(tokens: Iterator[str]) -> Iterator[str]:
    cases = int(next(tokens))
    for case in range(cases):
        row, column = int(next(tokens)), int(next(tokens))
        if case:
            yield ""
        yield from format_queens(eight_queens(row, column)).splitlines()


def _ecological(tokens: Iterator[str]) -> Iterator[str]:
    while True:
        values = [int(tok) for _, tok in zip(range(9), tokens)]
        if len(values) < 9:
            return
        order, moves = ecological_bin_packing([values[0:3], values[3:6], values[6:9]])
        yield f"{order} {moves}"


def _quirksome(tokens: Iterator[str]) -> Iterator[str]:
    for tok in tokens:
        yield from quirksome_squares(int(tok))


def _quirksome_fixed(tokens: Iterator[str]) -> Iterator[str]:
    for tok in tokens:
        yield from quirksome_table(int(tok))


def _social(solver: Callable[[int, list[tuple[int, int, int]]], int]):
    def handler(tokens: Iterator[str]) -> Iterator[str]:
        for tok in tokens:
            n, m = int(tok), int(next(tokens))
            if n == 0:
                return
            rules = [
                (int(next(tokens)), int(next(tokens)), int(next(tokens)))
                for _ in range(m)
            ]
            yield str(solver(n, rules))

    return handler


_HANDLERS: dict[str, Callable[[Iterator[str]], Iterator[str]]] = {
    "queens": _queens,
    "ecological": _ecological,
    "quirksome": _quirksome,
    "quirksome-table": _quirksome_fixed,
    "social-bfs": _social(social_constraints_bfs),
    "social-dfs": _social(social_constraints_dfs),
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return its output."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return "".join(line + "\n" for line in handler(iter(text.split())))