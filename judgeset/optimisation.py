"""Subset and set-selection search problems."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import lru_cache


def bars_memoized(target: int, bars: Iterable[int]) -> bool:
    """Whether some of the bars add up to target, by search keyed on what remains.

    The memo is keyed on the remaining length alone. With no bars at all the
    answer is yes.
    """
    lengths = list(bars)
    if target == 0 or not lengths:
        return True
    memo: dict[int, bool] = {}

    def search(used: frozenset[int], remaining: int) -> bool:
        if remaining in memo:
            return memo[remaining]
        if remaining == 0:
            return True
        if remaining < 0 or len(used) == len(lengths):
            return False
        for index, length in enumerate(lengths):
            if index in used:
                continue
            if search(used | {index}, remaining - length):
                memo.setdefault(remaining, True)
                return True
            memo.setdefault(remaining, False)
        return False

    return any(
        search(frozenset({index}), target - length) for index, length in enumerate(lengths)
    )


def bars_tabulated(target: int, bars: Iterable[int]) -> bool:
    """Whether some of the bars add up to target exactly."""
    lengths = tuple(bars)

    @lru_cache(maxsize=None)
    def reach(index: int, total: int) -> bool:
        if total == target:
            return True
        if total > target or index == len(lengths):
            return False
        return any(reach(i + 1, total + lengths[i]) for i in range(index, len(lengths)))

    return reach(0, 0)


def graph_coloring(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Largest set of nodes 1..n with no edge between them, in the order found."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) is out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)

    best: list[int] = []
    chosen: list[int] = []

    def explore(node: int, visited: list[bool]) -> None:
        nonlocal best
        for neighbour in adjacency[node]:
            visited[neighbour] = True
        found = False
        for candidate in range(1, n + 1):
            if not visited[candidate]:
                found = True
                visited[candidate] = True
                chosen.append(candidate)
                explore(candidate, visited.copy())
                chosen.pop()
        if not found and len(chosen) > len(best):
            best = chosen.copy()

    for start in range(1, n + 1):
        visited = [False] * (n + 1)
        visited[start] = True
        chosen.append(start)
        explore(start, visited)
        chosen.pop()
    return best


def water_gate_cost(
    gates: Iterable[tuple[int, int]], volume: int, time: int
) -> int | None:
    """Cheapest set of gates (flow, cost) letting out volume in time, or None."""
    options = list(gates)
    best = math.inf

    def search(index: int, flow: int, cost: int) -> None:
        nonlocal best
        if cost >= best:
            return
        if flow >= volume:
            best = cost
            return
        if index == len(options):
            return
        gate_flow, gate_cost = options[index]
        search(index + 1, flow + gate_flow * time, cost + gate_cost)
        search(index + 1, flow, cost)

    search(0, 0, 0)
    return None if best == math.inf else int(best)


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _bars(solver: Callable[[int, Sequence[int]], bool]):
    def handler(tokens: Iterator[str]) -> Iterator[str]:
        for _ in range(int(next(tokens))):
            target, count = _ints(tokens, 2)
            yield "YES" if solver(target, _ints(tokens, count)) else "NO"

    return handler


def _coloring(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        n, k = _ints(tokens, 2)
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(k)]
        nodes = graph_coloring(n, edges)
        yield str(len(nodes))
        yield " ".join(map(str, nodes))


def _watergate(tokens: Iterator[str]) -> Iterator[str]:
    gates = [(int(next(tokens)), int(next(tokens))) for _ in range(int(next(tokens)))]
    for case in range(1, int(next(tokens)) + 1):
        volume, time = _ints(tokens, 2)
        cost = water_gate_cost(gates, volume, time)
        yield f"Case {case}: {'IMPOSSIBLE' if cost is None else cost}"


_HANDLERS: dict[str, Callable[[Iterator[str]], Iterator[str]]] = {
    "bars-memo": _bars(bars_memoized),
    "bars-tab": _bars(bars_tabulated),
    "coloring": _coloring,
    "watergate": _watergate,
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return its output."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return "".join(line + "\n" for line in handler(iter(text.split())))