"""Judge problems over short lists of numbers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence


def brick_game(ages: Sequence[int]) -> int:
    """Age of the captain: the median of the team."""
    ordered = sorted(ages)
    return ordered[len(ordered) // 2]


def cost_cutting(salaries: Sequence[int]) -> int:
    """Middle salary of three."""
    return sorted(salaries)[1]


def nlogonia_region(n: int, m: int, x: int, y: int) -> str:
    """Region of a point relative to the division point (n, m)."""
    if x == n or y == m:
        return "divisa"
    if x > n:
        return "NE" if y > m else "SE"
    return "NO" if y > m else "SO"


def emoogle_balance(events: Iterable[int]) -> int:
    """Treats given minus treats received."""
    return sum(1 if e > 0 else -1 for e in events)


def jumping_mario(heights: Sequence[int]) -> tuple[int, int]:
    """Counts of high jumps and low jumps along the walls."""
    high = low = 0
    for prev, cur in zip(heights, heights[1:]):
        if cur > prev:
            high += 1
        elif cur < prev:
            low += 1
    return high, low


def packing_ok(sizes: Iterable[int]) -> bool:
    """Whether every dimension fits within the limit of 20."""
    return all(s <= 20 for s in sizes)


def save_setu(commands: Iterable[tuple[str, int | None]]) -> Iterator[int]:
    """Yield the running total at every report command."""
    money = 0
    for action, amount in commands:
        if action == "donate":
            money += amount or 0
        elif action == "report":
            yield money


def event_planning(
    participants: int, budget: int, hotels: Iterable[tuple[int, Sequence[int]]]
) -> int | None:
    """Cheapest affordable stay, or None to stay home.

    Where hotels share a price, only the first one with that price counts.
    """
    seen: dict[int, Sequence[int]] = {}
    for price, weeks in hotels:
        seen.setdefault(price, weeks)
    costs = [
        participants * price
        for price, weeks in seen.items()
        if any(w >= participants for w in weeks) and participants * price <= budget
    ]
    return min(costs, default=None)


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _brick(tokens: Iterator[str]) -> Iterator[str]:
    for case in range(1, int(next(tokens)) + 1):
        n = int(next(tokens))
        yield f"Case {case}: {brick_game(_ints(tokens, n))}"


def _cost(tokens: Iterator[str]) -> Iterator[str]:
    for case in range(1, int(next(tokens)) + 1):
        yield f"Case {case}: {cost_cutting(_ints(tokens, 3))}"


def _nlogonia(tokens: Iterator[str]) -> Iterator[str]:
    for tok in tokens:
        count = int(tok)
        if count == 0:
            break
        n, m = _ints(tokens, 2)
        for _ in range(count):
            x, y = _ints(tokens, 2)
            yield nlogonia_region(n, m, x, y)


def _emoogle(tokens: Iterator[str]) -> Iterator[str]:
    case = 1
    for tok in tokens:
        n = int(tok)
        if n == 0:
            break
        yield f"Case {case}: {emoogle_balance(_ints(tokens, n))}"
        case += 1


def _mario(tokens: Iterator[str]) -> Iterator[str]:
    for case in range(1, int(next(tokens)) + 1):
        n = int(next(tokens))
        high, low = jumping_mario(_ints(tokens, n))
        yield f"Case {case}: {high} {low}"


def _packing(tokens: Iterator[str]) -> Iterator[str]:
    for case in range(1, int(next(tokens)) + 1):
        yield f"Case {case}: {'good' if packing_ok(_ints(tokens, 3)) else 'bad'}"


def _setu(tokens: Iterator[str]) -> Iterator[str]:
    def commands() -> Iterator[tuple[str, int | None]]:
        for _ in range(int(next(tokens))):
            action = next(tokens)
            yield action, int(next(tokens)) if action == "donate" else None

    yield from (str(total) for total in save_setu(commands()))


def _event(tokens: Iterator[str]) -> Iterator[str]:
    while True:
        try:
            n, b, h, w = _ints(tokens, 4)
        except StopIteration:
            return
        hotels = []
        for _ in range(h):
            price = int(next(tokens))
            hotels.append((price, _ints(tokens, w)))
        cost = event_planning(n, b, hotels)
        yield "stay home" if cost is None else str(cost)


_HANDLERS: dict[str, Callable[[Iterator[str]], Iterator[str]]] = {
    "brick": _brick,
    "costcutting": _cost,
    "nlogonia": _nlogonia,
    "emoogle": _emoogle,
    "mario": _mario,
    "packing": _packing,
    "setu": _setu,
    "event": _event,
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return its output."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return "".join(line + "\n" for line in handler(iter(text.split())))