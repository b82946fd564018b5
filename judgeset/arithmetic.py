"""Small arithmetic judge problems and their input/output drivers."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator

_LOCK_BASE = 720 + 360


def return_displacement(velocity: int, time: int) -> int:
    """Displacement after twice the given time at the given velocity."""
    return velocity * time * 2


def crossing_time_difference(distance: float, current: float, speed: float) -> float | None:
    """Difference between the shortest-path and fastest crossing times.

    Returns None when the difference cannot be determined.
    """
    if speed == 0:
        return None
    disc = speed * speed - current * current
    if disc <= 0:
        return None
    fastest = distance / speed
    shortest = distance / math.sqrt(disc)
    diff = shortest - fastest
    if math.isnan(diff) or math.isinf(diff) or diff < 0.001:
        return None
    return diff


def bafana_pass(players: int, start: int, passes: int) -> int:
    """Player holding the ball after the given number of passes."""
    result = passes % players + start
    if result > players:
        result %= players
    return result


def _spin(a: int, b: int, clockwise: bool) -> int:
    ticks = a - b if clockwise else b - a
    return ticks + 40 if ticks < 0 else ticks


def combination_lock_degrees(start: int, first: int, second: int, third: int) -> int:
    """Total degrees turned to open the lock."""
    return (
        _LOCK_BASE
        + _spin(start, first, True) * 9
        + _spin(first, second, False) * 9
        + _spin(second, third, True) * 9
    )


def feynman_squares(n: int) -> int:
    """Number of squares in an n by n grid."""
    return sum(a * a for a in range(1, n + 1))


def hashmat_difference(a: int, b: int) -> int:
    """Absolute difference between the two armies."""
    return abs(a - b)


def numbering_road(roads: float, numbers: float) -> int | None:
    """Suffix letters needed to number the roads, or None if more than 26."""
    if numbers == 0:
        raise ValueError("numbers must not be zero")
    needed = math.ceil((roads - numbers) / numbers)
    return None if needed > 26 else needed


def compare(a: int, b: int) -> str:
    """Relational operator between a and b."""
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "="


def nessy_sonars(rows: int, columns: int) -> int:
    """Sonars needed to cover a grid, each covering a 3x3 area."""
    return (rows // 3) * (columns // 3)


def three_families_share(x: float, y: float, z: float) -> int:
    """Money owed to the first family, truncated."""
    return int((x + (x - y)) / (x + y) * z)


def add_without_carry(a: int, b: int) -> int:
    """Binary addition of two 32-bit unsigned numbers without carries."""
    return (a ^ b) & 0xFFFFFFFF


def digit_root(n: int) -> int:
    """Repeated digit sum of a positive number."""
    if n < 1:
        raise ValueError("n must be positive")
    digits = str(n)
    total = int(digits[0])
    for ch in digits[1:]:
        total += int(ch)
        if total == 10:
            total = 1
        elif total > 10:
            total = digit_root(total)
    return total


def cycle_length(n: int) -> int:
    """Length of the 3n+1 sequence starting at n, counting both ends."""
    if n < 1:
        raise ValueError("n must be positive")
    length = 1
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def max_cycle_length(i: int, j: int) -> int:
    """Largest cycle length for any number between i and j inclusive."""
    low, high = sorted((i, j))
    return max(cycle_length(a) for a in range(low, high + 1))


def _groups(tokens: Iterator[str], size: int) -> Iterator[list[str]]:
    while True:
        group = [tok for _, tok in zip(range(size), tokens)]
        if len(group) < size:
            return
        yield group


def _physics(tokens: Iterator[str]) -> Iterator[str]:
    for v, t in _groups(tokens, 2):
        yield str(return_displacement(int(v), int(t)))


def _intermediate(tokens: Iterator[str]) -> Iterator[str]:
    count = int(next(tokens))
    for case, (d, v, u) in enumerate(_groups(tokens, 3), start=1):
        if case > count:
            break
        diff = crossing_time_difference(float(d), float(v), float(u))
        answer = "can't determine" if diff is None else f"{diff:.3f}"
        yield f"Case {case}: {answer}"


def _bafana(tokens: Iterator[str]) -> Iterator[str]:
    count = int(next(tokens))
    for case, (n, k, p) in enumerate(_groups(tokens, 3), start=1):
        if case > count:
            break
        yield f"Case {case}: {bafana_pass(int(n), int(k), int(p))}"


def _lock(tokens: Iterator[str]) -> Iterator[str]:
    for group in _groups(tokens, 4):
        values = [int(x) for x in group]
        if not any(values):
            break
        yield str(combination_lock_degrees(*values))


def _feynman(tokens: Iterator[str]) -> Iterator[str]:
    for tok in tokens:
        n = int(tok)
        if n == 0:
            break
        yield str(feynman_squares(n))


def _hashmat(tokens: Iterator[str]) -> Iterator[str]:
    for a, b in _groups(tokens, 2):
        yield str(hashmat_difference(int(a), int(b)))


def _road(tokens: Iterator[str]) -> Iterator[str]:
    for case, (r, n) in enumerate(_groups(tokens, 2), start=1):
        roads, numbers = float(r), float(n)
        if not roads and not numbers:
            break
        needed = numbering_road(roads, numbers)
        yield f"Case {case}: {'impossible' if needed is None else needed}"


def _relational(tokens: Iterator[str]) -> Iterator[str]:
    count = int(next(tokens))
    for index, (a, b) in enumerate(_groups(tokens, 2)):
        if index >= count:
            break
        yield compare(int(a), int(b))


def _nessy(tokens: Iterator[str]) -> Iterator[str]:
    count = int(next(tokens))
    for index, (a, b) in enumerate(_groups(tokens, 2)):
        if index >= count:
            break
        yield str(nessy_sonars(int(a), int(b)))


def _families(tokens: Iterator[str]) -> Iterator[str]:
    count = int(next(tokens))
    for index, (x, y, z) in enumerate(_groups(tokens, 3)):
        if index >= count:
            break
        yield str(three_families_share(float(x), float(y), float(z)))


def _carry(tokens: Iterator[str]) -> Iterator[str]:
    for a, b in _groups(tokens, 2):
        yield str(add_without_carry(int(a), int(b)))


def _digits(tokens: Iterator[str]) -> Iterator[str]:
    for tok in tokens:
        n = int(tok)
        if n == 0:
            break
        yield str(digit_root(n))


def _collatz(tokens: Iterator[str]) -> Iterator[str]:
    for i, j in _groups(tokens, 2):
        yield f"{i} {j} {max_cycle_length(int(i), int(j))}"


_HANDLERS: dict[str, Callable[[Iterator[str]], Iterator[str]]] = {
    "physics": _physics,
    "intermediate": _intermediate,
    "bafana": _bafana,
    "lock": _lock,
    "feynman": _feynman,
    "hashmat": _hashmat,
    "road": _road,
    "relational": _relational,
    "nessy": _nessy,
    "families": _families,
    "carry": _carry,
    "digits": _digits,
    "3n+1": _collatz,
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return its output."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return "".join(line + "\n" for line in handler(iter(text.split())))