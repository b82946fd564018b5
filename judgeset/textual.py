"""Judge problems that mostly work on words and lines of text."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping

_LANGUAGES = {
    "HELLO": "ENGLISH",
    "HOLA": "SPANISH",
    "HALLO": "GERMAN",
    "BONJOUR": "FRENCH",
    "CIAO": "ITALIAN",
    "ZDRAVSTVUJTE": "RUSSIAN",
}

_NUMBER_WORDS = (
    "zero", "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten",
)


def hajj_name(word: str) -> str:
    """Name of the pilgrimage for the given word, empty if unknown."""
    return {"Hajj": "Hajj-e-Akbar", "Umrah": "Hajj-e-Asghar"}.get(word, "")


def detect_language(word: str) -> str:
    """Language a greeting is written in."""
    return _LANGUAGES.get(word, "UNKNOWN")


def spell_number(word: str) -> int | None:
    """Number whose name differs from word in at most one letter."""
    for value, name in enumerate(_NUMBER_WORDS):
        if len(name) == len(word) and sum(a != b for a, b in zip(name, word)) <= 1:
            return value
    return None


def tex_quotes(lines: Iterable[str]) -> list[str]:
    """Replace straight double quotes with alternating TeX quotes."""
    opening = True
    result = []
    for line in lines:
        parts = []
        for ch in line:
            if ch == '"':
                parts.append("``" if opening else "''")
                opening = not opening
            else:
                parts.append(ch)
        result.append("".join(parts))
    return result


def bender_direction(bends: Iterable[str]) -> str:
    """Final direction of the wire tip after the given bends."""
    sign, axis = "+", "x"
    for bend in bends:
        if bend == "No":
            continue
        if axis == "x":
            sign = "+" if bend[0] == sign else "-"
            axis = bend[1]
        elif axis == bend[1]:
            sign = "+" if sign != bend[0] else "-"
            axis = "x"
    return sign + axis


def newspaper_cost(values: Mapping[str, int], lines: Iterable[str]) -> int:
    """Total cost in cents of the characters in the lines."""
    return sum(values.get(ch, 0) for line in lines for ch in line)


def format_dollars(cents: int) -> str:
    """Format a number of cents as dollars."""
    return f"{max(cents // 100, 0)}.{cents % 100:02d}$"


def split_string(text: str, delimiter: str) -> list[str]:
    """Split text on every occurrence of delimiter."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)


def parse_time(text: str) -> int:
    """Seconds since midnight of an HH:MM:SS time."""
    parts = split_string(text, ":")
    if len(parts) < 3:
        raise ValueError(f"bad time: {text!r}")
    return int(parts[0]) * 3600 + int(parts[1]) * 60 + int(parts[2])


def average_speed(lines: Iterable[str]) -> Iterator[str]:
    """Yield the distance travelled at each query line."""
    speed = 0.0
    distance = 0.0
    last = 0
    for line in lines:
        parts = split_string(line, " ")
        now = parse_time(parts[0])
        distance += speed * (now - last)
        last = now
        if len(parts) == 2:
            speed = int(parts[1]) / 3600.0
        else:
            yield f"{parts[0]} {distance:.2f} km"


def horror_dash(speeds: Iterable[int]) -> int:
    """Speed of the fastest creature."""
    return max(speeds)


def _jeopardy(lines: list[str]) -> Iterator[str]:
    yield from lines


def _hajj(lines: list[str]) -> Iterator[str]:
    case = 1
    for word in " ".join(lines).split():
        if word == "*":
            break
        yield f"Case {case}: {hajj_name(word)}"
        case += 1


def _language(lines: list[str]) -> Iterator[str]:
    case = 1
    for word in " ".join(lines).split():
        if word == "#":
            break
        yield f"Case {case}: {detect_language(word)}"
        case += 1


def _one_two_three(lines: list[str]) -> Iterator[str]:
    tokens = " ".join(lines).split()
    count = int(tokens[0])
    for word in tokens[1 : count + 1]:
        value = spell_number(word)
        if value is not None:
            yield str(value)


def _tex(lines: list[str]) -> Iterator[str]:
    yield from tex_quotes(lines)


def _bender(lines: list[str]) -> Iterator[str]:
    tokens = iter(" ".join(lines).split())
    for tok in tokens:
        length = int(tok)
        if length == 0:
            break
        bends = [next(tokens) for _ in range(length - 1)]
        yield bender_direction(bends)


def _newspaper(lines: list[str]) -> Iterator[str]:
    rows = iter(lines)

    def next_filled() -> str:
        for row in rows:
            if row.strip():
                return row
        raise ValueError("unexpected end of input")

    for _ in range(int(next_filled())):
        values: dict[str, int] = {}
        for _ in range(int(next_filled())):
            parts = next_filled().split()
            values.setdefault(parts[0][0], int(parts[1]))
        count = int(next_filled())
        text = [next(rows, "") for _ in range(count)]
        yield format_dollars(newspaper_cost(values, text))


def _speed(lines: list[str]) -> Iterator[str]:
    yield from average_speed(line for line in lines if line.strip())


def _horror(lines: list[str]) -> Iterator[str]:
    filled = [line for line in lines if line.strip()]
    count = int(filled[0].split()[0])
    for case, line in enumerate(filled[1 : count + 1], start=1):
        yield f"Case {case}: {horror_dash(int(x) for x in line.split())}"


_HANDLERS: dict[str, Callable[[list[str]], Iterator[str]]] = {
    "jeopardy": _jeopardy,
    "hajj": _hajj,
    "language": _language,
    "onetwothree": _one_two_three,
    "texquotes": _tex,
    "bender": _bender,
    "newspaper": _newspaper,
    "speed": _speed,
    "horror": _horror,
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return its output."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return "".join(line + "\n" for line in handler(text.splitlines()))