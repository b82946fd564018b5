"""Judge problems solved by stepping a small simulation forward."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Proposal:
    """A vendor's answer to a request for proposal."""

    name: str
    price: float
    met: int


def loan_months(
    duration: int, down_payment: float, loan: float, depreciations: Mapping[int, float]
) -> int:
    """Months until the car is worth more than what is still owed on it.

    ``depreciations`` maps a month to the depreciation rate that applies from
    that month on; months without an entry keep the last rate.
    """
    if duration <= 0:
        raise ValueError("duration must be positive")
    rates = dict(depreciations)
    per_month = loan / duration
    rate = rates.get(0, 0.0)
    value = (1 - rate) * loan + (1 - rate) * down_payment
    owed = loan
    months = 0
    while owed >= value:
        if per_month <= 0:
            raise ValueError("the loan is never paid off")
        months += 1
        new_rate = rates.get(months, 0.0)
        if new_rate:
            rate = new_rate
        value *= 1 - rate
        owed -= per_month
    return months


def format_months(count: int) -> str:
    """Count of months with the right plural."""
    return f"{count} {'month' if count == 1 else 'months'}"


def snail(height: float, up: float, down: float, fatigue: float) -> tuple[bool, int]:
    """Whether the snail climbs out of the well, and on which day it is decided."""
    loss = fatigue / 100.0 * up
    climbed = 0.0
    day = 0
    while True:
        day += 1
        if day > 1:
            up = up - loss if up - loss > 0 else 0.0
        climbed += up
        if climbed > height:
            return True, day
        climbed -= down
        if climbed < 0:
            return False, day
        if up == down and (loss == 0 or up == 0):
            raise ValueError("the snail never leaves the well nor falls out")


def best_proposal(proposals: Iterable[Proposal]) -> Proposal | None:
    """Proposal meeting the most requirements, the cheapest among equals.

    Only a proposal that meets at least one requirement can be chosen; the
    first of several equally good proposals wins.
    """
    best: Proposal | None = None
    met = 0
    price = 0.0
    for proposal in proposals:
        if proposal.met > met or (proposal.met == met and proposal.price < price):
            best, met, price = proposal, proposal.met, proposal.price
    return best


def _loansome(text: str) -> Iterator[str]:
    tokens = iter(text.split())
    for tok in tokens:
        duration = int(tok)
        down_payment = float(next(tokens))
        loan = float(next(tokens))
        count = int(next(tokens))
        if duration <= 0:
            return
        rates: dict[int, float] = {}
        for _ in range(count):
            month = int(next(tokens))
            rates[month] = float(next(tokens))
        yield format_months(loan_months(duration, down_payment, loan, rates))


def _snail(text: str) -> Iterator[str]:
    tokens = iter(text.split())
    for tok in tokens:
        height = float(tok)
        if height == 0:
            return
        up, down, fatigue = (float(next(tokens)) for _ in range(3))
        succeeded, day = snail(height, up, down, fatigue)
        yield f"{'success' if succeeded else 'failure'} on day {day}"


def _rfp(text: str) -> Iterator[str]:
    rows = iter(text.splitlines())

    def take() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    case = 1
    for header in rows:
        if not header.strip():
            continue
        n, p = (int(x) for x in header.split()[:2])
        if n == 0 and p == 0:
            return
        for _ in range(n):
            take()
        proposals = []
        for _ in range(p):
            name = take()
            price, met = take().split()[:2]
            for _ in range(int(met)):
                take()
            proposals.append(Proposal(name, float(price), int(met)))
        if case > 1:
            yield ""
        chosen = best_proposal(proposals)
        yield f"RFP #{case}"
        yield "" if chosen is None else chosen.name
        case += 1


_HANDLERS: dict[str, Callable[[str], Iterator[str]]] = {
    "loansome": _loansome,
    "snail": _snail,
    "rfp": _rfp,
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return its output."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return "".join(line + "\n" for line in handler(text))