"""
Parser for the whitespace-separated problem format.

Layout:
    n c e
    price_0 calorie_0
    ...
    price_{n-1} calorie_{n-1}

Line breaks carry no meaning; only the token order does.
"""

from __future__ import annotations
import re
from typing import List, TextIO

from lattice.errors import InputValidationError
from lattice.items import Item, Problem

# ASCII digits only, the way scanf("%d") reads them.
_INT_TOKEN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _to_int(token: str, pos: int, what: str) -> int:
    if not _INT_TOKEN.fullmatch(token):
        raise InputValidationError(f"token {pos} ({what}): expected an integer, got {token!r}")
    v = int(token)
    if v < 0:
        raise InputValidationError(f"token {pos} ({what}): must be >= 0, got {v}")
    return v


def parse_problem(text: str) -> Problem:
    tokens = text.split()
    if not tokens:
        raise InputValidationError("empty input: expected 'n c e' header")
    if len(tokens) < 3:
        raise InputValidationError(f"truncated header: expected 3 integers, got {len(tokens)}")

    n = _to_int(tokens[0], 1, "n")
    c = _to_int(tokens[1], 2, "target cost")
    e = _to_int(tokens[2], 3, "target weight")

    expected = 3 + 2 * n
    if len(tokens) < expected:
        got = (len(tokens) - 3) // 2
        raise InputValidationError(f"truncated item list: expected {n} items, got {got} complete pairs")
    if len(tokens) > expected:
        raise InputValidationError(
            f"unexpected trailing input: {len(tokens) - expected} token(s) after {n} items"
        )

    items: List[Item] = []
    for i in range(n):
        p = 3 + 2 * i
        price = _to_int(tokens[p], p + 1, f"item {i} price")
        calories = _to_int(tokens[p + 1], p + 2, f"item {i} calories")
        items.append(Item(price=price, calories=calories))

    return Problem(n=n, target_cost=c, target_weight=e, items=tuple(items))


def read_problem(stream: TextIO) -> Problem:
    return parse_problem(stream.read())
