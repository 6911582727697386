"""Text patterns built from rows of stars and numbers."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator
from itertools import chain, count

DEFAULT_ROWS = 5


def _digits(values: Iterator[int] | range) -> str:
    return "".join(str(value) for value in values)


def star_triangle(n: int) -> list[str]:
    """Rows of 1..n stars, each star followed by a space."""
    return ["* " * i for i in range(1, n + 1)]


def inverted_star_triangle(n: int) -> list[str]:
    """Rows of n..1 stars, each star followed by a space."""
    return ["* " * i for i in range(n, 0, -1)]


def counting_triangle(n: int) -> list[str]:
    """Row i counts from 1 to i."""
    return ["".join(f"{j} " for j in range(1, i + 1)) for i in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Row i repeats the number i, i times."""
    return [f"{i} " * i for i in range(1, n + 1)]


def right_aligned_triangle(n: int) -> list[str]:
    """A triangle of stars aligned to the right edge."""
    return [" " * (n - i) + "*" * i for i in range(1, n + 1)]


def pyramid(n: int) -> list[str]:
    """A centred pyramid with odd star counts."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def inverted_pyramid(n: int) -> list[str]:
    """A centred pyramid standing on its point."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(n, 0, -1)]


def arrow(n: int) -> list[str]:
    """Stars growing to n and shrinking back to one."""
    widths = chain(range(1, n + 1), range(n - 1, 0, -1))
    return ["*" * width for width in widths]


def mirrored_numbers(n: int) -> list[str]:
    """Counting up on the left, down on the right, with a gap between."""
    return [
        _digits(range(1, i + 1)) + " " * (2 * (n - i)) + _digits(range(i, 0, -1))
        for i in range(1, n + 1)
    ]


def floyd_triangle(n: int) -> list[str]:
    """Consecutive numbers laid out in rows of growing length."""
    numbers = count(1)
    return ["".join(f"{next(numbers)} " for _ in range(i)) for i in range(1, n + 1)]


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "star_triangle": star_triangle,
    "inverted_star_triangle": inverted_star_triangle,
    "counting_triangle": counting_triangle,
    "repeated_number_triangle": repeated_number_triangle,
    "right_aligned_triangle": right_aligned_triangle,
    "pyramid": pyramid,
    "inverted_pyramid": inverted_pyramid,
    "arrow": arrow,
    "mirrored_numbers": mirrored_numbers,
    "floyd_triangle": floyd_triangle,
}


def main(argv: list[str] | None = None) -> int:
    """Print one of the patterns."""
    parser = argparse.ArgumentParser(description="Print a text pattern.")
    parser.add_argument(
        "pattern", nargs="?", default="star_triangle", choices=sorted(PATTERNS)
    )
    parser.add_argument("-n", "--rows", type=int, default=DEFAULT_ROWS)
    args = parser.parse_args(argv)
    for line in PATTERNS[args.pattern](args.rows):
        print(line)
    return 0