from __future__ import annotations

from collections.abc import Iterator

"""Triangle rendering.

Row ``i`` (1-based) is the token ``"* "`` repeated ``i`` times. Lines are
yielded without a line break; the writer adds it.
"""

__all__ = [
    "TOKEN",
    "iter_rows",
    "count_tokens",
]

TOKEN = "* "


def iter_rows(rows: int) -> Iterator[str]:
    """Yield the lines of a triangle with ``rows`` rows.

    Non-positive ``rows`` yields nothing.

    Examples:
        >>> list(iter_rows(3))
        ['* ', '* * ', '* * * ']
        >>> list(iter_rows(-2))
        []
    """
    for i in range(1, rows + 1):
        yield TOKEN * i


def count_tokens(rows: int) -> int:
    """Total number of tokens in a triangle with ``rows`` rows."""
    if rows <= 0:
        return 0
    return rows * (rows + 1) // 2
