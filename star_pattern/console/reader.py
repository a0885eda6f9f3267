from __future__ import annotations

import re
from typing import TextIO

from star_pattern.models.row_count import RowCountResult

"""Row count reader.

Reads one whitespace-delimited token and parses its leading integer, the way
stream extraction of an ``int`` does:

- leading whitespace and blank lines are skipped
- an optional sign followed by ASCII digits is taken from the start of the
  token; anything after it is ignored (``"5abc"`` -> 5)
- a token without a leading integer, or end of input, is a failure with
  value 0; so is a digit run too long for int() to convert
"""

__all__ = [
    "read_token",
    "parse_row_count",
    "read_row_count",
]

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def read_token(stream: TextIO) -> str | None:
    """Return the first whitespace-delimited token, or None at end of input.

    Consumes input line by line so an interactive terminal only blocks until
    the first non-blank line.
    """
    for line in stream:
        parts = line.split()
        if parts:
            return parts[0]
    return None


def parse_row_count(token: str | None) -> RowCountResult:
    if token is None:
        return RowCountResult.failure("no input")
    m = _LEADING_INT.match(token)
    if m is None:
        return RowCountResult.failure(f"not an integer: {token!r}", raw=token)
    digits = m.group(0)
    try:
        value = int(digits)
    except ValueError:
        # int() の桁数上限 (sys.int_info.str_digits_check_threshold 超過)
        return RowCountResult.failure(f"integer too long: {len(digits)} digits", raw=token)
    return RowCountResult.success(value, raw=token)


def read_row_count(stream: TextIO) -> RowCountResult:
    return parse_row_count(read_token(stream))
