from __future__ import annotations

from dataclasses import dataclass

"""RowCountResult model.

The row count comes from an untrusted source (standard input). Instead of an
implicit default on parse failure, the reader returns this explicit result:
either success with a value, or failure with a reason. A failed result always
carries ``value=0`` so that callers falling back to it print nothing.
"""

__all__ = [
    "RowCountResult",
]


@dataclass(frozen=True)
class RowCountResult:
    """Outcome of reading the row count.

    Attributes:
        value: Parsed row count. ``0`` when parsing failed
        error: Failure reason, ``None`` on success
        raw: Token as read from input, ``None`` when input ended before any token
    """
    value: int
    error: str | None = None
    raw: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(value: int, raw: str | None = None) -> RowCountResult:
        return RowCountResult(value=value, error=None, raw=raw)

    @staticmethod
    def failure(reason: str, raw: str | None = None) -> RowCountResult:
        return RowCountResult(value=0, error=reason, raw=raw)
