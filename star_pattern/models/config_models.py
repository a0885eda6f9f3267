from __future__ import annotations

from dataclasses import dataclass

"""Config dataclass for the star pattern printer.

Kept separate from the YAML loader in star_pattern/config/loader.py so the
printer can be constructed directly (tests, embedding) without touching files.
"""

DEFAULT_PROMPT = "Enter the number of rows for the star pattern: "


@dataclass(frozen=True)
class PrinterConfig:
    """Runtime settings for PatternPrinter.

    All fields have defaults; an absent config file means ``PrinterConfig()``.
    """
    prompt: str = DEFAULT_PROMPT  # written verbatim, no trailing newline
    max_rows: int | None = None  # None = no cap
    log_level: str = "INFO"
