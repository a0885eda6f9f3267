"""Domain models for the star pattern printer.

RowCountResult carries the outcome of reading the row count, PrinterConfig the
resolved runtime settings, and RunResult the metrics of one printed pattern.
"""

from .config_models import DEFAULT_PROMPT, PrinterConfig
from .row_count import RowCountResult
from .run_result import RunResult

__all__ = [
    # Configuration models
    "DEFAULT_PROMPT",
    "PrinterConfig",
    # Processing models
    "RowCountResult",
    "RunResult",
]
