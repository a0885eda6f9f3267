from __future__ import annotations

import sys
from typing import TextIO

from star_pattern.console.reader import read_row_count
from star_pattern.logging.init import get_logger, log_summary
from star_pattern.models.config_models import PrinterConfig
from star_pattern.models.run_result import RunResult
from star_pattern.services.pattern import count_tokens, iter_rows
from star_pattern.services.summary import render_summary_line

"""PatternPrinter: prompt, read the row count, print the triangle.

Flow:
1. write the prompt (no trailing newline) to stdout and flush
2. read one integer token from stdin; on parse failure fall back to 0 rows
   and log a WARN
3. clamp to ``max_rows`` when configured
4. print ``"* " * i`` for i in 1..rows, one line each
5. log the SUMMARY line; exit status is always 0
"""

__all__ = [
    "EXIT_SUCCESS",
    "PatternPrinter",
]

EXIT_SUCCESS = 0


class PatternPrinter:
    """Prints a left-aligned star triangle.

    Streams default to ``sys.stdin`` / ``sys.stdout`` looked up at call time,
    so replacing them (pytest capsys, monkeypatch) is picked up.
    """

    def __init__(
        self,
        config: PrinterConfig | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.config = config or PrinterConfig()
        self._stdin = stdin
        self._stdout = stdout
        self.logger = get_logger()

    def execute(self) -> RunResult:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        stdout = self._stdout if self._stdout is not None else sys.stdout

        stdout.write(self.config.prompt)
        stdout.flush()

        parsed = read_row_count(stdin)
        if not parsed.ok:
            self.logger.warning(f"invalid row count ({parsed.error}) -> printing 0 rows")
        rows = parsed.value
        self.logger.debug(f"row count read: raw={parsed.raw!r} value={rows}")

        printed = max(rows, 0)
        capped = False
        max_rows = self.config.max_rows
        if max_rows is not None and printed > max_rows:
            self.logger.warning(f"row count {rows} exceeds max_rows={max_rows} -> capped")
            printed = max_rows
            capped = True

        for line in iter_rows(printed):
            stdout.write(line + "\n")
        stdout.flush()

        return RunResult(
            requested_rows=rows,
            printed_rows=printed,
            tokens=count_tokens(printed),
            parse_ok=parsed.ok,
            capped=capped,
        )

    def run(self) -> int:
        result = self.execute()
        log_summary(render_summary_line(result))
        return EXIT_SUCCESS
