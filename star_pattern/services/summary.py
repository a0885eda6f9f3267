from __future__ import annotations

from ..models.run_result import RunResult

"""SUMMARY line rendering.

The line is logged at SUMMARY level; LabeledFormatter adds the ``SUMMARY``
label, so the rendered text starts with the first field.
"""


def _flag(value: bool) -> str:
    return "true" if value else "false"


def render_summary_line(result: RunResult) -> str:
    """Render the SUMMARY fields for one run.

    Format:
        rows={printed} requested={requested} tokens={tokens} parse_ok={bool} capped={bool}

    Examples:
        >>> render_summary_line(RunResult(requested_rows=5, printed_rows=5, tokens=15, parse_ok=True))
        'rows=5 requested=5 tokens=15 parse_ok=true capped=false'
    """
    return (
        f"rows={result.printed_rows} "
        f"requested={result.requested_rows} "
        f"tokens={result.tokens} "
        f"parse_ok={_flag(result.parse_ok)} "
        f"capped={_flag(result.capped)}"
    )
