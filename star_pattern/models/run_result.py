from __future__ import annotations

from dataclasses import dataclass

"""Run result model: metrics of one printed pattern, used for the SUMMARY line."""


@dataclass(frozen=True)
class RunResult:
    requested_rows: int  # 入力値 (パース失敗時は 0)
    printed_rows: int  # 実際に出力した行数 (max_rows 適用後, 負数は 0)
    tokens: int  # 出力した "* " の総数
    parse_ok: bool
    capped: bool = False
