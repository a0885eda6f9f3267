# Shared pytest fixtures
from __future__ import annotations
import io
import sys
import tempfile
from pathlib import Path
import pytest

from star_pattern.config.loader import CONFIG_ENV_VAR
from star_pattern.logging.init import reset_logging


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    # ロガーは stderr をセットアップ時に掴むのでテスト毎に作り直す
    reset_logging()
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """prompt: "Rows? "
max_rows: 3
log_level: INFO
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "pattern.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def feed_stdin(monkeypatch):
    def _feed(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _feed


@pytest.fixture()
def int_digit_limit():
    # PYTHONINTMAXSTRDIGITS に依存しないよう既定値 4300 に固定
    before = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(before)
