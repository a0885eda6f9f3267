from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from star_pattern.config.loader import ConfigError, resolve_config
from star_pattern.logging.init import setup_logging
from star_pattern.services.printer import PatternPrinter

"""CLI entrypoint.

- Load ``.env`` from the working directory (may set STAR_PATTERN_CONFIG)
- Resolve config: --config > STAR_PATTERN_CONFIG > defaults
- Run PatternPrinter against stdin/stdout

Exit codes: 0 after the pattern is printed (invalid input included),
1 when a requested config file is missing or invalid.
"""

EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv.

    override=False: variables already set in the process environment win over
    the file.
    """
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {n}")
    return n


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="star-pattern",
        description="Read a row count from stdin and print a left-aligned star triangle",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")
    p.add_argument(
        "--max-rows",
        type=_non_negative_int,
        default=None,
        help="Cap on printed rows (overrides config max_rows)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # NOTE: [] はそのまま使う (None のときのみ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    try:
        cfg = resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.max_rows is not None:
        cfg = replace(cfg, max_rows=args.max_rows)

    if args.debug:
        setup_logging("DEBUG")
        logger.debug("debug mode enabled")
    else:
        setup_logging(cfg.log_level)

    return PatternPrinter(cfg).run()
