"""golazo command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from golazo import __version__
from golazo.config import GolazoConfig, load_config, load_global_config
from golazo.data import DEMO_FIXTURES_PATH, FixtureError, FixtureMatchSource
from golazo.logging_config import setup_logging
from golazo.ui import theme
from golazo.ui.types import ViewKind

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="golazo", description="Live football dashboard for the terminal.")
    parser.add_argument("--view", choices=[v.value for v in ViewKind], help="View to open on start")
    parser.add_argument("--fixtures", help="YAML fixture file with matches (default: bundled demo)")
    parser.add_argument("--config", help="Config file (default: GOLAZO_CONFIG_PATH or ~/.golazo/golazo.yml)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Log level override")
    parser.add_argument("--version", action="version", version=f"golazo {__version__}")
    return parser


def _load(config_arg: Optional[str]) -> GolazoConfig:
    if config_arg:
        return load_config(Path(config_arg).expanduser())
    return load_global_config()


def _main_impl(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        config = _load(args.config)
    except ValidationError as e:
        sys.stderr.write(f"golazo error: invalid config: {e}\n")
        sys.exit(1)

    log_path = setup_logging(args.log_level or config.logging.level, config.logging.path)
    logger.info("golazo %s starting, logging to %s", __version__, log_path)

    theme.set_appearance_override(config.ui.appearance_mode)

    fixtures = args.fixtures or config.data.fixtures_path
    try:
        source = FixtureMatchSource(Path(fixtures).expanduser() if fixtures else DEMO_FIXTURES_PATH)
    except FixtureError as e:
        sys.stderr.write(f"golazo error: {e}\n")
        sys.exit(1)

    # Imported late so --help and config errors stay fast.
    from golazo.ui.app import GolazoApp

    start_view = ViewKind(args.view) if args.view else None
    GolazoApp(source, config=config, start_view=start_view).run()
    logger.info("golazo exited")


def main() -> None:
    try:
        _main_impl()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
