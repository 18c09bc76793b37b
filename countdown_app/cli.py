"""Command line entry point for the countdown app."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from .app import CountdownApp
from .config.loader import load_config
from .errors import ConfigurationError, PersistenceError
from .logging.config import configure_logging
from .state.states import SelectDate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countdown-app",
        description="Count down to a date in the terminal."
    )
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding countdown.yaml")
    parser.add_argument("--db", default=None,
                        help="Persist the target date in this sqlite file")
    parser.add_argument("--date", default=None,
                        help="Target date in yyyy-mm-dd format")
    parser.add_argument("--finish", action="store_true",
                        help="Debug shortcut: finish the countdown in a few seconds")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--json-logs", action="store_true",
                        help="Emit logs as JSON")
    return parser


def build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command line flags into configuration overrides."""
    overrides: dict[str, Any] = {}

    if args.db:
        overrides["storage"] = {"backend": "sqlite", "db_path": args.db}

    logging_overrides: dict[str, Any] = {}
    if args.log_level:
        logging_overrides["level"] = args.log_level.upper()
    if args.json_logs:
        logging_overrides["format_json"] = True
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return overrides


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config_dir, build_overrides(args))
    except ConfigurationError as e:
        print(f"countdown-app: {e}", file=sys.stderr)
        return 2

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
    )

    try:
        app = CountdownApp(config=config)
    except PersistenceError as e:
        print(f"countdown-app: {e}", file=sys.stderr)
        return 1

    try:
        app.start()

        if args.date:
            if not isinstance(app.state, SelectDate):
                app.change_date()
            app.enter_date(args.date)

        while isinstance(app.state, SelectDate):
            try:
                text = input("> ")
            except EOFError:
                app.stop()
                return 1
            app.enter_date(text)

        if args.finish:
            app.finish_countdown()

        app.run()
    except KeyboardInterrupt:
        app.stop()
        return 130
    except PersistenceError as e:
        print(f"countdown-app: {e}", file=sys.stderr)
        return 1

    return 0
