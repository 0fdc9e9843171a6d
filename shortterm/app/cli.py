from __future__ import annotations

"""CLI for the short-term memory trainer using SessionManager and ResultStore."""

import argparse
import curses
import sys
from typing import Any, Dict

from .. import __version__
from ..config.config import ConfigError, load_config, validate_config
from ..stats.stats import format_summary
from ..storage.store import ResultStore
from ..ui.keys import QuitRequested
from ..ui.plain import PlainTerminal
from ..ui.screen import ScreenSession
from .session_manager import SessionManager

EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_DISPLAY_ERROR = 3
EXIT_QUIT = 130


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shortterm", description="Short-term memory tester.")
    p.add_argument("-f", dest="file", metavar="FILE", default=None, help="use FILE as database (default ~/.config/short-term)")
    p.add_argument("-n", dest="trials", metavar="NUMBER", type=int, default=None, help="number of tests (default 20)")
    p.add_argument("-c", dest="numbers", metavar="COUNT", type=int, default=None, help="numbers shown per test (default 7)")
    p.add_argument("-i", dest="minimum", metavar="MIN", type=int, default=None, help="smallest number shown (default 10)")
    p.add_argument("-a", dest="maximum", metavar="MAX", type=int, default=None, help="exclusive upper bound of numbers (default 99)")
    p.add_argument("--dry", dest="dry", action="store_true", help="show score and duration after every test")
    p.add_argument("--screen", dest="mode", action="store_const", const="screen", help="use the full-screen display")
    p.add_argument("--plain", dest="mode", action="store_const", const="plain", help="use the line-oriented display")
    p.set_defaults(dry=None, mode=None)
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("--explain", action="store_true", help="print trace events")
    p.add_argument("--history", action="store_true", help="print past runs and exit")
    p.add_argument("--plot", metavar="PATH", default=None, help="save a trend chart of past runs to PATH and exit")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    if cfg.get(name) is None:
        cfg[name] = {}
    section = cfg[name]
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")
    return section


def apply_overrides(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Layer command-line flags over the loaded config."""
    if args.file is not None:
        _section(cfg, "database")["path"] = args.file
    test_overrides = {"trials": args.trials, "numbers": args.numbers, "min": args.minimum, "max": args.maximum}
    for key, value in test_overrides.items():
        if value is not None:
            _section(cfg, "test")[key] = value
    if args.mode is not None:
        _section(cfg, "ui")["mode"] = args.mode
    if args.dry is not None:
        _section(cfg, "ui")["dry"] = bool(args.dry)
    return cfg


def _report_history(store: ResultStore, cfg: Dict[str, Any], plot_path: str | None) -> int:
    from pydantic import ValidationError

    from analytics import AnalyticsConfig, ewma_by_run, format_history, plot_trend, records_to_frame

    try:
        acfg = AnalyticsConfig(**cfg["analytics"])
    except (TypeError, ValidationError) as exc:
        print(f"ERROR: Invalid analytics settings: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    df = records_to_frame(store.records)
    print(format_history(df, limit=acfg.history_limit))
    if plot_path:
        df = ewma_by_run(df, value_col="accuracy", span=acfg.smoothing_span)
        if plot_trend(df, value_col="accuracy", save_path=plot_path):
            print(f"Chart saved to: {plot_path}")
        else:
            print("Nothing to plot yet.")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.version:
        print(f"shortterm {__version__}")
        return 0

    if args.explain:
        from .explain import enable as explain_enable
        explain_enable(True)

    try:
        cfg = validate_config(apply_overrides(load_config(args.config), args))
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    store = ResultStore(cfg["database"]["path"])
    if args.history or args.plot:
        try:
            store.read()
        except OSError as exc:
            print(f"ERROR: Cannot read results database '{store.path}': {exc}", file=sys.stderr)
            return EXIT_IO_ERROR
        return _report_history(store, cfg, args.plot)

    try:
        store.load()
    except OSError as exc:
        print(f"ERROR: Cannot open results database '{store.path}': {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    sm = SessionManager(cfg)
    try:
        if cfg["ui"]["mode"] == "screen":
            with ScreenSession(cfg["ui"]["bindings"]) as terminal:
                record = sm.run(terminal)
        else:
            record = sm.run(PlainTerminal())
    except (QuitRequested, KeyboardInterrupt):
        print("Aborted; nothing saved.", file=sys.stderr)
        return EXIT_QUIT
    except curses.error as exc:
        print(f"ERROR: Cannot start full-screen mode: {exc}", file=sys.stderr)
        return EXIT_DISPLAY_ERROR

    try:
        store.append(record)
    except OSError as exc:
        print(f"ERROR: Cannot write results database '{store.path}': {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    if not cfg["ui"]["dry"]:
        print(format_summary(record))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
