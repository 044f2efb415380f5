from __future__ import annotations

import argparse
import sys

from loguru import logger

from .app_paths import default_config_path
from .date_range import expand
from .domain import DEFAULT_CONFIG, CalendarConfig, OutputWriteError
from .excel import export_xlsx
from .formatter import format_lines
from .logger import setup_logger
from .output import dump_config_json, load_config_json, write_listing


def _positive_int(s: str) -> int:
    try:
        v = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {v}")
    return v


def _single_char(s: str) -> str:
    if len(s) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character: {s!r}")
    return s


def _resolve_config(args: argparse.Namespace) -> CalendarConfig:
    base = DEFAULT_CONFIG
    config_path = args.config_path
    if config_path is None and default_config_path().is_file():
        config_path = default_config_path()
    if config_path is not None:
        logger.info(f"Loading config from {config_path}")
        base = load_config_json(config_path)

    return CalendarConfig.build(
        line_length=args.width or base.line_length,
        day_sep_char=args.day_sep or base.day_line_sep[:1],
        week_sep_char=args.week_sep or base.week_line_sep[:1],
        weekend_marker_char=args.weekend_marker or base.weekend_line_marker[:1],
    )


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="daylines", description="Plain-text day-by-day calendar")
    ap.add_argument("--from", dest="from_date", default="2023-11-11", help="first day, YYYY-MM-DD")
    ap.add_argument("--to", dest="to_date", default="2024-01-01", help="last day, YYYY-MM-DD")
    ap.add_argument("--out", dest="out_path", default="output.txt", help="output text path")
    ap.add_argument("--xlsx", dest="xlsx_path", default=None, help="also export an xlsx sheet")
    ap.add_argument("--config", dest="config_path", default=None, help="JSON config path")
    ap.add_argument(
        "--dump-config", action="store_true", help="print the resolved config as JSON and exit"
    )
    ap.add_argument("--width", type=_positive_int, default=None, help="line length")
    ap.add_argument("--day-sep", type=_single_char, default=None)
    ap.add_argument("--week-sep", type=_single_char, default=None)
    ap.add_argument("--weekend-marker", type=_single_char, default=None)
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    ap.add_argument("--log-file", default=None)
    args = ap.parse_args(argv)

    setup_logger(level=args.log_level, log_file=args.log_file)

    try:
        config = _resolve_config(args)
        if args.dump_config:
            print(dump_config_json(config))
            return 0
        date_range = expand(args.from_date, args.to_date, config)
    except (ValueError, OSError) as e:
        logger.error(f"Invalid input: {e}")
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    results = format_lines(date_range, config)
    logger.info(f"Built {len(results)} lines for {len(date_range)} days")

    try:
        write_listing(results, args.out_path)
        if args.xlsx_path:
            export_xlsx(date_range, config, args.xlsx_path)
    except OutputWriteError as e:
        logger.error(f"Write failed: {e}")
        print(f"Error writing to file: {e}", file=sys.stderr)
        return 1

    print("File written successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
