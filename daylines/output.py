from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from .domain import (
    DEFAULT_DAY_SEP_CHAR,
    DEFAULT_LINE_LENGTH,
    DEFAULT_WEEK_SEP_CHAR,
    DEFAULT_WEEKEND_MARKER_CHAR,
    CalendarConfig,
    OutputWriteError,
    Results,
)


def _line_length(v) -> int:
    if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
        raise ValueError(f"line_length must be a positive integer: {v!r}")
    return v


def _single_char(key: str, v) -> str:
    if not isinstance(v, str) or len(v) != 1:
        raise ValueError(f"{key} must be a single character: {v!r}")
    return v


def load_config_json(path: str | Path) -> CalendarConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"config file must hold a JSON object: {path}")

    return CalendarConfig.build(
        line_length=_line_length(raw.get("line_length", DEFAULT_LINE_LENGTH)),
        day_sep_char=_single_char("day_sep_char", raw.get("day_sep_char", DEFAULT_DAY_SEP_CHAR)),
        week_sep_char=_single_char(
            "week_sep_char", raw.get("week_sep_char", DEFAULT_WEEK_SEP_CHAR)
        ),
        weekend_marker_char=_single_char(
            "weekend_marker_char", raw.get("weekend_marker_char", DEFAULT_WEEKEND_MARKER_CHAR)
        ),
    )


def dump_config_json(config: CalendarConfig) -> str:
    raw = {
        "line_length": config.line_length,
        "day_sep_char": config.day_line_sep[:1],
        "week_sep_char": config.week_line_sep[:1],
        "weekend_marker_char": config.weekend_line_marker[:1],
    }
    return json.dumps(raw, ensure_ascii=False, indent=2)


def write_listing(results: Results, out_path: str | Path) -> Path:
    """Writes all lines joined with newlines to ``out_path`` in one go."""
    path = Path(out_path)
    text = results.text()
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"cannot write {path}: {e}") from e
    logger.debug(f"Wrote {len(results)} lines to {path}")
    return path
