from __future__ import annotations

from pathlib import Path

from loguru import logger

from .calendar_utils import is_weekend, month_full_name, weekday_full_name
from .domain import CalendarConfig, DateRange, OutputWriteError
from .formatter import format_lines


def export_xlsx(date_range: DateRange, config: CalendarConfig, out_path: str | Path) -> None:
    """
    One sheet, one row per day: date, weekday, month, separator, day line.
    Weekend rows are shaded; separator/day line columns match the text listing.
    """
    try:
        from openpyxl import Workbook
        from openpyxl.styles import Alignment, Font, PatternFill
        from openpyxl.utils import get_column_letter
    except ModuleNotFoundError as e:
        raise RuntimeError(
            "openpyxl is not installed. Run `pip install openpyxl` or `pip install -e .`."
        ) from e

    lines = format_lines(date_range, config).lines

    wb = Workbook()
    ws = wb.active
    ws.title = f"{date_range.start.isoformat()}_{date_range.end.isoformat()}"

    header = ["Date", "Weekday", "Month", "Separator", "Line"]
    ws.append(header)

    fill_header = PatternFill("solid", fgColor="1F2937")  # dark gray
    font_header = Font(color="FFFFFF", bold=True)
    for col in range(1, len(header) + 1):
        cell = ws.cell(row=1, column=col)
        cell.fill = fill_header
        cell.font = font_header
        cell.alignment = Alignment(horizontal="center", vertical="center")

    fill_weekend = PatternFill("solid", fgColor="E5E7EB")
    for i, d in enumerate(date_range):
        sep, day_line = lines[2 * i], lines[2 * i + 1]
        ws.append([d.isoformat(), weekday_full_name(d), month_full_name(d), sep, day_line])
        if is_weekend(d):
            for c in range(1, len(header) + 1):
                ws.cell(row=ws.max_row, column=c).fill = fill_weekend

    ws.freeze_panes = "A2"
    widths = [12, 11, 11, config.line_length + 10, config.line_length + 6]
    for i, w in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(i)].width = w

    try:
        wb.save(out_path)
    except OSError as e:
        raise OutputWriteError(f"cannot write {out_path}: {e}") from e
    logger.debug(f"Exported {len(date_range)} days to {out_path}")
