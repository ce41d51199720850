"""
CSV helpers for the export buttons and the student import page.

Exports are UTF-8 with a byte order mark so spreadsheet programs open the
Thai headers correctly.
"""

import csv
import io
from collections.abc import Iterable
from collections.abc import Sequence
from datetime import date

from django.http import HttpResponse

BOM = "\ufeff"
CSV_CONTENT_TYPE = "text/csv; charset=utf-8"


def render_csv(headers: Sequence[str], rows: Iterable[Sequence]) -> str:
    """Render headers and rows as CSV text prefixed with a BOM."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow(["" if value is None else value for value in row])
    return BOM + buffer.getvalue()


def dated_filename(prefix: str, today: date | None = None) -> str:
    """Return e.g. ``students_2024-05-31.csv``."""
    today = today or date.today()
    return f"{prefix}_{today.isoformat()}.csv"


def csv_response(content: str, filename: str) -> HttpResponse:
    """Wrap CSV text in a download response."""
    response = HttpResponse(content.encode("utf-8"), content_type=CSV_CONTENT_TYPE)
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


def parse_csv_preview(text: str) -> tuple[list[str], list[dict[str, str]]]:
    """
    Parse uploaded CSV text into headers and rows keyed by header.

    Blank lines are ignored, a leading BOM is stripped from the header line
    and cells missing from short rows become empty strings.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return [], []

    reader = csv.reader(lines)
    headers = [h.strip().lstrip(BOM) for h in next(reader)]
    rows = []
    for values in reader:
        values = [v.strip() for v in values]
        rows.append({
            header: values[idx] if idx < len(values) else ""
            for idx, header in enumerate(headers)
        })
    return headers, rows
