"""Column schemas for the CSV uploads and header checks against them."""

import csv
import io

from mapping_dashboard.core.errors import InvalidInput

EXPECTED_HEADERS: dict[str, list[str]] = {
    "travel": ["employee_id", "destination", "departure_date", "return_date", "purpose", "cost"],
    "donations": ["employee_id", "charity_name", "donation_date", "amount", "matched"],
    "meetings": ["employee_id", "meeting_date", "duration", "attendees", "purpose", "location"],
}


def normalize_header(header_row: str | list[str]) -> list[str]:
    cells = header_row.split(",") if isinstance(header_row, str) else header_row
    return [c.strip().lower() for c in cells]


def missing_headers(header_row: str | list[str], file_type: str) -> list[str]:
    """Required columns absent from `header_row`, in schema order."""
    required = EXPECTED_HEADERS.get(file_type)
    if required is None:
        raise InvalidInput("Invalid file type", file_type=file_type, allowed=sorted(EXPECTED_HEADERS))
    present = set(normalize_header(header_row))
    return [h for h in required if h not in present]


def parse_csv(content: str) -> tuple[list[str], list[list[str]]]:
    """Split CSV text into (header, data rows), dropping blank lines."""
    rows = [r for r in csv.reader(io.StringIO(content)) if any(cell.strip() for cell in r)]
    if not rows:
        return [], []
    return rows[0], rows[1:]
