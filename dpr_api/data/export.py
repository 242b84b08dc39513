"""
dpr_api/data/export.py

Rendering of member records for bulk export.

The default CSV layout wraps text fields in double quotes without escaping
anything inside them, which is what existing consumers of dpr_data.csv
receive. A value containing a double quote or a line break therefore yields a
malformed row. ``strict=True`` switches to RFC 4180 quoting through the csv
module instead.
"""

import csv
import io
from typing import Any, Dict, Iterable, List, Sequence

CSV_HEADERS = [
    "ID", "Nama", "Fraksi", "Partai", "Dapil", "TTL", "Agama",
    "Kota Lahir", "Usia", "Pendidikan Terakhir", "Kader", "Dewan",
]

# Record keys rendered as quoted text, in column order between ID and the flags
_TEXT_FIELDS_BEFORE_AGE = ("nama", "fraksi", "partai", "dapil", "ttl", "agama", "kota_lahir")
_TEXT_FIELDS_AFTER_AGE = ("pendidikan_terakhir",)

EXPORT_FILENAME = "dpr_data.csv"


def format_flag(value: Any) -> str:
    """Render a '1'/'0' flag column as Indonesian yes/no text."""
    return "Ya" if value == "1" else "Tidak"


def _csv_values(member: Dict[str, Any]) -> List[Any]:
    """Ordered raw values of one CSV row, before quoting."""
    values: List[Any] = [member.get("id")]
    values.extend(member.get(field) or "" for field in _TEXT_FIELDS_BEFORE_AGE)
    values.append(member.get("usia") or "")
    values.extend(member.get(field) or "" for field in _TEXT_FIELDS_AFTER_AGE)
    values.append(format_flag(member.get("is_kader")))
    values.append(format_flag(member.get("is_dewan")))
    return values


def _legacy_row(member: Dict[str, Any]) -> str:
    values = _csv_values(member)
    quoted_positions = set(range(1, 8)) | {9}
    cells = [
        f'"{value}"' if index in quoted_positions else str(value)
        for index, value in enumerate(values)
    ]
    return ",".join(cells)


def to_csv(members: Iterable[Dict[str, Any]], strict: bool = False) -> str:
    """
    Render members as CSV text with a header row.

    Args:
        members: Member records as returned by the member store
        strict: Use RFC 4180 quoting (embedded quotes doubled) instead of the
            legacy unescaped quoting

    Returns:
        str: CSV document, every line terminated by a newline
    """
    if strict:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for member in members:
            writer.writerow(_csv_values(member))
        return buffer.getvalue()

    lines = [",".join(CSV_HEADERS)]
    lines.extend(_legacy_row(member) for member in members)
    return "\n".join(lines) + "\n"


def to_json_payload(members: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap exported members in the standard success envelope."""
    data = list(members)
    return {"success": True, "data": data, "count": len(data)}
