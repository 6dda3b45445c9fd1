"""Plain comma-joined CSV lines.

Fields are not quoted: embedded commas are written as-is and line breaks are
flattened to spaces, so every record stays on one physical line.
"""

import re
from collections.abc import Iterable
from pathlib import Path

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def csv_row(fields: Iterable[object]) -> str:
    return ",".join(_LINE_BREAK.sub(" ", "" if f is None else str(f)) for f in fields)


def write_csv(path: Path, header: Iterable[object], rows: Iterable[Iterable[object]]) -> None:
    """Overwrite `path` with a header line followed by one line per row."""
    lines = [csv_row(header), *(csv_row(row) for row in rows)]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def append_csv_row(path: Path, fields: Iterable[object]) -> None:
    with path.open("a", encoding="utf-8") as fh:
        fh.write(csv_row(fields) + "\n")
