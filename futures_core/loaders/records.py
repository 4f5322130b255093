from __future__ import annotations

import logging
import re
from operator import attrgetter
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

import pandas as pd
from pydantic import ValidationError

from futures_core.pipeline.errors import (
    FieldCountError,
    MissingHeaderError,
    SchemaValidationError,
)
from futures_core.pipeline.model import COLUMNS, Record

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'
_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def _unquote(cell: str) -> str:
    # only a fully wrapped field is unquoted; embedded quotes/delimiters are not supported
    if len(cell) >= 2 and cell.startswith(QUOTE) and cell.endswith(QUOTE):
        return cell[1:-1]
    return cell


def tokenize_line(line: str) -> List[str]:
    """Split one line on commas and strip wrapping double quotes from each field."""
    return [_unquote(cell) for cell in line.split(DELIMITER)]


def parse_header(line: str) -> List[str]:
    """Header names have every double quote removed."""
    names = [cell.replace(QUOTE, "").strip() for cell in line.split(DELIMITER)]

    seen = set()
    for name in names:
        if name in seen:
            raise SchemaValidationError(f"duplicate column {name!r} in header", line=1)
        seen.add(name)

    missing = [c for c in COLUMNS if c not in seen]
    if missing:
        raise SchemaValidationError(f"header is missing column(s) {', '.join(missing)}", line=1)
    return names


def iter_rows(text: str) -> Iterable[Tuple[int, dict]]:
    """
    Yield (line_number, {header: raw cell}) for every data row.
    Raises MissingHeaderError / FieldCountError (a blank line inside the data is a
    one-field row and fails like any other short row).
    """
    stripped = text.lstrip("\ufeff").strip()
    if not stripped:
        raise MissingHeaderError()

    lines = _LINE_BREAK.split(stripped)
    header = parse_header(lines[0])

    for lineno, line in enumerate(lines[1:], start=2):
        cells = tokenize_line(line)
        if len(cells) != len(header):
            raise FieldCountError(lineno, expected=len(header), found=len(cells))
        yield lineno, dict(zip(header, cells))


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        where = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "; ".join(parts)


def parse_records(text: str) -> List[Record]:
    """
    Parse delimited text into Records sorted by Year (stable for equal years).
    Any malformed row aborts the whole parse.
    """
    records: List[Record] = []
    for lineno, row in iter_rows(text):
        try:
            records.append(Record.model_validate(row))
        except ValidationError as exc:
            raise SchemaValidationError(_validation_message(exc), line=lineno) from exc

    logger.debug("parsed %d records", len(records))
    return sorted(records, key=attrgetter("year"))


def load_records(csv_path: Union[str, Path]) -> List[Record]:
    """Read a local CSV (utf-8, BOM tolerated) and parse it."""
    path = Path(csv_path)
    records = parse_records(path.read_text(encoding="utf-8-sig"))
    logger.info("loaded %d records from %s", len(records), path)
    return records


def _format_cell(value) -> str:
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    text = str(value)
    if DELIMITER in text or QUOTE in text or _LINE_BREAK.search(text):
        raise ValueError(f"cannot serialize {text!r}: delimiters and quotes are not escapable")
    return text


def records_to_csv(records: Sequence[Record]) -> str:
    """Serialize Records back to the header + rows text format accepted by parse_records."""
    lines = [DELIMITER.join(COLUMNS)]
    for r in records:
        lines.append(DELIMITER.join(_format_cell(r.get(c)) for c in COLUMNS))
    return "\n".join(lines) + "\n"


def records_frame(records: Sequence[Record]) -> pd.DataFrame:
    """Records as a DataFrame with the CSV column names."""
    if not records:
        return pd.DataFrame(columns=list(COLUMNS))
    return pd.DataFrame([r.model_dump(by_alias=True) for r in records], columns=list(COLUMNS))
