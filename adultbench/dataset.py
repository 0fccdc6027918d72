"""Reading and cleaning rows of the adult census data file."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

DEFAULT_DATA_PATH = Path("Data") / "adult.data"

# Column positions in the adult data file.
AGE, WORKCLASS, EDUCATION, OCCUPATION, HOURS, INCOME = 0, 1, 3, 6, 12, 14
FULL_ROW_FIELDS = 15

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Record:
    """One row of the data file, reduced to the fields the analyses use."""

    age: int
    workclass: str
    education: str
    hours: int
    income: str


def clean_field(field: str) -> str:
    """Remove every space from a field."""
    return field.replace(" ", "")


def split_fields(line: str) -> list[str]:
    """Split a line on commas; a trailing comma yields no empty last field."""
    if not line:
        return []
    fields = line.split(",")
    if line.endswith(","):
        fields.pop()
    return fields


def _parse_int(text: str) -> int:
    """Read the leading integer of a field, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_record(line: str) -> Record | None:
    """Parse a full row, or return None when it is short or not numeric."""
    fields = split_fields(line)
    if len(fields) < FULL_ROW_FIELDS:
        return None
    try:
        age = _parse_int(fields[AGE])
        hours = _parse_int(fields[HOURS])
    except ValueError:
        return None
    return Record(
        age=age,
        workclass=clean_field(fields[WORKCLASS]),
        education=clean_field(fields[EDUCATION]),
        hours=hours,
        income=clean_field(fields[INCOME]),
    )


def _lines(path: str | Path) -> Iterator[str]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            yield line.rstrip("\n")


def load_records(path: str | Path = DEFAULT_DATA_PATH) -> list[Record]:
    """Load every parseable row of the file."""
    return [record for line in _lines(path) if (record := parse_record(line)) is not None]


def load_pairs(
    path: str | Path = DEFAULT_DATA_PATH,
    min_fields: int = FULL_ROW_FIELDS,
    skip_empty: bool = False,
) -> list[tuple[str, str]]:
    """Load (education, workclass) pairs from rows with enough fields."""
    pairs = []
    for line in _lines(path):
        fields = split_fields(line)
        if len(fields) < min_fields:
            continue
        education = clean_field(fields[EDUCATION])
        workclass = clean_field(fields[WORKCLASS])
        if skip_empty and not education:
            continue
        pairs.append((education, workclass))
    return pairs


def load_column(
    path: str | Path = DEFAULT_DATA_PATH,
    index: int = WORKCLASS,
    min_fields: int = FULL_ROW_FIELDS,
    skip_empty: bool = False,
) -> list[str]:
    """Load one cleaned column from rows with enough fields."""
    values = []
    for line in _lines(path):
        fields = split_fields(line)
        if len(fields) < min_fields:
            continue
        value = clean_field(fields[index])
        if skip_empty and not value:
            continue
        values.append(value)
    return values


def preview_lines(path: str | Path = DEFAULT_DATA_PATH, count: int = 5) -> list[list[str]]:
    """Return the cleaned fields of the first ``count`` lines."""
    preview = []
    for line in _lines(path):
        if len(preview) >= count:
            break
        preview.append([clean_field(field) for field in split_fields(line)])
    return preview


def run_preview(path: str | Path = DEFAULT_DATA_PATH, out: TextIO | None = None) -> None:
    """Print the first five lines of the file, one bracketed field at a time."""
    out = out if out is not None else sys.stdout
    rows = preview_lines(path, 5)
    out.write("\n--- Executando Leitura Simples ---\n")
    for number, fields in enumerate(rows, start=1):
        out.write(f"Linha {number}: " + "".join(f"[{field}] " for field in fields) + "\n")
    out.write("--- Fim da Leitura Simples ---\n")